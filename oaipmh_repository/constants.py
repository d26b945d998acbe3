from typing import ClassVar


class Defaults:
    CONTRIBUTOR = "Southwest Harbor Public Library"
    METADATA_PREFIX = "oai_dc"
    VALUE_DELIMITER = "^^"
    ID_COLUMN = "id"
    FILES_COLUMN = "files"
    THUMBNAIL_KIND = "thumbnail"


class ElementSets:
    DUBLIN_CORE = "Dublin Core"
    ITEM_TYPE_METADATA = "Item Type Metadata"


class DublinCoreFields:
    ORDER: ClassVar[tuple[str, ...]] = (
        "title",
        "creator",
        "subject",
        "description",
        "publisher",
        "date",
        "type",
        "identifier",
        "rights",
        "location",
    )
    ITEM_TYPE_FIELDS: ClassVar[frozenset[str]] = frozenset({"location"})
    STATE = "State"
    COUNTRY = "Country"


class TypeVocabulary:
    TEXT_TYPES: ClassVar[frozenset[str]] = frozenset(
        {"Article", "Document", "Publication"}
    )
    TEXT = "Text"
    ARTICLE = "Article"
    MAP = "Map"
    IMAGE = "Image"


class PlaceNames:
    ABBREVIATIONS: ClassVar[dict[str, str]] = {"MDI": "Mount Desert Island"}
    STATE_NAMES: ClassVar[dict[str, str]] = {"ME": "Maine"}
    HOME_COUNTRY = "USA"


class SubjectVocabulary:
    EXCLUDED: ClassVar[frozenset[str]] = frozenset({"Other"})


class DerivativeKinds:
    ORIGINAL = "original"
    SUPPORTED: ClassVar[tuple[str, ...]] = (
        "thumbnail",
        "square_thumbnail",
        "fullsize",
    )
    EXTENSION = ".jpg"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
