"""Field handlers for the oai_dc mapping.

Each handler turns the stored values of one Dublin Core field into the
ordered list of elements it contributes to an ``oai_dc:dc`` record. Handlers
never touch XML; the metadata format appends what they return.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from functools import partial
from typing import TYPE_CHECKING, TypeAlias

from ...constants import (
    Defaults,
    DublinCoreFields,
    ElementSets,
    PlaceNames,
    SubjectVocabulary,
    TypeVocabulary,
)
from ..entities.dc_element import DCElement

if TYPE_CHECKING:
    from ...application.ports.repositories import ItemPort, TextValuePort

FieldHandler: TypeAlias = Callable[
    ["ItemPort", "Sequence[TextValuePort]"], list[DCElement]
]
UrlResolver: TypeAlias = Callable[["ItemPort"], str]


def element_set_for(field_name: str) -> str:
    if field_name in DublinCoreFields.ITEM_TYPE_FIELDS:
        return ElementSets.ITEM_TYPE_METADATA
    return ElementSets.DUBLIN_CORE


def stored_field_name(field_name: str) -> str:
    """Camelize a field name the way element names are stored (``title`` -> ``Title``)."""
    return "".join(part.capitalize() for part in field_name.split("_"))


def first_text(texts: Sequence[TextValuePort]) -> str:
    return texts[0].text if texts else ""


def split_parts(text: str) -> list[str]:
    return [part.strip() for part in text.split(",")]


def identifier_elements(
    item: ItemPort, resolve_url: UrlResolver, *, kind: str = Defaults.THUMBNAIL_KIND
) -> list[DCElement]:
    elements = [DCElement("dc:identifier", resolve_url(item))]
    files = item.get_files()
    if files:
        elements.append(
            DCElement("dcterms:hasFormat", files[0].get_derivative_path(kind))
        )
    return elements


def subject_elements(texts: Sequence[TextValuePort]) -> list[DCElement]:
    # "Places, Town" and "Places, Shore" become Places, Town, Shore.
    subjects: list[str] = []
    for value in texts:
        subjects.extend(split_parts(value.text))
    unique = dict.fromkeys(subjects)
    return [
        DCElement("dc:subject", subject)
        for subject in unique
        if subject not in SubjectVocabulary.EXCLUDED
    ]


def type_elements(text: str) -> list[DCElement]:
    elements: list[DCElement] = []
    stop = False
    for index, part in enumerate(split_parts(text)):
        if stop:
            break
        if index > 0:
            elements.append(DCElement("dc:format", part))
            continue
        if part in TypeVocabulary.TEXT_TYPES:
            elements.append(DCElement("dc:type", TypeVocabulary.TEXT))
            stop = part == TypeVocabulary.ARTICLE
        elif part == TypeVocabulary.MAP:
            elements.append(DCElement("dc:type", TypeVocabulary.IMAGE))
            elements.append(DCElement("dc:format", TypeVocabulary.MAP))
            stop = True
        else:
            elements.append(DCElement("dc:type", part))
    return elements


def created_elements(text: str) -> list[DCElement]:
    return [DCElement("dcterms:created", text)] if text else []


def abstract_elements(text: str) -> list[DCElement]:
    return [DCElement("dcterms:abstract", text)] if text else []


def qualify_place(place: str, state: str, country: str) -> str:
    location = PlaceNames.ABBREVIATIONS.get(place, place)
    if state:
        state = PlaceNames.STATE_NAMES.get(state, state)
        location = f"{location}, {state}" if location else state
    if country and country != PlaceNames.HOME_COUNTRY:
        location = f"{location}, {country}" if location else country
    return location


def spatial_elements(text: str, state: str, country: str) -> list[DCElement]:
    # Empty parts still get an element.
    return [
        DCElement("dcterms:spatial", qualify_place(part, state, country))
        for part in split_parts(text)
    ]


def location_elements(item: ItemPort, text: str) -> list[DCElement]:
    set_name = ElementSets.ITEM_TYPE_METADATA
    state = first_text(item.get_field_texts(set_name, DublinCoreFields.STATE))
    country = first_text(item.get_field_texts(set_name, DublinCoreFields.COUNTRY))
    return spatial_elements(text, state, country)


def repeated_elements(
    field_name: str, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return [DCElement(f"dc:{field_name}", value.text) for value in texts]


def _identifier_handler(
    resolve_url: UrlResolver, item: ItemPort, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return identifier_elements(item, resolve_url)


def _subject_handler(
    item: ItemPort, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return subject_elements(texts)


def _type_handler(item: ItemPort, texts: Sequence[TextValuePort]) -> list[DCElement]:
    return type_elements(first_text(texts))


def _date_handler(item: ItemPort, texts: Sequence[TextValuePort]) -> list[DCElement]:
    return created_elements(first_text(texts))


def _description_handler(
    item: ItemPort, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return abstract_elements(first_text(texts))


def _location_handler(
    item: ItemPort, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return location_elements(item, first_text(texts))


def _repeated_handler(
    field_name: str, item: ItemPort, texts: Sequence[TextValuePort]
) -> list[DCElement]:
    return repeated_elements(field_name, texts)


def build_field_handlers(resolve_url: UrlResolver) -> dict[str, FieldHandler]:
    """Resolve the handler of every field in output order."""
    special: dict[str, FieldHandler] = {
        "identifier": partial(_identifier_handler, resolve_url),
        "subject": _subject_handler,
        "type": _type_handler,
        "date": _date_handler,
        "description": _description_handler,
        "location": _location_handler,
    }
    return {
        name: special.get(name) or partial(_repeated_handler, name)
        for name in DublinCoreFields.ORDER
    }


__all__ = [
    "FieldHandler",
    "UrlResolver",
    "abstract_elements",
    "build_field_handlers",
    "created_elements",
    "element_set_for",
    "first_text",
    "identifier_elements",
    "location_elements",
    "qualify_place",
    "repeated_elements",
    "spatial_elements",
    "split_parts",
    "stored_field_name",
    "subject_elements",
    "type_elements",
]
