from .dc_element import DCElement
from .item import FileRecord, ItemRecord, TextValue

__all__ = [
    "DCElement",
    "FileRecord",
    "ItemRecord",
    "TextValue",
]
