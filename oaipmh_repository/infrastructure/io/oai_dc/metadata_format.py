"""oai_dc metadata format.

Output of the unqualified Dublin Core elements plus the handful of DC terms
(``created``, ``abstract``, ``spatial``, ``hasFormat``) the archive exposes.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from ....constants import Defaults
from ....domain.entities.dc_element import DCElement
from ....domain.services.dublin_core import (
    build_field_handlers,
    element_set_for,
    stored_field_name,
)
from ..xml_utils import append_new_element, declare_schema_location, tag
from .constants import (
    ELEMENT_NAMESPACES,
    METADATA_PREFIX,
    OAI_DC_NS,
    OAI_DC_SCHEMA,
)

if TYPE_CHECKING:
    from ....application.ports.repositories import ItemPort
    from ....domain.services.dublin_core import FieldHandler, UrlResolver
    from ..xml_utils import XmlElement


class OaiDcMetadataFormat:
    """Appends an ``oai_dc:dc`` record for an item to a ``<metadata>`` element."""

    metadata_prefix = METADATA_PREFIX
    metadata_namespace = OAI_DC_NS
    metadata_schema = OAI_DC_SCHEMA

    def __init__(self, resolve_url: UrlResolver) -> None:
        super().__init__()
        self._handlers: dict[str, FieldHandler] = build_field_handlers(resolve_url)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self._handlers)

    def map_item(self, item: ItemPort) -> list[DCElement]:
        """Return every element of the record, in output order."""
        return list(self.iter_elements(item))

    def iter_elements(self, item: ItemPort) -> Iterator[DCElement]:
        yield DCElement("dc:contributor", Defaults.CONTRIBUTOR)
        for field_name, handler in self._handlers.items():
            texts = item.get_field_texts(
                element_set_for(field_name), stored_field_name(field_name)
            )
            yield from handler(item, texts)

    def append_metadata(self, item: ItemPort, metadata_element: XmlElement) -> None:
        oai_dc = ET.SubElement(metadata_element, tag(OAI_DC_NS, "dc"))
        declare_schema_location(oai_dc, OAI_DC_NS, OAI_DC_SCHEMA)
        for element in self.iter_elements(item):
            append_new_element(
                oai_dc,
                ELEMENT_NAMESPACES[element.prefix],
                element.local_name,
                element.text,
            )
