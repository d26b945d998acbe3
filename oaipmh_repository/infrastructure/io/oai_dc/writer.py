"""Writer for oai_dc record files.

Each file holds one ``<metadata>`` element wrapping the record the metadata
format appends to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree import ElementTree as ET

from ..xml_utils import tag
from .constants import OAI_NS

if TYPE_CHECKING:
    from pathlib import Path

    from ....application.ports.repositories import ItemPort
    from ....application.ports.services import MetadataFormatPort
    from ..xml_utils import XmlElement


def build_metadata_tree(
    item: ItemPort, metadata_format: MetadataFormatPort
) -> XmlElement:
    """Build the ``<metadata>`` element for a single item.

    Args:
        item: The item to describe
        metadata_format: The format that appends the record

    Returns:
        The ``<metadata>`` element with the record appended
    """
    metadata = ET.Element(tag(OAI_NS, "metadata"))
    metadata_format.append_metadata(item, metadata)
    return metadata


def write_metadata_file(
    item: ItemPort, metadata_format: MetadataFormatPort, output: Path
) -> None:
    """Write the ``<metadata>`` element for a single item to ``output``."""
    tree = ET.ElementTree(build_metadata_tree(item, metadata_format))
    output.parent.mkdir(parents=True, exist_ok=True)
    tree.write(output, xml_declaration=True, encoding="UTF-8")


class MetadataFileWriter:
    pass

    def write(
        self, item: ItemPort, metadata_format: MetadataFormatPort, output: Path
    ) -> None:
        write_metadata_file(item, metadata_format, output)
