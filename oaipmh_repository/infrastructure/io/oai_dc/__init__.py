"""oai_dc (unqualified Dublin Core) metadata format."""

from .constants import (
    DC_NS,
    DCTERMS_NS,
    METADATA_PREFIX,
    OAI_DC_NS,
    OAI_DC_SCHEMA,
    OAI_NS,
)
from .metadata_format import OaiDcMetadataFormat
from .writer import MetadataFileWriter, build_metadata_tree, write_metadata_file

__all__ = [
    "DCTERMS_NS",
    "DC_NS",
    "METADATA_PREFIX",
    "MetadataFileWriter",
    "OAI_DC_NS",
    "OAI_DC_SCHEMA",
    "OAI_NS",
    "OaiDcMetadataFormat",
    "build_metadata_tree",
    "write_metadata_file",
]
