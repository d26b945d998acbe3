"""OAI-PMH repository metadata package.

Maps archive items (multi-valued, named element texts) to the Dublin Core
records an OAI-PMH repository serves.

Features:
- oai_dc metadata format with the archive's field normalization rules
- metadata format registry keyed by metadata prefix
- item loading from CSV exports
- one-file-per-item record export via the ``oaipmh-repository`` CLI
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("oaipmh-repository")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

# Core exports
from oaipmh_repository.domain.entities.item import FileRecord, ItemRecord, TextValue
from oaipmh_repository.infrastructure.io.metadata_formats import get_metadata_format
from oaipmh_repository.infrastructure.io.oai_dc import (
    OaiDcMetadataFormat,
    build_metadata_tree,
    write_metadata_file,
)

__all__ = [
    "__version__",
    # Metadata formats
    "OaiDcMetadataFormat",
    "get_metadata_format",
    # Output
    "build_metadata_tree",
    "write_metadata_file",
    # Items
    "FileRecord",
    "ItemRecord",
    "TextValue",
]
