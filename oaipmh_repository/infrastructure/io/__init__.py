"""Infrastructure I/O: CSV input and oai_dc XML output."""

from .csv_reader import CSVReader, CSVReadOptions
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    MetadataFormatNotFoundError,
    RepositoryInfrastructureError,
)
from .metadata_formats import (
    describe_metadata_format,
    get_metadata_format,
    list_metadata_formats,
)
from .oai_dc import MetadataFileWriter, OaiDcMetadataFormat

__all__ = [
    "CSVReadOptions",
    "CSVReader",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "MetadataFileWriter",
    "MetadataFormatNotFoundError",
    "OaiDcMetadataFormat",
    "RepositoryInfrastructureError",
    "describe_metadata_format",
    "get_metadata_format",
    "list_metadata_formats",
]
