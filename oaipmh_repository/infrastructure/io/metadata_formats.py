"""Metadata format registry, keyed by OAI-PMH metadata prefix."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .exceptions import MetadataFormatNotFoundError
from .oai_dc import OaiDcMetadataFormat

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ...application.ports.services import MetadataFormatPort
    from ...domain.services.dublin_core import UrlResolver


_FORMATS: dict[str, type[OaiDcMetadataFormat]] = {
    OaiDcMetadataFormat.metadata_prefix: OaiDcMetadataFormat,
}


def get_metadata_format(prefix: str, *, resolve_url: UrlResolver) -> MetadataFormatPort:
    try:
        format_class = _FORMATS[prefix]
    except KeyError:
        raise MetadataFormatNotFoundError(prefix) from None
    return format_class(resolve_url)


def list_metadata_formats() -> Iterable[str]:
    return _FORMATS.keys()


def describe_metadata_format(prefix: str) -> tuple[str, str]:
    """Return ``(namespace, schema)`` for a registered prefix."""
    try:
        format_class = _FORMATS[prefix]
    except KeyError:
        raise MetadataFormatNotFoundError(prefix) from None
    return format_class.metadata_namespace, format_class.metadata_schema


__all__ = [
    "describe_metadata_format",
    "get_metadata_format",
    "list_metadata_formats",
]
