from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path
    from xml.etree.ElementTree import Element

    from .repositories import ItemPort


@runtime_checkable
class DisplayUrlResolverPort(Protocol):
    pass

    def __call__(self, item: ItemPort) -> str: ...


@runtime_checkable
class MetadataFormatPort(Protocol):
    pass

    metadata_prefix: str
    metadata_namespace: str
    metadata_schema: str

    def append_metadata(self, item: ItemPort, metadata_element: Element) -> None: ...


@runtime_checkable
class MetadataWriterPort(Protocol):
    pass

    def write(
        self, item: ItemPort, metadata_format: MetadataFormatPort, output: Path
    ) -> None: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_export_start(
        self, source: Path, metadata_prefix: str, output_dir: Path
    ) -> None: ...

    def log_items_loaded(self, count: int) -> None: ...

    def log_item_written(self, item_id: str, output: Path) -> None: ...

    def log_final_stats(self) -> None: ...
