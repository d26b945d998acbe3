from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_export_start(
        self, source: Path, metadata_prefix: str, output_dir: Path
    ) -> None:
        return None

    @override
    def log_items_loaded(self, count: int) -> None:
        return None

    @override
    def log_item_written(self, item_id: str, output: Path) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
