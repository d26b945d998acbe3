from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path


def _empty_path_list() -> list[Path]:
    return []


def _empty_error_list() -> list[tuple[str, str]]:
    return []


@dataclass(slots=True)
class ExportRecordsRequest:
    source: Path
    output_dir: Path
    metadata_prefix: str = Defaults.METADATA_PREFIX
    verbose: int = 0


@dataclass(slots=True)
class ExportRecordsResponse:
    success: bool = False
    written: list[Path] = field(default_factory=_empty_path_list)
    failed: list[tuple[str, str]] = field(default_factory=_empty_error_list)
    error: str | None = None

    @property
    def has_failures(self) -> bool:
        return bool(self.failed) or not self.success
