from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...constants import LogLevels

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(IntEnum):
    NORMAL = LogLevels.NORMAL
    VERBOSE = LogLevels.VERBOSE
    DEBUG = LogLevels.DEBUG


@dataclass(slots=True)
class LogContext:
    metadata_prefix: str = ""
    item_id: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_seconds(self) -> float:
        return (datetime.now() - self.start_time).total_seconds()


def _empty_stats() -> dict[str, int]:
    return {
        "items_loaded": 0,
        "items_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    """Rich console logger. Message text is printed literally, never as markup."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(f"{self._get_prefix()}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{self._get_prefix()}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(
                f"[dim cyan]{self._get_prefix()}{escape(message)}[/dim cyan]"
            )

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_export_start(
        self, source: Path, metadata_prefix: str, output_dir: Path
    ) -> None:
        self._context = LogContext(metadata_prefix=metadata_prefix)
        self.console.print(
            f"[bold]Exporting {escape(source.name)}[/bold] as {escape(metadata_prefix)}"
        )
        self.verbose(f"Output directory: {output_dir}")

    @override
    def log_items_loaded(self, count: int) -> None:
        self._stats["items_loaded"] += count
        self.verbose(f"Loaded {count:,} items")

    @override
    def log_item_written(self, item_id: str, output: Path) -> None:
        self.set_context(item_id=item_id)
        self._stats["items_written"] += 1
        self.verbose(f"  Wrote {output.name}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Export Statistics:[/dim]")
            self.console.print(
                f"[dim]  Items loaded: {self._stats['items_loaded']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Records written: {self._stats['items_written']:,}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )
            if self._context is not None:
                self.console.print(
                    f"[dim]  Elapsed: {self._context.elapsed_seconds():.2f}s[/dim]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.metadata_prefix:
            parts.append(self._context.metadata_prefix)
        if self._context.item_id:
            parts.append(self._context.item_id)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
