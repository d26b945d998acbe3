from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class RepositoryInfrastructureError(Exception):
    pass


class DataSourceError(RepositoryInfrastructureError):
    """An item source that could not be read.

    The message reads ``<reason>: <path>``, followed by ``: <detail>`` when the
    underlying error has something to add.
    """

    def __init__(self, path: Path, reason: str, detail: str | None = None) -> None:
        message = f"{reason}: {path}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.path = path
        self.reason = reason


class DataSourceNotFoundError(DataSourceError):
    def __init__(self, path: Path, reason: str = "File not found") -> None:
        super().__init__(path, reason)


class DataParseError(DataSourceError):
    pass


class MetadataFormatNotFoundError(RepositoryInfrastructureError, KeyError):
    def __init__(self, prefix: str) -> None:
        super().__init__(f"Unknown metadata prefix '{prefix}'")
        self.prefix = prefix

    def __str__(self) -> str:
        # KeyError would repr() the message.
        return str(self.args[0])
