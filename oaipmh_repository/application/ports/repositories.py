from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


@runtime_checkable
class TextValuePort(Protocol):
    pass

    @property
    def text(self) -> str: ...


@runtime_checkable
class FileRefPort(Protocol):
    pass

    def get_derivative_path(self, kind: str) -> str: ...


@runtime_checkable
class ItemPort(Protocol):
    pass

    def get_field_texts(
        self, set_name: str, field_name: str
    ) -> Sequence[TextValuePort]: ...

    def get_files(self) -> Sequence[FileRefPort]: ...


@runtime_checkable
class IdentifiedItemPort(ItemPort, Protocol):
    pass

    @property
    def item_id(self) -> str: ...


@runtime_checkable
class ItemRepositoryPort(Protocol):
    pass

    def load_items(self, source: Path) -> list[IdentifiedItemPort]: ...
