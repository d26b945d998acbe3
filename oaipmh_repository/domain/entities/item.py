from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DerivativeKinds

ElementKey = tuple[str, str]


class TextValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class FileRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    base_url: str = ""

    def get_derivative_path(self, kind: str) -> str:
        base = self.base_url.rstrip("/")
        if kind == DerivativeKinds.ORIGINAL:
            return f"{base}/files/original/{self.filename}"
        if kind not in DerivativeKinds.SUPPORTED:
            raise ValueError(f"Unknown derivative kind '{kind}'")
        stem = PurePosixPath(self.filename).stem
        return f"{base}/files/{kind}s/{stem}{DerivativeKinds.EXTENSION}"


class ItemRecord(BaseModel):
    """In-memory item: element texts keyed by ``(set name, field name)``."""

    model_config = ConfigDict(frozen=True)

    item_id: str
    element_texts: dict[ElementKey, list[TextValue]] = Field(default_factory=dict)
    files: list[FileRecord] = Field(default_factory=list)

    @classmethod
    def from_values(
        cls,
        item_id: str,
        values: dict[ElementKey, list[str]],
        files: list[FileRecord] | None = None,
    ) -> ItemRecord:
        return cls(
            item_id=item_id,
            element_texts={
                key: [TextValue(text=text) for text in texts]
                for key, texts in values.items()
            },
            files=list(files or []),
        )

    def get_field_texts(self, set_name: str, field_name: str) -> list[TextValue]:
        return list(self.element_texts.get((set_name, field_name), []))

    def get_files(self) -> list[FileRecord]:
        return list(self.files)
