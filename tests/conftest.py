from collections.abc import Callable

import pytest

from oaipmh_repository.constants import ElementSets
from oaipmh_repository.domain.entities.item import FileRecord, ItemRecord

BASE_URL = "https://archive.example.org"

_ENV_VARS = (
    "OAIPMH_BASE_URL",
    "OAIPMH_METADATA_PREFIX",
    "OAIPMH_VALUE_DELIMITER",
    "OAIPMH_FILES_BASE_URL",
)


@pytest.fixture(autouse=True)
def _isolated_repository_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    """Keep developer environment and ./oaipmh_repository.toml out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))


@pytest.fixture
def make_item() -> Callable[..., ItemRecord]:
    """Build an ItemRecord from keyword lists of Dublin Core values.

    ``location``, ``state`` and ``country`` go to Item Type Metadata; every
    other keyword is a Dublin Core field named after the keyword.
    """

    def _make(
        item_id: str = "1",
        *,
        files: list[str] | None = None,
        **fields: list[str],
    ) -> ItemRecord:
        values: dict[tuple[str, str], list[str]] = {}
        for name, texts in fields.items():
            if name in {"location", "state", "country"}:
                key = (ElementSets.ITEM_TYPE_METADATA, name.capitalize())
            else:
                key = (ElementSets.DUBLIN_CORE, name.capitalize())
            values[key] = list(texts)
        file_records = [
            FileRecord(filename=name, base_url=BASE_URL) for name in files or []
        ]
        return ItemRecord.from_values(item_id, values, file_records)

    return _make


@pytest.fixture
def resolve_url() -> Callable[[ItemRecord], str]:
    def _resolve(item: ItemRecord) -> str:
        return f"{BASE_URL}/items/show/{item.item_id}"

    return _resolve
