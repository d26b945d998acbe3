"""Tests for loading items from CSV exports."""

from pathlib import Path

import pandas as pd
import pytest

from oaipmh_repository.application.ports.repositories import (
    IdentifiedItemPort,
    ItemRepositoryPort,
)
from oaipmh_repository.infrastructure.io.exceptions import DataSourceNotFoundError
from oaipmh_repository.infrastructure.repositories.item_repository import (
    CSVItemRepository,
    parse_element_column,
)

CSV_TEXT = (
    "id,Dublin Core:Title,Dublin Core:Subject,Item Type Metadata:Location,"
    "Item Type Metadata:State,files,Notes\n"
    '12,Shore Road,"Places, Town^^Places, Shore",Bar Harbor,ME,shore.tif^^b.tif,x\n'
    ",Untitled,,,,,\n"
)


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "items.csv"
    path.write_text(CSV_TEXT)
    return path


class TestParseElementColumn:
    def test_element_column(self):
        assert parse_element_column("Dublin Core:Title") == ("Dublin Core", "Title")
        assert parse_element_column(" Item Type Metadata : State ") == (
            "Item Type Metadata",
            "State",
        )

    def test_plain_columns_are_ignored(self):
        assert parse_element_column("files") is None
        assert parse_element_column(":Title") is None
        assert parse_element_column("Dublin Core:") is None


class TestCSVItemRepository:
    def test_implements_port(self):
        assert isinstance(CSVItemRepository(), ItemRepositoryPort)

    def test_load_items(self, csv_file: Path):
        repository = CSVItemRepository(files_base_url="https://a.org")

        items = repository.load_items(csv_file)

        assert len(items) == 2
        first = items[0]
        assert isinstance(first, IdentifiedItemPort)
        assert first.item_id == "12"
        assert [t.text for t in first.get_field_texts("Dublin Core", "Title")] == [
            "Shore Road"
        ]
        assert [t.text for t in first.get_field_texts("Dublin Core", "Subject")] == [
            "Places, Town",
            "Places, Shore",
        ]
        assert [
            t.text for t in first.get_field_texts("Item Type Metadata", "State")
        ] == ["ME"]
        assert [f.filename for f in first.get_files()] == ["shore.tif", "b.tif"]
        assert first.get_files()[0].get_derivative_path("thumbnail") == (
            "https://a.org/files/thumbnails/shore.jpg"
        )

    def test_missing_id_uses_row_number(self, csv_file: Path):
        items = CSVItemRepository().load_items(csv_file)

        assert items[1].item_id == "2"

    def test_blank_cells_have_no_values(self, csv_file: Path):
        items = CSVItemRepository().load_items(csv_file)

        assert items[1].get_field_texts("Dublin Core", "Subject") == []
        assert items[1].get_files() == []

    def test_custom_delimiter(self):
        frame = pd.DataFrame({"Dublin Core:Creator": ["Ann| Bo |"]})
        repository = CSVItemRepository(value_delimiter="|")

        items = repository.items_from_frame(frame)

        assert [t.text for t in items[0].get_field_texts("Dublin Core", "Creator")] == [
            "Ann",
            "Bo",
        ]

    def test_missing_source(self, tmp_path: Path):
        with pytest.raises(DataSourceNotFoundError):
            CSVItemRepository().load_items(tmp_path / "missing.csv")
