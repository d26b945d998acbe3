"""Tests for ExportRecordsUseCase."""

from io import StringIO
from pathlib import Path
from unittest.mock import Mock

import pytest
from rich.console import Console

from oaipmh_repository.application.export_records_use_case import (
    ExportRecordsDependencies,
    ExportRecordsUseCase,
)
from oaipmh_repository.application.models import ExportRecordsRequest
from oaipmh_repository.infrastructure.io.exceptions import DataSourceNotFoundError
from oaipmh_repository.infrastructure.io.oai_dc import (
    MetadataFileWriter,
    OaiDcMetadataFormat,
)
from oaipmh_repository.infrastructure.logging import (
    ConsoleLogger,
    LogLevel,
    NullLogger,
)


@pytest.fixture
def items(make_item):
    return [make_item("1", title=["One"]), make_item("2/b", title=["Two"])]


def _use_case(items, *, writer=None, format_factory=None, logger=None):
    repository = Mock()
    repository.load_items.return_value = items
    dependencies = ExportRecordsDependencies(
        logger=logger or NullLogger(),
        item_repository=repository,
        metadata_writer=writer or Mock(),
        metadata_format_factory=format_factory or Mock(return_value=Mock()),
    )
    return ExportRecordsUseCase(dependencies), repository


class TestExportRecordsUseCase:
    def test_writes_one_file_per_item(self, items, tmp_path: Path):
        writer = Mock()
        use_case, repository = _use_case(items, writer=writer)
        request = ExportRecordsRequest(source=tmp_path / "items.csv", output_dir=tmp_path)

        response = use_case.execute(request)

        assert response.success is True
        assert response.written == [tmp_path / "1.xml", tmp_path / "2_b.xml"]
        assert writer.write.call_count == 2
        repository.load_items.assert_called_once_with(tmp_path / "items.csv")

    def test_format_resolved_from_prefix(self, items, tmp_path: Path):
        factory = Mock(return_value=Mock())
        use_case, _ = _use_case(items, format_factory=factory)

        use_case.execute(
            ExportRecordsRequest(
                source=tmp_path / "items.csv", output_dir=tmp_path, metadata_prefix="oai_dc"
            )
        )

        factory.assert_called_once_with("oai_dc")

    def test_item_failure_is_recorded_and_export_continues(
        self, items, tmp_path: Path
    ):
        writer = Mock()
        writer.write.side_effect = [RuntimeError("boom"), None]
        logger = Mock()
        use_case, _ = _use_case(items, writer=writer, logger=logger)

        response = use_case.execute(
            ExportRecordsRequest(source=tmp_path / "items.csv", output_dir=tmp_path)
        )

        assert response.success is False
        assert response.failed == [("1", "boom")]
        assert response.written == [tmp_path / "2_b.xml"]
        assert response.has_failures
        logger.error.assert_called_once_with("Item 1: boom")

    def test_repository_failure(self, tmp_path: Path):
        use_case, repository = _use_case([])
        source = tmp_path / "items.csv"
        repository.load_items.side_effect = DataSourceNotFoundError(source)

        response = use_case.execute(
            ExportRecordsRequest(source=source, output_dir=tmp_path)
        )

        assert response.success is False
        assert response.error == f"File not found: {source}"
        assert response.written == []

    def test_unknown_prefix_is_reported(self, items, tmp_path: Path):
        factory = Mock(side_effect=KeyError("mods"))
        use_case, _ = _use_case(items, format_factory=factory)

        response = use_case.execute(
            ExportRecordsRequest(
                source=tmp_path / "items.csv", output_dir=tmp_path, metadata_prefix="mods"
            )
        )

        assert response.success is False
        assert response.error is not None

    def test_no_items_warns(self, tmp_path: Path):
        logger = Mock()
        use_case, _ = _use_case([], logger=logger)

        response = use_case.execute(
            ExportRecordsRequest(source=tmp_path / "items.csv", output_dir=tmp_path)
        )

        assert response.success is True
        logger.warning.assert_called_once()

    def test_real_writer_creates_files(self, items, resolve_url, tmp_path: Path):
        use_case, _ = _use_case(
            items,
            writer=MetadataFileWriter(),
            format_factory=lambda prefix: OaiDcMetadataFormat(resolve_url),
        )
        output_dir = tmp_path / "oai"

        response = use_case.execute(
            ExportRecordsRequest(source=tmp_path / "items.csv", output_dir=output_dir)
        )

        assert response.success is True
        assert (output_dir / "1.xml").read_text(encoding="utf-8").startswith("<?xml")

    def test_colliding_file_names_are_failures(self, make_item, tmp_path: Path):
        writer = Mock()
        use_case, _ = _use_case(
            [make_item("a/b"), make_item("a_b"), make_item("c")], writer=writer
        )

        response = use_case.execute(
            ExportRecordsRequest(source=tmp_path / "items.csv", output_dir=tmp_path)
        )

        assert response.success is False
        assert response.written == [tmp_path / "a_b.xml", tmp_path / "c.xml"]
        assert response.failed == [
            ("a_b", "a_b.xml is already the output of item a/b")
        ]
        assert writer.write.call_count == 2

    def test_bracketed_error_text_does_not_stop_export(
        self, items, tmp_path: Path
    ):
        buffer = StringIO()
        logger = ConsoleLogger(
            console=Console(file=buffer, force_terminal=False, width=200),
            verbosity=LogLevel.DEBUG,
        )
        writer = Mock()
        writer.write.side_effect = [RuntimeError("bad value [/b]"), None]
        use_case, _ = _use_case(items, writer=writer, logger=logger)

        response = use_case.execute(
            ExportRecordsRequest(
                source=tmp_path / "items.csv", output_dir=tmp_path, verbose=2
            )
        )

        assert response.failed == [("1", "bad value [/b]")]
        assert response.written == [tmp_path / "2_b.xml"]
        assert "Item 1: bad value [/b]" in buffer.getvalue()
