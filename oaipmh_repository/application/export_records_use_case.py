from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from .models import ExportRecordsResponse

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from .models import ExportRecordsRequest
    from .ports.repositories import IdentifiedItemPort, ItemRepositoryPort
    from .ports.services import LoggerPort, MetadataFormatPort, MetadataWriterPort

VERBOSE_TRACEBACK_LEVEL = 2


@dataclass(slots=True)
class ExportRecordsDependencies:
    logger: LoggerPort
    item_repository: ItemRepositoryPort
    metadata_writer: MetadataWriterPort
    metadata_format_factory: Callable[[str], MetadataFormatPort]


class ExportRecordsUseCase:
    pass

    def __init__(self, dependencies: ExportRecordsDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._item_repository = dependencies.item_repository
        self._metadata_writer = dependencies.metadata_writer
        self._metadata_format_factory = dependencies.metadata_format_factory

    def execute(self, request: ExportRecordsRequest) -> ExportRecordsResponse:
        response = ExportRecordsResponse()
        self.logger.log_export_start(
            request.source, request.metadata_prefix, request.output_dir
        )
        try:
            metadata_format = self._metadata_format_factory(request.metadata_prefix)
            items = self._item_repository.load_items(request.source)
        except Exception as exc:
            response.error = str(exc)
            self.logger.error(f"{request.source.name}: {exc}")
            return response
        self.logger.log_items_loaded(len(items))
        if not items:
            self.logger.warning(f"No items found in {request.source.name}")
        claimed: dict[Path, str] = {}
        for item in items:
            output = self._output_path(request.output_dir, item)
            if output in claimed:
                reason = (
                    f"{output.name} is already the output of item {claimed[output]}"
                )
                response.failed.append((item.item_id, reason))
                self.logger.error(f"Item {item.item_id}: {reason}")
                continue
            claimed[output] = item.item_id
            try:
                self._metadata_writer.write(item, metadata_format, output)
            except Exception as exc:
                response.failed.append((item.item_id, str(exc)))
                self.logger.error(f"Item {item.item_id}: {exc}")
                if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                    self.logger.error(traceback.format_exc())
                continue
            response.written.append(output)
            self.logger.log_item_written(item.item_id, output)
        response.success = not response.failed
        if response.written:
            self.logger.success(
                f"Wrote {len(response.written):,} {request.metadata_prefix} records to {request.output_dir}"
            )
        self.logger.log_final_stats()
        return response

    @staticmethod
    def _output_path(output_dir: Path, item: IdentifiedItemPort) -> Path:
        safe_id = "".join(
            ch if ch.isalnum() or ch in "-_." else "_" for ch in item.item_id
        )
        return output_dir / f"{safe_id or 'item'}.xml"
