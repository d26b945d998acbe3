from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_records_use_case import (
    ExportRecordsDependencies,
    ExportRecordsUseCase,
)
from ..config import RepositoryConfig
from .io.metadata_formats import get_metadata_format
from .io.oai_dc.writer import MetadataFileWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.item_repository import CSVItemRepository
from .services.url_resolver import RecordUrlResolver

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..application.ports.repositories import ItemRepositoryPort
    from ..application.ports.services import (
        LoggerPort,
        MetadataFormatPort,
        MetadataWriterPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        config: RepositoryConfig | None = None,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or RepositoryConfig.from_env()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None
        self._url_resolver_instance: RecordUrlResolver | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_url_resolver(self) -> RecordUrlResolver:
        if self._url_resolver_instance is None:
            self._url_resolver_instance = RecordUrlResolver(self.config.base_url)
        return self._url_resolver_instance

    def create_item_repository(self) -> ItemRepositoryPort:
        return CSVItemRepository(
            value_delimiter=self.config.value_delimiter,
            id_column=self.config.id_column,
            files_column=self.config.files_column,
            files_base_url=self.config.resolved_files_base_url,
        )

    def create_metadata_writer(self) -> MetadataWriterPort:
        return MetadataFileWriter()

    def create_metadata_format(self, prefix: str | None = None) -> MetadataFormatPort:
        return self.metadata_format_factory()(prefix or self.config.metadata_prefix)

    def metadata_format_factory(self) -> Callable[[str], MetadataFormatPort]:
        return partial(
            _metadata_format_for,
            url_resolver_factory=self.create_url_resolver,
        )

    def create_export_records_use_case(self) -> ExportRecordsUseCase:
        dependencies = ExportRecordsDependencies(
            logger=self.create_logger(),
            item_repository=self.create_item_repository(),
            metadata_writer=self.create_metadata_writer(),
            metadata_format_factory=self.metadata_format_factory(),
        )
        return ExportRecordsUseCase(dependencies)


def _metadata_format_for(
    prefix: str,
    *,
    url_resolver_factory: Callable[[], RecordUrlResolver],
) -> MetadataFormatPort:
    return get_metadata_format(prefix, resolve_url=url_resolver_factory())


def create_default_container(
    config: RepositoryConfig | None = None, verbose: int = 0
) -> DependencyContainer:
    return DependencyContainer(config=config, verbose=verbose)
