"""Export command - map an item CSV export to one metadata file per item.

Thin adapter between click and ExportRecordsUseCase: it parses arguments,
layers them over the loaded configuration, runs the use case and reports.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import cast

import click
from rich.console import Console
from rich.table import Table

from ...application.models import ExportRecordsRequest
from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer

console = Console()


@dataclass(frozen=True)
class ExportCommandOptions:
    output_dir: Path | None
    config_file: Path | None
    base_url: str | None
    metadata_prefix: str | None
    delimiter: str | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ExportCommandOptions:
        return cls(
            output_dir=cast("Path | None", options.get("output_dir")),
            config_file=cast("Path | None", options.get("config_file")),
            base_url=cast("str | None", options.get("base_url")),
            metadata_prefix=cast("str | None", options.get("metadata_prefix")),
            delimiter=cast("str | None", options.get("delimiter")),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument("csv_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to an oaipmh_repository.toml config file (default: ./oaipmh_repository.toml)",
)
@click.option(
    "--output-dir",
    "output_dir",
    type=click.Path(path_type=Path),
    help="Output directory for record files (default: <csv_file dir>/oai)",
)
@click.option(
    "--base-url",
    "base_url",
    help="Public site URL used for item identifiers and file paths",
)
@click.option(
    "--prefix",
    "metadata_prefix",
    help="Metadata prefix to export (default: oai_dc)",
)
@click.option(
    "--delimiter",
    help="Separator between multiple values in one CSV cell (default: ^^)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def export_command(csv_file: Path, **options: object) -> None:
    """Export every item in CSV_FILE as an OAI-PMH metadata record.

    Columns are headed "<Element Set>:<Element>", e.g. "Dublin Core:Title"
    or "Item Type Metadata:Location". An "id" column names the item and a
    "files" column lists its files.

    Examples:

    \b
        oaipmh-repository export items.csv --base-url https://archive.example.org

    \b
        oaipmh-repository export items.csv --output-dir oai/ -v
    """
    command_options = ExportCommandOptions.from_kwargs(dict(options))
    config = ConfigLoader.load(config_file=command_options.config_file)
    overrides: dict[str, str] = {}
    if command_options.base_url is not None:
        overrides["base_url"] = command_options.base_url
    if command_options.metadata_prefix is not None:
        overrides["metadata_prefix"] = command_options.metadata_prefix
    if command_options.delimiter is not None:
        overrides["value_delimiter"] = command_options.delimiter
    try:
        config = replace(config, **overrides)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    output_dir = command_options.output_dir or (csv_file.parent / "oai")
    request = ExportRecordsRequest(
        source=csv_file,
        output_dir=output_dir,
        metadata_prefix=config.metadata_prefix,
        verbose=command_options.verbose,
    )
    container = DependencyContainer(
        config=config, verbose=command_options.verbose, console=console
    )
    use_case = container.create_export_records_use_case()
    response = use_case.execute(request)

    if response.failed:
        table = Table(title="Failed Items")
        table.add_column("Item", style="cyan")
        table.add_column("Error", style="red")
        for item_id, message in response.failed:
            table.add_row(item_id, message)
        console.print(table)

    if response.error is not None:
        raise click.ClickException(response.error)
    if response.has_failures:
        raise click.ClickException("Export completed with errors")
