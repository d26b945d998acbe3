import click
from rich.console import Console
from rich.table import Table

from ...infrastructure.io.metadata_formats import (
    describe_metadata_format,
    list_metadata_formats,
)

console = Console()


@click.command()
def list_formats_command() -> None:
    table = Table(title="Supported Metadata Formats")
    table.add_column("Prefix", style="cyan")
    table.add_column("Namespace")
    table.add_column("Schema")
    for prefix in list_metadata_formats():
        namespace, schema = describe_metadata_format(prefix)
        table.add_row(prefix, namespace, schema)
    console.print(table)
