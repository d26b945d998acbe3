import click
from rich.console import Console
from rich.table import Table

from ...constants import DublinCoreFields
from ...domain.services.dublin_core import element_set_for, stored_field_name

console = Console()

HANDLER_DESCRIPTIONS = {
    "identifier": "dc:identifier (item URL), dcterms:hasFormat (first thumbnail)",
    "subject": "dc:subject per comma-separated term, deduplicated, 'Other' dropped",
    "type": "dc:type normalized, trailing parts as dc:format",
    "date": "dcterms:created (first value)",
    "description": "dcterms:abstract (first value)",
    "location": "dcterms:spatial per place, qualified by State and Country",
}


@click.command()
def list_fields_command() -> None:
    table = Table(title="oai_dc Field Order")
    table.add_column("#", justify="right")
    table.add_column("Field", style="cyan")
    table.add_column("Element Set")
    table.add_column("Output")
    for position, field_name in enumerate(DublinCoreFields.ORDER, start=1):
        table.add_row(
            str(position),
            stored_field_name(field_name),
            element_set_for(field_name),
            HANDLER_DESCRIPTIONS.get(field_name, f"dc:{field_name} per value"),
        )
    console.print(table)
