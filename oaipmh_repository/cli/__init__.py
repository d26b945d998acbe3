import click

from .commands.export import export_command
from .commands.fields import list_fields_command
from .commands.formats import list_formats_command


@click.group()
def app() -> None:
    pass


app.add_command(export_command, name="export")
app.add_command(list_fields_command, name="fields")
app.add_command(list_formats_command, name="formats")
__all__ = ["app"]
