import click

from .commands.catalog import fields_command, record_types_command, transforms_command
from .commands.export import export_command
from .commands.profile import profile_command
from .commands.templates import templates_command


@click.group()
def app() -> None:
    pass


app.add_command(record_types_command, name="record-types")
app.add_command(fields_command, name="fields")
app.add_command(transforms_command, name="transforms")
app.add_command(profile_command, name="profile")
app.add_command(export_command, name="export")
app.add_command(templates_command, name="templates")
__all__ = ["app"]
