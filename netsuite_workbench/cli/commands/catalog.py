import click
from rich.console import Console

from ...domain.entities.record_type import RecordType
from ..presenters.catalog import CatalogPresenter

console = Console()

RECORD_TYPE_CHOICE = click.Choice([rt.value for rt in RecordType])


@click.command()
def record_types_command() -> None:
    """List the NetSuite record types the workbench can export."""
    CatalogPresenter(console).present_record_types()


@click.command()
@click.argument("record_type", type=RECORD_TYPE_CHOICE)
def fields_command(record_type: str) -> None:
    """Show the import fields of RECORD_TYPE."""
    CatalogPresenter(console).present_fields(RecordType(record_type))


@click.command()
def transforms_command() -> None:
    """List the value transforms a mapping can apply."""
    CatalogPresenter(console).present_transforms()
