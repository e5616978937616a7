import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import ConfigLoader
from ...domain.catalog.registry import field_label
from ...domain.services.transforms import transform_label
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.exceptions import DataSourceError
from ..presenters.catalog import CatalogPresenter

console = Console()


def _container() -> DependencyContainer:
    return DependencyContainer(console=console, config=ConfigLoader.load())


def _user_or_default(user_id: str | None) -> str:
    return user_id or ConfigLoader.load().default_user


@click.group()
def templates_command() -> None:
    """Manage saved mapping templates."""


@templates_command.command("list")
@click.option("--user", "user_id", help="Owner of the mapping templates")
def list_templates_command(user_id: str | None) -> None:
    repository = _container().create_template_repository()
    try:
        templates = repository.list_templates(_user_or_default(user_id))
    except (DataSourceError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    CatalogPresenter(console).present_templates(templates)


@templates_command.command("show")
@click.argument("template_id")
@click.option("--user", "user_id", help="Owner of the mapping templates")
def show_template_command(template_id: str, user_id: str | None) -> None:
    repository = _container().create_template_repository()
    try:
        template = repository.get_template(_user_or_default(user_id), template_id)
    except (DataSourceError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    table = Table(
        title=f"{escape(template.name)} ({template.record_type.value})",
        header_style="bold cyan",
    )
    table.add_column("Source Column", style="cyan", no_wrap=True)
    table.add_column("NetSuite Field")
    table.add_column("Transform", style="magenta")
    for mapping in template.mappings:
        target = (
            field_label(template.record_type, mapping.target_field)
            if mapping.is_mapped
            else "[yellow]Not mapped[/yellow]"
        )
        table.add_row(
            escape(mapping.source_column), target, transform_label(mapping.transform)
        )
    console.print(table)


@templates_command.command("delete")
@click.argument("template_id")
@click.option("--user", "user_id", help="Owner of the mapping templates")
def delete_template_command(template_id: str, user_id: str | None) -> None:
    repository = _container().create_template_repository()
    try:
        repository.delete_template(_user_or_default(user_id), template_id)
    except (DataSourceError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    console.print(f"[green]✓[/green] Deleted mapping template {template_id}")
