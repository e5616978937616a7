from pathlib import Path

import click
from rich.console import Console

from ...application.models import ProfileUploadRequest
from ...infrastructure.container import DependencyContainer
from ..presenters.profile import ProfilePresenter

console = Console()


@click.command()
@click.argument(
    "file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def profile_command(file_path: Path, verbose: int) -> None:
    """Profile the columns of a CSV or Excel upload."""
    container = DependencyContainer(verbose=verbose, console=console)
    use_case = container.create_workbench_use_case()
    request = ProfileUploadRequest(file_path=file_path, verbose=verbose)
    response = use_case.profile(request)
    if not response.success or response.table is None:
        raise click.ClickException("; ".join(response.errors) or "Profiling failed")
    ProfilePresenter(console).present(
        response.table.file_name, response.table.row_count, response.profiles
    )
