from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.catalog.registry import field_label, record_type_label
from ...domain.entities.validation import IssueSeverity
from ...domain.services.transforms import transform_label

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import ExportWorkbenchResponse


class ExportSummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ExportWorkbenchResponse) -> None:
        if response.record_type is None:
            return
        self.console.print()
        self.console.print(self._build_mapping_table(response))
        if response.export is not None:
            self.console.print()
            self.console.print(self._build_issue_table(response))
        self._print_outputs(response)

    def _build_mapping_table(self, response: ExportWorkbenchResponse) -> Table:
        assert response.record_type is not None
        table = Table(
            title=f"Column Mappings: {record_type_label(response.record_type)}",
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("Source Column", style="cyan", no_wrap=True)
        table.add_column("NetSuite Field")
        table.add_column("Transform", style="magenta")
        for mapping in response.mappings:
            if mapping.is_mapped:
                target = (
                    f"{field_label(response.record_type, mapping.target_field)} "
                    f"[dim]({mapping.target_field})[/dim]"
                )
            else:
                target = "[yellow]Not mapped[/yellow]"
            table.add_row(
                escape(mapping.source_column),
                target,
                transform_label(mapping.transform),
            )
        return table

    def _build_issue_table(self, response: ExportWorkbenchResponse) -> Table:
        assert response.export is not None
        table = Table(title="Validation", header_style="bold cyan")
        table.add_column("Severity", no_wrap=True)
        table.add_column("Message", overflow="fold")
        if not response.export.issues:
            table.add_row("[green]OK[/green]", "No validation issues found")
        for issue in response.export.issues:
            if issue.severity is IssueSeverity.ERROR:
                table.add_row("[bold red]Error[/bold red]", escape(issue.message))
            else:
                table.add_row("[yellow]Warning[/yellow]", escape(issue.message))
        return table

    def _print_outputs(self, response: ExportWorkbenchResponse) -> None:
        export = response.export
        if export is not None:
            self.console.print(
                f"\n[bold]Export:[/bold] {export.row_count:,} rows x "
                f"{export.column_count} columns"
            )
        if response.csv_path is not None:
            self.console.print(f"[green]✓[/green] CSV: {response.csv_path}")
        if response.workbook_path is not None:
            self.console.print(f"[green]✓[/green] Workbook: {response.workbook_path}")
        if response.template_id is not None:
            self.console.print(
                f"[green]✓[/green] Template saved [dim]({response.template_id})[/dim]"
            )
