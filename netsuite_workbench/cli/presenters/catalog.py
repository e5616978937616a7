from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.catalog.registry import (
    fields_for,
    list_record_types,
    record_type_label,
    required_fields_for,
)
from ...domain.services.transforms import TRANSFORM_OPTIONS

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.entities.mapping import MappingTemplate
    from ...domain.entities.record_type import RecordType


class CatalogPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present_record_types(self) -> None:
        table = Table(title="NetSuite Record Types", header_style="bold cyan")
        table.add_column("Record Type", style="cyan", no_wrap=True)
        table.add_column("Label")
        table.add_column("Fields", justify="right", style="yellow")
        table.add_column("Required", style="dim", overflow="fold")
        for record_type in list_record_types():
            table.add_row(
                record_type.value,
                record_type_label(record_type),
                str(len(fields_for(record_type))),
                ", ".join(f.field_id for f in required_fields_for(record_type)),
            )
        self.console.print(table)

    def present_fields(self, record_type: RecordType) -> None:
        table = Table(
            title=f"{record_type_label(record_type)} Fields", header_style="bold cyan"
        )
        table.add_column("Field ID", style="cyan", no_wrap=True)
        table.add_column("Label")
        table.add_column("Type", style="magenta")
        table.add_column("Required", justify="center")
        for field_def in fields_for(record_type):
            table.add_row(
                field_def.field_id,
                field_def.label,
                field_def.type.value,
                "[red]✓[/red]" if field_def.required else "",
            )
        self.console.print(table)

    def present_transforms(self) -> None:
        table = Table(title="Value Transforms", header_style="bold cyan")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Label")
        for option in TRANSFORM_OPTIONS:
            table.add_row(option.value.value, option.label)
        self.console.print(table)

    def present_templates(self, templates: list[MappingTemplate]) -> None:
        if not templates:
            self.console.print("[dim]No saved mapping templates[/dim]")
            return
        table = Table(title="Mapping Templates", header_style="bold cyan")
        table.add_column("ID", style="dim", no_wrap=True)
        table.add_column("Name", style="cyan")
        table.add_column("Record Type")
        table.add_column("Mapped", justify="right", style="yellow")
        table.add_column("Updated", style="dim")
        for template in templates:
            mapped = sum(1 for m in template.mappings if m.is_mapped)
            table.add_row(
                template.id,
                escape(template.name),
                template.record_type.value,
                f"{mapped}/{len(template.mappings)}",
                template.updated_at.strftime("%Y-%m-%d %H:%M"),
            )
        self.console.print(table)
