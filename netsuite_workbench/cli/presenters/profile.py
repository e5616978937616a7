from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.entities.column_profile import DetectedColumnType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rich.console import Console

    from ...domain.entities.column_profile import ColumnProfile

_TYPE_STYLES: dict[DetectedColumnType, str] = {
    DetectedColumnType.STRING: "white",
    DetectedColumnType.NUMBER: "yellow",
    DetectedColumnType.CURRENCY: "yellow",
    DetectedColumnType.DATE: "green",
    DetectedColumnType.BOOLEAN: "blue",
    DetectedColumnType.EMAIL: "cyan",
    DetectedColumnType.PHONE: "cyan",
    DetectedColumnType.MIXED: "red",
}


class ProfilePresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(
        self, file_name: str, row_count: int, profiles: Sequence[ColumnProfile]
    ) -> None:
        table = Table(
            title=f"Column Profile: {file_name} ({row_count:,} rows)",
            header_style="bold cyan",
            border_style="bright_blue",
        )
        table.add_column("Column", style="cyan", no_wrap=True)
        table.add_column("Type", no_wrap=True)
        table.add_column("Filled", justify="right")
        table.add_column("Empty", justify="right")
        table.add_column("Unique", justify="right")
        table.add_column("Min", overflow="fold")
        table.add_column("Max", overflow="fold")
        table.add_column("Top Values", style="dim", overflow="fold", ratio=2)
        for profile in profiles:
            style = _TYPE_STYLES.get(profile.detected_type, "white")
            table.add_row(
                escape(profile.name),
                f"[{style}]{profile.detected_type.value}[/{style}]",
                str(profile.non_null_count),
                str(profile.null_count),
                str(profile.unique_count),
                escape(profile.min or ""),
                escape(profile.max or ""),
                escape(
                    ", ".join(f"{tv.value} ({tv.count})" for tv in profile.top_values)
                ),
            )
        self.console.print(table)
