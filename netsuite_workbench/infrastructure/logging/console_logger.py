from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort
from ...domain.entities.validation import IssueSeverity

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ...domain.entities.column_profile import ColumnProfile
    from ...domain.entities.validation import ValidationIssue


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    file_name: str = ""
    record_type: str = ""


def _fresh_stats() -> dict[str, int]:
    return {
        "files_loaded": 0,
        "rows_loaded": 0,
        "columns_profiled": 0,
        "files_written": 0,
        "warnings": 0,
        "errors": 0,
    }


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = _fresh_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_upload_loaded(
        self, file_name: str, row_count: int, column_count: int
    ) -> None:
        self.clear_context()
        self.set_context(file_name=file_name)
        self._stats["files_loaded"] += 1
        self._stats["rows_loaded"] += row_count
        msg = f"Loaded {row_count:,} rows from {file_name}"
        if self.verbosity >= LogLevel.DEBUG:
            msg += f" ({column_count} columns)"
        self.verbose(msg)

    @override
    def log_profiles(self, profiles: Sequence[ColumnProfile]) -> None:
        self._stats["columns_profiled"] += len(profiles)
        self.verbose(f"Profiled {len(profiles)} columns")
        if self.verbosity >= LogLevel.DEBUG:
            for profile in profiles:
                self.debug(
                    f"  {profile.name}: {profile.detected_type.value} "
                    f"({profile.non_null_count} filled, {profile.null_count} empty)"
                )

    @override
    def log_mapping_summary(
        self,
        mapped_count: int,
        total_count: int,
        *,
        record_type: str = "",
        auto_matched: int = 0,
    ) -> None:
        msg = f"{mapped_count} of {total_count} columns mapped"
        if record_type:
            self.set_context(record_type=record_type)
            msg += f" to {record_type}"
        if auto_matched:
            msg += f" ({auto_matched} auto-matched)"
        self.verbose(msg)

    @override
    def log_issues(self, issues: Sequence[ValidationIssue]) -> None:
        if not issues:
            self.success("All checks passed")
            return
        for issue in issues:
            if issue.severity is IssueSeverity.ERROR:
                self.error(issue.message)
            else:
                self.warning(issue.message)

    @override
    def log_file_written(self, path: Path, kind: str) -> None:
        self._stats["files_written"] += 1
        self.success(f"Wrote {kind}: {path}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Workbench Statistics:[/dim]")
            self.console.print(
                f"[dim]  Files loaded: {self._stats['files_loaded']}[/dim]"
            )
            self.console.print(
                f"[dim]  Rows loaded: {self._stats['rows_loaded']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Columns profiled: {self._stats['columns_profiled']}[/dim]"
            )
            self.console.print(
                f"[dim]  Files written: {self._stats['files_written']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = _fresh_stats()

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.file_name:
            parts.append(self._context.file_name)
        if self._context.record_type:
            parts.append(self._context.record_type)
        return escape(f"[{':'.join(parts)}] ") if parts else ""
