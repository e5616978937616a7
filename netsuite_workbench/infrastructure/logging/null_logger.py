from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ...domain.entities.column_profile import ColumnProfile
    from ...domain.entities.validation import ValidationIssue


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_upload_loaded(
        self, file_name: str, row_count: int, column_count: int
    ) -> None:
        return

    @override
    def log_profiles(self, profiles: Sequence[ColumnProfile]) -> None:
        return

    @override
    def log_mapping_summary(
        self,
        mapped_count: int,
        total_count: int,
        *,
        record_type: str = "",
        auto_matched: int = 0,
    ) -> None:
        return

    @override
    def log_issues(self, issues: Sequence[ValidationIssue]) -> None:
        return

    @override
    def log_file_written(self, path: Path, kind: str) -> None:
        return

    @override
    def log_final_stats(self) -> None:
        return
