from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from ...domain.entities.column_profile import ColumnProfile
    from ...domain.entities.mapping import FieldMapping
    from ...domain.entities.record_type import RecordType
    from ...domain.entities.validation import ExportResult, ValidationIssue
    from ...domain.entities.upload import UploadedTable


@runtime_checkable
class UploadReaderPort(Protocol):
    pass

    def read(self, path: Path) -> UploadedTable: ...


@runtime_checkable
class ExportWriterPort(Protocol):
    pass

    def write_csv(self, result: ExportResult, output_dir: Path) -> Path: ...

    def write_workbook(
        self,
        rows: Sequence[Mapping[str, str]],
        mappings: Sequence[FieldMapping],
        record_type: RecordType,
        profiles: Sequence[ColumnProfile],
        output_dir: Path,
    ) -> Path: ...


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_upload_loaded(
        self, file_name: str, row_count: int, column_count: int
    ) -> None: ...

    def log_profiles(self, profiles: Sequence[ColumnProfile]) -> None: ...

    def log_mapping_summary(
        self,
        mapped_count: int,
        total_count: int,
        *,
        record_type: str = "",
        auto_matched: int = 0,
    ) -> None: ...

    def log_issues(self, issues: Sequence[ValidationIssue]) -> None: ...

    def log_file_written(self, path: Path, kind: str) -> None: ...

    def log_final_stats(self) -> None: ...
