from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import Defaults

if TYPE_CHECKING:
    from pathlib import Path

    from ..domain.entities.column_profile import ColumnProfile
    from ..domain.entities.mapping import FieldMapping
    from ..domain.entities.record_type import RecordType
    from ..domain.entities.upload import UploadedTable
    from ..domain.entities.validation import ExportResult


def _empty_str_list() -> list[str]:
    return []


def _empty_profiles() -> list[ColumnProfile]:
    return []


def _empty_mappings() -> list[FieldMapping]:
    return []


@dataclass(slots=True)
class ProfileUploadRequest:
    file_path: Path
    verbose: int = 0


@dataclass(slots=True)
class ProfileUploadResponse:
    success: bool = True
    table: UploadedTable | None = None
    profiles: list[ColumnProfile] = field(default_factory=_empty_profiles)
    errors: list[str] = field(default_factory=_empty_str_list)


@dataclass(slots=True)
class ExportWorkbenchRequest:
    """Everything needed to turn one upload into NetSuite import files.

    ``record_type`` may be left empty when ``template_name`` names a saved
    template; the template's record type is used then. ``mapping_overrides``
    are applied after the template and before auto-matching.
    """

    file_path: Path
    output_dir: Path
    record_type: RecordType | None = None
    user_id: str = Defaults.USER_ID
    template_name: str | None = None
    mapping_overrides: list[FieldMapping] = field(default_factory=_empty_mappings)
    auto_match: bool = Defaults.AUTO_MATCH
    write_workbook: bool = Defaults.WRITE_WORKBOOK
    save_template_as: str | None = None
    timestamp_ms: int | None = None
    verbose: int = 0


@dataclass(slots=True)
class ExportWorkbenchResponse:
    success: bool = True
    record_type: RecordType | None = None
    table: UploadedTable | None = None
    profiles: list[ColumnProfile] = field(default_factory=_empty_profiles)
    mappings: list[FieldMapping] = field(default_factory=_empty_mappings)
    export: ExportResult | None = None
    csv_path: Path | None = None
    workbook_path: Path | None = None
    template_id: str | None = None
    auto_matched: int = 0
    warnings: list[str] = field(default_factory=_empty_str_list)
    errors: list[str] = field(default_factory=_empty_str_list)

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def has_validation_errors(self) -> bool:
        return self.export is not None and self.export.has_errors

    @property
    def mapped_count(self) -> int:
        return sum(1 for m in self.mappings if m.is_mapped)
