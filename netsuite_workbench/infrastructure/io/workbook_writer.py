"""Multi-sheet XLSX export of a workbench session.

The workbook carries the column profile, the mapping table, the cleaned
output and the validation issues. It is built from the same validated data
as the CSV export.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
import io

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ...constants import SheetNames, Thresholds, WorkbookStyle
from ...domain.catalog.registry import resolve_record_type
from ...domain.entities.column_profile import ColumnProfile
from ...domain.entities.mapping import FieldMapping
from ...domain.entities.record_type import RecordType
from ...domain.entities.validation import IssueSeverity, ValidationIssue
from ...domain.services.export_builder import build_export_data

_HEADER_FILL = PatternFill(
    fill_type="solid",
    start_color=f"FF{WorkbookStyle.EMERALD_HEX}",
    end_color=f"FF{WorkbookStyle.EMERALD_HEX}",
)
_HEADER_FONT = Font(bold=True, color=f"FF{WorkbookStyle.WHITE_HEX}", size=11)
_HEADER_ALIGNMENT = Alignment(vertical="center", horizontal="left")
_HEADER_BORDER = Border(
    bottom=Side(style="thin", color=f"FF{WorkbookStyle.BORDER_HEX}")
)
_UNMAPPED_FILL = PatternFill(
    fill_type="solid",
    start_color=f"33{WorkbookStyle.AMBER_HEX}",
    end_color=f"33{WorkbookStyle.AMBER_HEX}",
)
_UNMAPPED_FONT = Font(color=f"FF{WorkbookStyle.AMBER_HEX}")

PROFILE_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Column", 22),
    ("Type", 12),
    ("Non-Null", 12),
    ("Null", 10),
    ("Unique", 10),
    ("Min", 18),
    ("Max", 18),
    ("Top Values", 40),
)
MAPPING_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Source Column", 25),
    ("Target Field", 25),
    ("Transform", 20),
)
ISSUE_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Severity", 12),
    ("Message", 60),
)
UNMAPPED_LABEL = "(unmapped)"
NO_ISSUES_MESSAGE = "No validation issues found."


def _cell_text(value: str) -> str:
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def _append_row(sheet: Worksheet, values: Sequence[str | int]) -> None:
    """Append a row whose strings are stored as text, never as formulas."""
    sheet.append([_cell_text(v) if isinstance(v, str) else v for v in values])
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str):
            cell.data_type = "s"


def _add_sheet(
    workbook: Workbook, title: str, columns: Sequence[tuple[str, int]]
) -> Worksheet:
    sheet = workbook.create_sheet(title=title)
    _append_row(sheet, [header for header, _ in columns])
    for index, (_, width) in enumerate(columns, start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width
    _style_header(sheet)
    return sheet


def _style_header(sheet: Worksheet) -> None:
    for cell in sheet[1]:
        cell.fill = _HEADER_FILL
        cell.font = _HEADER_FONT
        cell.alignment = _HEADER_ALIGNMENT
        cell.border = _HEADER_BORDER


def format_top_values(profile: ColumnProfile) -> str:
    top = profile.top_values[: Thresholds.WORKBOOK_TOP_VALUES]
    return ", ".join(f"{item.value} ({item.count})" for item in top)


def _write_profile_sheet(
    workbook: Workbook, profiles: Sequence[ColumnProfile]
) -> None:
    sheet = _add_sheet(workbook, SheetNames.PROFILE, PROFILE_COLUMNS)
    for profile in profiles:
        _append_row(
            sheet,
            [
                profile.name,
                profile.detected_type.value,
                profile.non_null_count,
                profile.null_count,
                profile.unique_count,
                profile.min or "",
                profile.max or "",
                format_top_values(profile),
            ]
        )


def _write_mapping_sheet(
    workbook: Workbook, mappings: Sequence[FieldMapping]
) -> None:
    sheet = _add_sheet(workbook, SheetNames.MAPPINGS, MAPPING_COLUMNS)
    for mapping in mappings:
        _append_row(
            sheet,
            [
                mapping.source_column,
                mapping.target_field or UNMAPPED_LABEL,
                mapping.transform.value,
            ]
        )
        if not mapping.is_mapped:
            for cell in sheet[sheet.max_row]:
                cell.fill = _UNMAPPED_FILL
                cell.font = _UNMAPPED_FONT


def _write_data_sheet(
    workbook: Workbook, headers: Sequence[str], rows: Sequence[Sequence[str]]
) -> None:
    columns = [(header, max(len(header) + 4, 14)) for header in headers]
    sheet = _add_sheet(workbook, SheetNames.DATA, columns)
    for row in rows:
        _append_row(sheet, row)


def _write_issue_sheet(
    workbook: Workbook, issues: Sequence[ValidationIssue]
) -> None:
    sheet = _add_sheet(workbook, SheetNames.ISSUES, ISSUE_COLUMNS)
    if not issues:
        _append_row(sheet, ["Info", NO_ISSUES_MESSAGE])
        return
    for issue in issues:
        is_error = issue.severity is IssueSeverity.ERROR
        _append_row(sheet, ["Error" if is_error else "Warning", issue.message])
        color = WorkbookStyle.RED_HEX if is_error else WorkbookStyle.AMBER_HEX
        sheet.cell(row=sheet.max_row, column=1).font = Font(
            bold=True, color=f"FF{color}"
        )


def build_workbench_workbook(
    rows: Sequence[Mapping[str, str]],
    mappings: Sequence[FieldMapping],
    record_type: RecordType | str,
    profiles: Sequence[ColumnProfile],
    *,
    created: datetime | None = None,
) -> Workbook:
    data = build_export_data(rows, mappings, record_type)
    workbook = Workbook()
    workbook.remove(workbook.active)
    workbook.properties.creator = WorkbookStyle.CREATOR
    workbook.properties.created = created or datetime.now(UTC).replace(tzinfo=None)

    _write_profile_sheet(workbook, profiles)
    _write_mapping_sheet(workbook, mappings)
    _write_data_sheet(workbook, data.output_headers, data.output_rows)
    _write_issue_sheet(workbook, data.issues)
    return workbook


def workbook_file_name(
    record_type: RecordType | str, moment: datetime | None = None
) -> str:
    moment = moment or datetime.now(UTC)
    stamp = moment.strftime("%Y-%m-%d-%H-%M-%S")
    return f"workbench-{resolve_record_type(record_type).slug}-{stamp}.xlsx"


def write_workbench_xlsx(
    rows: Sequence[Mapping[str, str]],
    mappings: Sequence[FieldMapping],
    record_type: RecordType | str,
    profiles: Sequence[ColumnProfile],
) -> bytes:
    workbook = build_workbench_workbook(rows, mappings, record_type, profiles)
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
