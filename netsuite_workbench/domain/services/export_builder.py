"""Validated export generation for NetSuite CSV imports.

``build_export_data`` validates the mappings against the record type's
catalog and produces the transformed output table; ``generate_export``
serializes that table to CSV. Validation problems are reported as issues
on the result and never stop generation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import csv
import io
import time

from ...constants import Thresholds
from ..catalog.registry import field_label, required_fields_for, resolve_record_type
from ..entities.mapping import FieldMapping
from ..entities.record_type import RecordType
from ..entities.validation import (
    ExportData,
    ExportResult,
    IssueSeverity,
    ValidationIssue,
)
from .transforms import get_transform

Row = Mapping[str, str]


def _raw(row: Row, column: str) -> str:
    value = row.get(column)
    return "" if value is None else str(value)


def _missing_required(
    active: Sequence[FieldMapping], record_type: RecordType
) -> list[ValidationIssue]:
    mapped_targets = {m.target_field for m in active}
    return [
        ValidationIssue(
            IssueSeverity.ERROR, f'Required field "{field.label}" is not mapped'
        )
        for field in required_fields_for(record_type)
        if field.field_id not in mapped_targets
    ]


def _unmapped_sources(
    rows: Sequence[Row], active: Sequence[FieldMapping]
) -> list[ValidationIssue]:
    source_headers = list(rows[0].keys()) if rows else []
    mapped_sources = {m.source_column for m in active}
    unmapped = [h for h in source_headers if h not in mapped_sources]
    if not unmapped:
        return []
    limit = Thresholds.UNMAPPED_PREVIEW_LIMIT
    preview = ", ".join(unmapped[:limit])
    more = "..." if len(unmapped) > limit else ""
    return [
        ValidationIssue(
            IssueSeverity.WARNING,
            f"{len(unmapped)} source column(s) not mapped: {preview}{more}",
        )
    ]


def _empty_required_values(
    rows: Sequence[Row], active: Sequence[FieldMapping], record_type: RecordType
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for field in required_fields_for(record_type):
        mapping = next((m for m in active if m.target_field == field.field_id), None)
        if mapping is None:
            continue
        empty_count = sum(
            1 for row in rows if not _raw(row, mapping.source_column).strip()
        )
        if empty_count > 0:
            issues.append(
                ValidationIssue(
                    IssueSeverity.WARNING,
                    f'Required field "{field.label}" has {empty_count} empty value(s)',
                )
            )
    return issues


def build_export_data(
    rows: Sequence[Row],
    mappings: Sequence[FieldMapping],
    record_type: RecordType | str,
) -> ExportData:
    resolved = resolve_record_type(record_type)
    active = [m for m in mappings if m.is_mapped]

    issues = _missing_required(active, resolved)
    issues.extend(_unmapped_sources(rows, active))
    if not active:
        issues.append(ValidationIssue(IssueSeverity.ERROR, "No columns are mapped"))

    output_headers = [field_label(resolved, m.target_field) for m in active]
    transforms = [(m.source_column, get_transform(m.transform)) for m in active]
    output_rows = [
        [transform(_raw(row, column)) for column, transform in transforms]
        for row in rows
    ]

    issues.extend(_empty_required_values(rows, active, resolved))
    return ExportData(
        output_headers=output_headers, output_rows=output_rows, issues=issues
    )


def to_csv(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Serialize a table as RFC 4180 CSV without a trailing line break."""
    if not headers:
        return ""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    writer.writerows(rows)
    return buffer.getvalue().removesuffix("\r\n")


def export_file_name(
    record_type: RecordType | str, timestamp_ms: int | None = None
) -> str:
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"netsuite-{resolve_record_type(record_type).slug}-import-{timestamp_ms}.csv"


def generate_export(
    rows: Sequence[Row],
    mappings: Sequence[FieldMapping],
    record_type: RecordType | str,
    *,
    timestamp_ms: int | None = None,
) -> ExportResult:
    data = build_export_data(rows, mappings, record_type)
    return ExportResult(
        csv_content=to_csv(data.output_headers, data.output_rows),
        file_name=export_file_name(record_type, timestamp_ms),
        row_count=len(data.output_rows),
        column_count=len(data.output_headers),
        issues=data.issues,
    )
