from dataclasses import dataclass, field
from enum import StrEnum


class IssueSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    severity: IssueSeverity
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is IssueSeverity.ERROR


def _empty_issues() -> list[ValidationIssue]:
    return []


def _empty_headers() -> list[str]:
    return []


def _empty_rows() -> list[list[str]]:
    return []


@dataclass(slots=True)
class ExportData:
    """Validated output table shared by the CSV and workbook exporters."""

    output_headers: list[str] = field(default_factory=_empty_headers)
    output_rows: list[list[str]] = field(default_factory=_empty_rows)
    issues: list[ValidationIssue] = field(default_factory=_empty_issues)


@dataclass(slots=True)
class ExportResult:
    csv_content: str
    file_name: str
    row_count: int
    column_count: int
    issues: list[ValidationIssue] = field(default_factory=_empty_issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.is_error]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if not issue.is_error]

    @property
    def has_errors(self) -> bool:
        return any(issue.is_error for issue in self.issues)
