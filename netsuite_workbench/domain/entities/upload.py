from dataclasses import dataclass, field


def _empty_headers() -> list[str]:
    return []


def _empty_rows() -> list[dict[str, str]]:
    return []


@dataclass(slots=True)
class UploadedTable:
    """Parsed upload: ordered header names and one string-valued dict per row."""

    file_name: str
    headers: list[str] = field(default_factory=_empty_headers)
    rows: list[dict[str, str]] = field(default_factory=_empty_rows)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)
