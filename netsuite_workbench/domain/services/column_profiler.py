from collections import Counter
from collections.abc import Iterable, Mapping, Sequence

import pandas as pd

from ...constants import Patterns, Thresholds
from ..entities.column_profile import ColumnProfile, DetectedColumnType, ValueFrequency
from .parsing import format_locale_date, format_number, parse_date, parse_number
from .type_detector import detect_type

_NUMERIC_TYPES = frozenset({DetectedColumnType.NUMBER, DetectedColumnType.CURRENCY})


def _cell(row: Mapping[str, object], header: str) -> str:
    value = row.get(header)
    if value is None:
        return ""
    return str(value)


def column_values(header: str, rows: Sequence[Mapping[str, object]]) -> pd.Series:
    return pd.Series([_cell(row, header) for row in rows], dtype="object")


def _non_empty(values: pd.Series) -> pd.Series:
    if values.empty:
        return values
    return values[values.str.strip() != ""]


def top_values(
    values: Iterable[str], limit: int = Thresholds.TOP_VALUES_LIMIT
) -> tuple[ValueFrequency, ...]:
    counts = Counter(value for value in values if value.strip())
    return tuple(
        ValueFrequency(value=value, count=count)
        for value, count in counts.most_common(limit)
    )


def min_max(
    non_empty: pd.Series, detected: DetectedColumnType
) -> tuple[str | None, str | None]:
    if non_empty.empty:
        return None, None

    if detected in _NUMERIC_TYPES:
        cleaned = non_empty.str.replace(Patterns.NUMBER_NOISE, "", regex=True)
        parsed_numbers = (parse_number(text) for text in cleaned.tolist())
        numbers = [n for n in parsed_numbers if n is not None]
        if not numbers:
            return None, None
        return format_number(min(numbers)), format_number(max(numbers))

    if detected is DetectedColumnType.DATE:
        parsed_dates = (parse_date(text) for text in non_empty.tolist())
        dates = [d for d in parsed_dates if d is not None]
        if not dates:
            return None, None
        return format_locale_date(min(dates)), format_locale_date(max(dates))

    texts = non_empty.tolist()
    return min(texts), max(texts)


def profile_column(header: str, rows: Sequence[Mapping[str, object]]) -> ColumnProfile:
    values = column_values(header, rows)
    non_empty = _non_empty(values)
    unique_count = int(non_empty.nunique())
    detected = detect_type(values)
    low, high = min_max(non_empty, detected)
    return ColumnProfile(
        name=header,
        detected_type=detected,
        non_null_count=len(non_empty),
        null_count=len(values) - len(non_empty),
        unique_count=unique_count,
        duplicate_count=len(non_empty) - unique_count,
        min=low,
        max=high,
        top_values=top_values(values),
        sample_values=tuple(non_empty.head(Thresholds.SAMPLE_VALUES_LIMIT)),
    )


def profile_columns(
    headers: Sequence[str], rows: Sequence[Mapping[str, object]]
) -> list[ColumnProfile]:
    """Profile every header of an upload, in header order."""
    return [profile_column(header, rows) for header in headers]
