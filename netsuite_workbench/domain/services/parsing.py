"""Lenient value parsers shared by detection, profiling and transforms.

Both parsers return ``None`` instead of raising so callers can fall back to
the raw cell text.
"""

from datetime import date, datetime
import math
import warnings

import pandas as pd


def parse_number(value: str) -> float | None:
    text = value.strip()
    if not text or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _looks_numeric(text: str) -> bool:
    return parse_number(text.replace(",", "").replace(" ", "")) is not None


def parse_date(value: str) -> datetime | None:
    text = value.strip()
    # Bare numbers would otherwise be read as years or epoch offsets.
    if not text or _looks_numeric(text):
        return None
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            return None
    if not isinstance(parsed, pd.Timestamp) or pd.isna(parsed):
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.tz_localize(None)
    return parsed.to_pydatetime()


def format_number(value: float) -> str:
    """Render a float the way a spreadsheet user typed it (``3.0`` -> ``3``)."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_locale_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def format_us_date(value: date) -> str:
    return f"{value.month:02d}/{value.day:02d}/{value.year}"


def format_iso_date(value: date) -> str:
    return f"{value.year}-{value.month:02d}-{value.day:02d}"
