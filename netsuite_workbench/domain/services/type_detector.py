"""Semantic type detection for uploaded columns.

Each non-empty value is tested against six independent predicates. The
first type (in priority order) matched by at least 80% of the values wins;
a column where several types each cover more than 30% is ``mixed``.
"""

from collections.abc import Callable, Iterable
import re

from ...constants import BooleanValues, Patterns, Thresholds
from ..entities.column_profile import DetectedColumnType
from .parsing import parse_date, parse_number

_EMAIL_RE = re.compile(Patterns.EMAIL)
_PHONE_RE = re.compile(Patterns.PHONE)
_DIGITS_AND_DOTS_RE = re.compile(Patterns.DIGITS_AND_DOTS, re.ASCII)
_CURRENCY_RE = re.compile(Patterns.CURRENCY, re.ASCII)
_CURRENCY_SYMBOL_RE = re.compile(Patterns.CURRENCY_SYMBOL)
_DATE_SHAPE_RE = re.compile(Patterns.DATE_SHAPE, re.ASCII)


def is_boolean(value: str) -> bool:
    return value.lower() in BooleanValues.ALL


def is_email(value: str) -> bool:
    return _EMAIL_RE.match(value) is not None


def is_phone(value: str) -> bool:
    return (
        _PHONE_RE.match(value) is not None
        and _DIGITS_AND_DOTS_RE.match(value) is None
    )


def is_currency(value: str) -> bool:
    return (
        _CURRENCY_RE.match(value) is not None
        and _CURRENCY_SYMBOL_RE.search(value) is not None
    )


def is_date(value: str) -> bool:
    return _DATE_SHAPE_RE.match(value) is not None or parse_date(value) is not None


def is_number(value: str) -> bool:
    return parse_number(value) is not None


# Checked in this order once the counts are in.
PRIORITY: tuple[tuple[DetectedColumnType, Callable[[str], bool]], ...] = (
    (DetectedColumnType.EMAIL, is_email),
    (DetectedColumnType.CURRENCY, is_currency),
    (DetectedColumnType.PHONE, is_phone),
    (DetectedColumnType.BOOLEAN, is_boolean),
    (DetectedColumnType.DATE, is_date),
    (DetectedColumnType.NUMBER, is_number),
)


def count_matches(values: Iterable[str]) -> tuple[dict[DetectedColumnType, int], int]:
    counts = {detected: 0 for detected, _ in PRIORITY}
    total = 0
    for raw in values:
        value = raw.strip()
        if not value:
            continue
        total += 1
        for detected, predicate in PRIORITY:
            if predicate(value):
                counts[detected] += 1
    return counts, total


def detect_type(values: Iterable[str]) -> DetectedColumnType:
    counts, total = count_matches(values)
    if total == 0:
        return DetectedColumnType.STRING

    for detected, _ in PRIORITY:
        if counts[detected] / total >= Thresholds.TYPE_MAJORITY:
            return detected

    above_mixed = [c for c in counts.values() if c / total > Thresholds.TYPE_MIXED]
    if len(above_mixed) > 1:
        return DetectedColumnType.MIXED
    return DetectedColumnType.STRING
