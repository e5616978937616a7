from dataclasses import dataclass, field
from enum import StrEnum


class DetectedColumnType(StrEnum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    EMAIL = "email"
    PHONE = "phone"
    CURRENCY = "currency"
    MIXED = "mixed"


@dataclass(frozen=True, slots=True)
class ValueFrequency:
    value: str
    count: int


def _empty_frequencies() -> tuple[ValueFrequency, ...]:
    return ()


def _empty_samples() -> tuple[str, ...]:
    return ()


@dataclass(frozen=True, slots=True)
class ColumnProfile:
    name: str
    detected_type: DetectedColumnType
    non_null_count: int
    null_count: int
    unique_count: int
    duplicate_count: int
    min: str | None = None
    max: str | None = None
    top_values: tuple[ValueFrequency, ...] = field(default_factory=_empty_frequencies)
    sample_values: tuple[str, ...] = field(default_factory=_empty_samples)
