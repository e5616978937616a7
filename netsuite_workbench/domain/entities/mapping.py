from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .record_type import RecordType


class TransformName(StrEnum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TRIM = "trim"
    TRIM_UPPERCASE = "trim-uppercase"
    TRIM_LOWERCASE = "trim-lowercase"
    DATE_US = "date-mm/dd/yyyy"
    DATE_ISO = "date-yyyy-mm-dd"
    NUMBER_CLEAN = "number-clean"
    BOOLEAN_TF = "boolean-tf"

    @classmethod
    def resolve(cls, name: object) -> TransformName:
        """Return the matching transform name, or ``none`` for anything unknown."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name)
            except ValueError:
                return cls.NONE
        return cls.NONE


class FieldMapping(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    source_column: str
    target_field: str = ""
    transform: TransformName = TransformName.NONE

    @field_validator("target_field", mode="before")
    @classmethod
    def _none_to_unmapped(cls, value: object) -> object:
        if value is None:
            return ""
        return value

    @field_validator("transform", mode="before")
    @classmethod
    def _unknown_to_none(cls, value: object) -> TransformName:
        return TransformName.resolve(value)

    @property
    def is_mapped(self) -> bool:
        return bool(self.target_field)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class MappingTemplate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    user_id: str
    name: str = ""
    record_type: RecordType = RecordType.CUSTOMER
    mappings: list[FieldMapping] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


def blank_mappings(headers: Iterable[str]) -> list[FieldMapping]:
    return [FieldMapping(source_column=header) for header in headers]


def restore_mappings(
    saved: Sequence[FieldMapping], headers: Iterable[str]
) -> list[FieldMapping]:
    """Line saved mappings back up with the headers of the current upload.

    Headers without a saved entry get an empty mapping; saved entries for
    columns that are not in the upload are dropped.
    """
    by_source: dict[str, FieldMapping] = {}
    for mapping in saved:
        by_source.setdefault(mapping.source_column, mapping)
    restored: list[FieldMapping] = []
    for header in headers:
        match = by_source.get(header)
        if match is None:
            restored.append(FieldMapping(source_column=header))
        else:
            restored.append(match.model_copy())
    return restored


def used_targets(mappings: Iterable[FieldMapping]) -> set[str]:
    return {m.target_field for m in mappings if m.target_field}
