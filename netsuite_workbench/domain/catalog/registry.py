"""Record type and field lookup over the static NetSuite catalog."""

from __future__ import annotations

from functools import cache

from ..entities.record_type import FieldDef, RecordType
from ..exceptions import UnknownRecordTypeError
from .fields import FIELD_DEFINITIONS, RECORD_TYPE_LABELS


def resolve_record_type(value: RecordType | str) -> RecordType:
    if isinstance(value, RecordType):
        return value
    try:
        return RecordType(str(value).strip())
    except ValueError as exc:
        known = ", ".join(rt.value for rt in RecordType)
        raise UnknownRecordTypeError(
            f"Unknown record type {value!r}; expected one of: {known}"
        ) from exc


def list_record_types() -> list[RecordType]:
    return list(RecordType)


def record_type_label(record_type: RecordType | str) -> str:
    return RECORD_TYPE_LABELS[resolve_record_type(record_type)]


def fields_for(record_type: RecordType | str) -> tuple[FieldDef, ...]:
    return FIELD_DEFINITIONS[resolve_record_type(record_type)]


def required_fields_for(record_type: RecordType | str) -> tuple[FieldDef, ...]:
    return _required_fields(resolve_record_type(record_type))


@cache
def _required_fields(record_type: RecordType) -> tuple[FieldDef, ...]:
    return tuple(f for f in FIELD_DEFINITIONS[record_type] if f.required)


@cache
def _field_index(record_type: RecordType) -> dict[str, FieldDef]:
    return {f.field_id: f for f in FIELD_DEFINITIONS[record_type]}


def find_field(record_type: RecordType | str, field_id: str) -> FieldDef | None:
    return _field_index(resolve_record_type(record_type)).get(field_id)


def field_label(record_type: RecordType | str, field_id: str) -> str:
    """Return the display label for ``field_id``, or the raw id when unknown."""
    field = find_field(record_type, field_id)
    return field.label if field is not None and field.label else field_id
