"""Static catalog of NetSuite record types and their import fields."""

from .registry import (
    field_label,
    fields_for,
    find_field,
    list_record_types,
    record_type_label,
    required_fields_for,
    resolve_record_type,
)

__all__ = [
    "field_label",
    "fields_for",
    "find_field",
    "list_record_types",
    "record_type_label",
    "required_fields_for",
    "resolve_record_type",
]
