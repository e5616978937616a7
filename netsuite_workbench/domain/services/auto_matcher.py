"""First-match auto-mapping of source columns onto catalog fields.

There is no scoring: the first catalog field whose normalized id or label
equals the normalized column name, or whose id contains it (or is contained
in it), is taken. Columns that already carry a target are left untouched,
which makes repeated runs a no-op.
"""

from collections.abc import Sequence
import re

from ...constants import Patterns
from ..entities.mapping import FieldMapping
from ..entities.record_type import FieldDef

_NON_ALPHANUMERIC_RE = re.compile(Patterns.NON_ALPHANUMERIC)


def normalize_name(text: str) -> str:
    return _NON_ALPHANUMERIC_RE.sub("", text.lower())


def matches(source: str, field: FieldDef) -> bool:
    normalized = normalize_name(source)
    field_id = normalize_name(field.field_id)
    label = normalize_name(field.label)
    return (
        field_id == normalized
        or label == normalized
        or normalized in field_id
        or field_id in normalized
    )


def find_match(source: str, fields: Sequence[FieldDef]) -> FieldDef | None:
    for field in fields:
        if matches(source, field):
            return field
    return None


def auto_match(
    mappings: Sequence[FieldMapping], fields: Sequence[FieldDef]
) -> list[FieldMapping]:
    matched: list[FieldMapping] = []
    for mapping in mappings:
        if mapping.is_mapped:
            matched.append(mapping)
            continue
        field = find_match(mapping.source_column, fields)
        if field is None:
            matched.append(mapping)
        else:
            matched.append(mapping.model_copy(update={"target_field": field.field_id}))
    return matched
