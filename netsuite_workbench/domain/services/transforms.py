"""Named cell transforms applied per mapped column at export time.

Every transform is total: it takes any string and returns a string.
Unparseable dates and unknown boolean spellings come back unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass
import re

from ...constants import BooleanValues, Patterns
from ..entities.mapping import TransformName
from .parsing import format_iso_date, format_us_date, parse_date

Transform = Callable[[str], str]

_NUMBER_CLEAN_RE = re.compile(Patterns.NUMBER_CLEAN)


def _identity(value: str) -> str:
    return value


def _date_us(value: str) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return value
    return format_us_date(parsed)


def _date_iso(value: str) -> str:
    parsed = parse_date(value)
    if parsed is None:
        return value
    return format_iso_date(parsed)


def _number_clean(value: str) -> str:
    return _NUMBER_CLEAN_RE.sub("", value)


def _boolean_tf(value: str) -> str:
    lowered = value.lower().strip()
    if lowered in BooleanValues.TRUTHY:
        return "T"
    if lowered in BooleanValues.FALSY:
        return "F"
    return value


TRANSFORMS: dict[TransformName, Transform] = {
    TransformName.NONE: _identity,
    TransformName.UPPERCASE: str.upper,
    TransformName.LOWERCASE: str.lower,
    TransformName.TRIM: str.strip,
    TransformName.TRIM_UPPERCASE: lambda v: v.strip().upper(),
    TransformName.TRIM_LOWERCASE: lambda v: v.strip().lower(),
    TransformName.DATE_US: _date_us,
    TransformName.DATE_ISO: _date_iso,
    TransformName.NUMBER_CLEAN: _number_clean,
    TransformName.BOOLEAN_TF: _boolean_tf,
}


@dataclass(frozen=True, slots=True)
class TransformOption:
    value: TransformName
    label: str


TRANSFORM_OPTIONS: tuple[TransformOption, ...] = (
    TransformOption(TransformName.NONE, "None"),
    TransformOption(TransformName.UPPERCASE, "UPPERCASE"),
    TransformOption(TransformName.LOWERCASE, "lowercase"),
    TransformOption(TransformName.TRIM, "Trim whitespace"),
    TransformOption(TransformName.TRIM_UPPERCASE, "Trim + UPPERCASE"),
    TransformOption(TransformName.TRIM_LOWERCASE, "Trim + lowercase"),
    TransformOption(TransformName.DATE_US, "Date MM/DD/YYYY"),
    TransformOption(TransformName.DATE_ISO, "Date YYYY-MM-DD"),
    TransformOption(TransformName.NUMBER_CLEAN, "Clean number"),
    TransformOption(TransformName.BOOLEAN_TF, "Boolean T/F"),
)

if {option.value for option in TRANSFORM_OPTIONS} != set(TRANSFORMS):
    raise RuntimeError("TRANSFORM_OPTIONS is out of sync with TRANSFORMS")


def get_transform(name: object) -> Transform:
    return TRANSFORMS[TransformName.resolve(name)]


def apply_transform(name: object, value: str) -> str:
    return get_transform(name)(value)


def transform_label(name: object) -> str:
    resolved = TransformName.resolve(name)
    for option in TRANSFORM_OPTIONS:
        if option.value is resolved:
            return option.label
    return resolved.value
