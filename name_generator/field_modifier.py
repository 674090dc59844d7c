"""Visibility levels a generated field can be declared with."""

from enum import Enum


class FieldModifier(str, Enum):
    """Field visibility, valued by its source-code keyword."""

    PRIVATE = "private"
    PROTECTED = "protected"
    INTERNAL = "internal"
    PUBLIC = "public"


def parse_field_modifier(value: "FieldModifier | str") -> FieldModifier:
    """Convert a visibility token to a FieldModifier.

    Matching is case-insensitive. Raises ValueError for anything that is not
    one of the four keywords; callers use this for configuration, where a bad
    token is a mistake rather than something to fall back from.
    """
    if isinstance(value, FieldModifier):
        return value
    token = str(value).strip().lower()
    try:
        return FieldModifier(token)
    except ValueError:
        allowed = ", ".join(m.value for m in FieldModifier)
        msg = f"Invalid field modifier {value!r} (expected one of: {allowed})"
        raise ValueError(msg) from None
