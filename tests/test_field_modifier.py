"""Tests for field modifier tokens."""

import pytest

from name_generator.field_modifier import FieldModifier, parse_field_modifier


def test_parse_field_modifier_tokens() -> None:
    """Verify that the four keywords parse regardless of case and padding."""
    assert parse_field_modifier("private") is FieldModifier.PRIVATE
    assert parse_field_modifier("Protected") is FieldModifier.PROTECTED
    assert parse_field_modifier(" INTERNAL ") is FieldModifier.INTERNAL
    assert parse_field_modifier("public") is FieldModifier.PUBLIC
    assert parse_field_modifier(FieldModifier.PUBLIC) is FieldModifier.PUBLIC


def test_parse_field_modifier_rejects_unknown() -> None:
    """Verify that configuration tokens are strict, unlike directive values."""
    with pytest.raises(ValueError, match="expected one of"):
        parse_field_modifier("notpublic")
    with pytest.raises(ValueError):
        parse_field_modifier("")
