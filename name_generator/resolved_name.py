"""Data model for a named control that becomes a generated field."""

from dataclasses import dataclass

from name_generator.field_modifier import FieldModifier


@dataclass(frozen=True)
class ResolvedName:
    """One field of the generated class."""

    type_name: str
    field_name: str
    field_modifier: FieldModifier
    type_arguments: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return a plain mapping suitable for JSON or YAML output."""
        return {
            "type_name": self.type_name,
            "field_name": self.field_name,
            "field_modifier": self.field_modifier.value,
            "type_arguments": list(self.type_arguments),
        }
