"""Logic for resolving the x:FieldModifier directive of an object."""

import logging

from name_generator.field_modifier import FieldModifier
from name_generator.known_names import FIELD_MODIFIER_DIRECTIVE, XAML2006_NAMESPACE
from name_generator.markup_nodes import DirectiveNode, ObjectNode, TextNode

logger = logging.getLogger(__name__)

# "notpublic" hides the field from other assemblies, which maps to internal.
MODIFIER_ALIASES: dict[str, FieldModifier] = {
    "private": FieldModifier.PRIVATE,
    "public": FieldModifier.PUBLIC,
    "protected": FieldModifier.PROTECTED,
    "internal": FieldModifier.INTERNAL,
    "notpublic": FieldModifier.INTERNAL,
}


def field_modifier_text(node: ObjectNode) -> str | None:
    """Return the text of the first usable x:FieldModifier directive, if any."""
    for child in node.children:
        if not isinstance(child, DirectiveNode):
            continue
        if (
            child.name != FIELD_MODIFIER_DIRECTIVE
            or child.namespace != XAML2006_NAMESPACE
        ):
            continue
        if child.values and isinstance(child.values[0], TextNode):
            return child.values[0].text
    return None


def resolve_field_modifier(node: ObjectNode, default: FieldModifier) -> FieldModifier:
    """Resolve the visibility of the field generated for an object.

    Follows the Xamarin.Forms x:FieldModifier semantics. Unknown or missing
    values fall back to `default`; this never raises.
    """
    text = field_modifier_text(node)
    if text is None:
        return default
    modifier = MODIFIER_ALIASES.get(text.lower())
    if modifier is None:
        logger.debug(
            "Unrecognized field modifier %r, using default %s", text, default.value
        )
        return default
    return modifier
