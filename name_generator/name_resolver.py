"""Logic for collecting the named controls of a parsed markup document."""

import logging
from collections.abc import Iterator

from name_generator.field_modifier import FieldModifier, parse_field_modifier
from name_generator.is_control import is_control
from name_generator.iter_nodes import iter_nodes
from name_generator.known_names import NAME_PROPERTY
from name_generator.markup_nodes import (
    MarkupNode,
    ObjectNode,
    ParsedDocument,
    PropertyValueNode,
    TextNode,
)
from name_generator.resolve_field_modifier import resolve_field_modifier
from name_generator.resolved_name import ResolvedName

logger = logging.getLogger(__name__)


def name_property_texts(node: ObjectNode) -> Iterator[str]:
    """Yield the literal value of every Name property set as text on the object."""
    for child in node.children:
        if (
            isinstance(child, PropertyValueNode)
            and child.property == NAME_PROPERTY
            and child.values
            and isinstance(child.values[0], TextNode)
        ):
            yield child.values[0].text


class NameResolver:
    """Finds the controls that need a generated field and describes each field."""

    def __init__(
        self, default_field_modifier: FieldModifier | str = FieldModifier.INTERNAL
    ) -> None:
        """Initialize the resolver with the modifier used when none is requested.

        Internal is the default for WPF compatibility.
        """
        self.default_field_modifier = parse_field_modifier(default_field_modifier)

    def resolve(self, root: MarkupNode) -> list[ResolvedName]:
        """Return the resolved names under `root`, in document order and unique."""
        # dict keeps insertion order, so it doubles as an ordered set.
        items: dict[ResolvedName, None] = {}
        for node in iter_nodes(root):
            if not isinstance(node, ObjectNode):
                continue
            for resolved in self._resolve_object(node):
                if resolved in items:
                    logger.debug("Skipping duplicate name %s", resolved.field_name)
                    continue
                items[resolved] = None
        return list(items)

    def resolve_document(self, document: ParsedDocument) -> list[ResolvedName]:
        """Resolve the names of a whole document."""
        names = self.resolve(document.root)
        logger.info(
            "Resolved %d name(s) in %s", len(names), document.source or "<document>"
        )
        return names

    def _resolve_object(self, node: ObjectNode) -> Iterator[ResolvedName]:
        clr_type = node.type
        if clr_type is None or not is_control(clr_type):
            return

        field_names = list(name_property_texts(node))
        if not field_names:
            logger.debug("Control %s has no Name, skipping", clr_type.full_name)
            return

        field_modifier = resolve_field_modifier(node, self.default_field_modifier)
        type_name = f"{clr_type.namespace}.{clr_type.name}"
        type_arguments = tuple(arg.full_name for arg in clr_type.generic_arguments)
        for field_name in field_names:
            yield ResolvedName(
                type_name=type_name,
                field_name=field_name,
                field_modifier=field_modifier,
                type_arguments=type_arguments,
            )
