"""Utility for walking a parsed markup tree."""

from collections.abc import Iterator, Sequence

from name_generator.markup_nodes import (
    DirectiveNode,
    MarkupNode,
    ObjectNode,
    OtherNode,
    PropertyValueNode,
    TextNode,
)


def child_nodes(node: MarkupNode) -> Sequence[MarkupNode]:
    """Return the direct children of a node in declaration order."""
    match node:
        case ObjectNode(children=children) | OtherNode(children=children):
            return children
        case PropertyValueNode(values=values) | DirectiveNode(values=values):
            return values
        case TextNode():
            return ()
    return ()


def iter_nodes(root: MarkupNode) -> Iterator[MarkupNode]:
    """Yield the root and all of its descendants in pre-order, depth-first."""
    # Explicit stack; deeply nested layouts would otherwise hit the recursion limit.
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(child_nodes(node)))
