"""Tests for markup tree traversal."""

from name_generator.iter_nodes import child_nodes, iter_nodes
from name_generator.markup_nodes import (
    DirectiveNode,
    ObjectNode,
    OtherNode,
    PropertyValueNode,
    TextNode,
)


def test_iter_nodes_pre_order() -> None:
    """Verify that every node is visited once, parents before children."""
    a = TextNode("a")
    b = TextNode("b")
    prop = PropertyValueNode("Content", (a, b))
    directive = DirectiveNode("ns", "Key", (TextNode("k"),))
    inner = ObjectNode(None, (directive,))
    root = ObjectNode(None, (prop, inner))

    visited = list(iter_nodes(root))
    assert visited == [root, prop, a, b, inner, directive, directive.values[0]]


def test_child_nodes_by_kind() -> None:
    """Verify which sequence counts as children for each node kind."""
    text = TextNode("x")
    assert child_nodes(text) == ()
    assert child_nodes(PropertyValueNode("P", (text,))) == (text,)
    assert child_nodes(OtherNode("other", (text,))) == (text,)


def test_iter_nodes_deep_tree() -> None:
    """Verify that very deep trees do not exhaust the recursion limit."""
    node: ObjectNode = ObjectNode(None)
    depth = 5000
    for _ in range(depth):
        node = ObjectNode(None, (node,))
    assert sum(1 for _ in iter_nodes(node)) == depth + 1
