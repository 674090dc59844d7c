"""Logic for loading a serialized, already-parsed markup tree from YAML."""

from pathlib import Path
from typing import Any

import yaml

from name_generator.markup_nodes import (
    DirectiveNode,
    InterfaceDescriptor,
    MarkupNode,
    ObjectNode,
    OtherNode,
    ParsedDocument,
    PropertyValueNode,
    TextNode,
    TypeDescriptor,
)


class DocumentFormatError(ValueError):
    """Raised when a serialized tree does not have the expected shape."""

    def __init__(self, where: str, problem: str) -> None:
        """Record the tree path of the offending node along with the problem."""
        super().__init__(f"{where}: {problem}")
        self.where = where
        self.problem = problem


def load_parsed_document(path: Path) -> ParsedDocument:
    """Load a parsed markup document from a YAML file."""
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return document_from_data(raw, source=str(path))


def document_from_data(raw: Any, source: str | None = None) -> ParsedDocument:
    """Build a ParsedDocument from already-deserialized data."""
    if not isinstance(raw, dict) or "root" not in raw:
        raise DocumentFormatError("<document>", "expected a mapping with a 'root' key")
    return ParsedDocument(root=node_from_data(raw["root"], "root"), source=source)


def node_from_data(raw: Any, where: str) -> MarkupNode:
    """Convert one serialized node (and its subtree) into a MarkupNode."""
    if isinstance(raw, str):
        return TextNode(raw)
    if not isinstance(raw, dict):
        got = type(raw).__name__
        raise DocumentFormatError(where, f"expected a mapping, got {got}")

    kind = raw.get("kind")
    if kind == "text":
        return TextNode(str(_required(raw, "text", where)))
    if kind == "object":
        return ObjectNode(
            type=type_from_data(raw.get("type"), f"{where}.type"),
            children=_nodes(raw, "children", where),
        )
    if kind == "property":
        return PropertyValueNode(
            property=str(_required(raw, "property", where)),
            values=_nodes(raw, "values", where),
        )
    if kind == "directive":
        return DirectiveNode(
            namespace=str(raw.get("namespace") or ""),
            name=str(_required(raw, "name", where)),
            values=_nodes(raw, "values", where),
        )
    if not kind:
        raise DocumentFormatError(where, "missing 'kind'")
    return OtherNode(kind=str(kind), children=_nodes(raw, "children", where))


def type_from_data(raw: Any, where: str) -> TypeDescriptor | None:
    """Convert a serialized type descriptor; None stays unresolved."""
    if raw is None:
        return None
    if not isinstance(raw, dict):
        raise DocumentFormatError(where, "expected a type mapping")

    generic_arguments = []
    for i, arg in enumerate(raw.get("generic_arguments") or []):
        resolved = type_from_data(arg, f"{where}.generic_arguments[{i}]")
        if resolved is None:
            raise DocumentFormatError(
                f"{where}.generic_arguments[{i}]", "generic argument is null"
            )
        generic_arguments.append(resolved)

    interfaces = []
    for i, iface in enumerate(raw.get("interfaces") or []):
        if isinstance(iface, str):
            interfaces.append(InterfaceDescriptor(iface))
        elif isinstance(iface, dict):
            interfaces.append(
                InterfaceDescriptor(
                    full_name=str(
                        _required(iface, "full_name", f"{where}.interfaces[{i}]")
                    ),
                    is_interface=bool(iface.get("is_interface", True)),
                )
            )
        else:
            raise DocumentFormatError(
                f"{where}.interfaces[{i}]", "expected a name or mapping"
            )

    return TypeDescriptor(
        namespace=str(raw.get("namespace") or ""),
        name=str(_required(raw, "name", where)),
        generic_arguments=tuple(generic_arguments),
        interfaces=tuple(interfaces),
    )


def _required(raw: dict[str, Any], key: str, where: str) -> Any:
    if raw.get(key) is None:
        raise DocumentFormatError(where, f"missing '{key}'")
    return raw[key]


def _nodes(raw: dict[str, Any], key: str, where: str) -> tuple[MarkupNode, ...]:
    items = raw.get(key) or []
    if not isinstance(items, list):
        raise DocumentFormatError(f"{where}.{key}", "expected a list")
    return tuple(
        node_from_data(item, f"{where}.{key}[{i}]") for i, item in enumerate(items)
    )
