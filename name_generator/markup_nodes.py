"""Data models for the parsed markup tree consumed by the name resolver."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InterfaceDescriptor:
    """An interface implemented by a resolved type."""

    full_name: str
    is_interface: bool = True


@dataclass(frozen=True)
class TypeDescriptor:
    """A resolved CLR type as reported by the markup parser."""

    namespace: str
    name: str
    generic_arguments: tuple[TypeDescriptor, ...] = ()
    interfaces: tuple[InterfaceDescriptor, ...] = ()

    @property
    def full_name(self) -> str:
        """Return the namespace-qualified name of the type."""
        if not self.namespace:
            return self.name
        return f"{self.namespace}.{self.name}"


@dataclass(frozen=True)
class TextNode:
    """A literal string value."""

    text: str


@dataclass(frozen=True)
class DirectiveNode:
    """An out-of-band, namespace-qualified annotation on an object."""

    namespace: str
    name: str
    values: tuple[MarkupNode, ...] = ()


@dataclass(frozen=True)
class PropertyValueNode:
    """Assignment of one or more values to a property of the enclosing object."""

    property: str
    values: tuple[MarkupNode, ...] = ()


@dataclass(frozen=True)
class ObjectNode:
    """An object instantiation; `type` is None when the parser left it unresolved."""

    type: TypeDescriptor | None
    children: tuple[MarkupNode, ...] = ()


@dataclass(frozen=True)
class OtherNode:
    """Any node kind without meaning for name resolution."""

    kind: str
    children: tuple[MarkupNode, ...] = ()


MarkupNode = ObjectNode | PropertyValueNode | TextNode | DirectiveNode | OtherNode


@dataclass(frozen=True)
class ParsedDocument:
    """A parsed markup document."""

    root: MarkupNode
    source: str | None = field(default=None, compare=False)
