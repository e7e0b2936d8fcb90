"""Hierarchical content nodes read by the component adapters."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .._constants import RESERVED_CHILD_PREFIX, RESOURCE_TYPE_PROPERTY


def is_blank(value: object | None) -> bool:
    """Return True for ``None``, empty strings and whitespace-only strings."""
    if value is None:
        return True
    return not str(value).strip()


@dc.dataclass(slots=True)
class ContentNode:
    """A named storage unit carrying properties and ordered child nodes.

    Attributes
    ----------
    name : str
        Node name within its parent (for example ``"item0"``).
    properties : dict[str, Any]
        Scalar or list property values keyed by property name.
    children : list[ContentNode]
        Child nodes in document order, including reserved ``jcr:`` nodes.
    """

    name: str
    properties: dict[str, typ.Any] = dc.field(default_factory=dict)
    children: list[ContentNode] = dc.field(default_factory=list)

    @property
    def resource_type(self) -> str | None:
        """Return the resource type that selects this node's component."""
        return self.get_str(RESOURCE_TYPE_PROPERTY)

    def get_str(self, name: str, default: str | None = None) -> str | None:
        """Return the named property as a string, or ``default`` when absent."""
        value = self.properties.get(name)
        match value:
            case None:
                return default
            case str():
                return value
            case bool():
                return "true" if value else "false"
            case list() | tuple():
                return str(value[0]) if value else default
            case _:
                return str(value)

    def get_bool(self, name: str, *, default: bool = False) -> bool:
        """Return the named property as a boolean.

        Only ``True`` and the string ``"true"`` count as true; any other
        present value is false.
        """
        value = self.properties.get(name)
        match value:
            case None:
                return default
            case bool():
                return value
            case str():
                return value == "true"
            case _:
                return False

    def get_int(self, name: str, *, default: int = 0) -> int:
        """Return the named property as an integer, or ``default`` when unusable."""
        value = self.properties.get(name)
        match value:
            case None | bool():
                return default
            case int():
                return value
            case str():
                try:
                    return int(value.strip())
                except ValueError:
                    return default
            case _:
                return default

    def child(self, name: str) -> ContentNode | None:
        """Return the first direct child called ``name``."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def iter_children(self) -> cabc.Iterator[ContentNode]:
        """Yield children in order, skipping system-reserved ``jcr:`` nodes."""
        for node in self.children:
            if node.name.startswith(RESERVED_CHILD_PREFIX):
                continue
            yield node

    def iter_child_items(self, name: str) -> cabc.Iterator[ContentNode]:
        """Yield the visible children of the child container called ``name``."""
        container = self.child(name)
        if container is None:
            return
        yield from container.iter_children()


def node_from_mapping(name: str, mapping: cabc.Mapping[str, typ.Any]) -> ContentNode:
    """Build a node tree from nested mappings.

    Nested mappings become child nodes (in mapping order); every other value
    is stored as a property.
    """
    properties: dict[str, typ.Any] = {}
    children: list[ContentNode] = []
    for key, value in mapping.items():
        match value:
            case cabc.Mapping():
                children.append(node_from_mapping(str(key), value))
            case _:
                properties[str(key)] = value
    return ContentNode(name=name, properties=properties, children=children)


__all__ = ["ContentNode", "is_blank", "node_from_mapping"]
