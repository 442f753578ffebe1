"""
Mutable node tree and its immutable snapshots.

NodeBuilder is the in-memory tree the definition builder writes into. get_node_state()
copies the whole subtree into frozen NodeState objects, so a snapshot never changes
after it is taken.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from indexdef.tree.types import PropertyType

# JSON prefix for NAME-typed values, e.g. "nam:nt:unstructured"
NAME_PREFIX = "nam:"


def _infer_type(value: Any) -> PropertyType:
    """Pick a PropertyType for an untyped value."""
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return PropertyType.BOOLEAN
    if isinstance(value, int):
        return PropertyType.LONG
    if isinstance(value, str):
        return PropertyType.STRING
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return PropertyType.STRINGS
    raise TypeError(f"Unsupported property value: {value!r}")


@dataclass(frozen=True)
class PropertyState:
    """A single named, typed property value."""

    name: str
    value: Any
    type: PropertyType

    @classmethod
    def create(cls, name: str, value: Any, type: PropertyType | None = None) -> "PropertyState":
        type = type or _infer_type(value)
        if type.is_array:
            value = tuple(value)
        return cls(name=name, value=value, type=type)

    def to_json_value(self) -> Any:
        if self.type is PropertyType.NAME:
            return f"{NAME_PREFIX}{self.value}"
        if self.type.is_array:
            return list(self.value)
        return self.value


@dataclass(frozen=True)
class NodeState:
    """Read-only snapshot of a node: its properties and child nodes."""

    properties: Mapping[str, PropertyState] = field(default_factory=lambda: MappingProxyType({}))
    children: Mapping[str, "NodeState"] = field(default_factory=lambda: MappingProxyType({}))

    def get_property(self, name: str) -> PropertyState | None:
        return self.properties.get(name)

    def get_value(self, name: str, default: Any = None) -> Any:
        prop = self.properties.get(name)
        return default if prop is None else prop.value

    def has_property(self, name: str) -> bool:
        return name in self.properties

    def has_child_node(self, name: str) -> bool:
        return name in self.children

    def get_child_node(self, name: str) -> "NodeState | None":
        return self.children.get(name)

    @property
    def child_node_names(self) -> list[str]:
        return list(self.children)

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-ready form: properties first, then child nodes as nested objects.
        NAME values carry the "nam:" prefix.
        """
        out: dict[str, Any] = {name: prop.to_json_value() for name, prop in self.properties.items()}
        for name, child in self.children.items():
            out[name] = child.to_dict()
        return out


class NodeBuilder:
    """Mutable node. Children are created on first access and kept in creation order."""

    def __init__(self) -> None:
        self._properties: dict[str, PropertyState] = {}
        self._children: dict[str, NodeBuilder] = {}

    def child(self, name: str) -> "NodeBuilder":
        """Return the child with the given name, creating it if missing."""
        node = self._children.get(name)
        if node is None:
            node = NodeBuilder()
            self._children[name] = node
        return node

    def has_child_node(self, name: str) -> bool:
        return name in self._children

    @property
    def child_node_names(self) -> list[str]:
        return list(self._children)

    def set_property(self, name: str, value: Any, type: PropertyType | None = None) -> "NodeBuilder":
        """Set or overwrite a property. The type is inferred from the value when omitted."""
        self._properties[name] = PropertyState.create(name, value, type)
        return self

    def set_properties(self, name: str, values: Iterable[str]) -> "NodeBuilder":
        """Set a multi-valued string property, replacing any previous values."""
        return self.set_property(name, tuple(values), PropertyType.STRINGS)

    def get_property(self, name: str) -> PropertyState | None:
        return self._properties.get(name)

    def has_property(self, name: str) -> bool:
        return name in self._properties

    def get_node_state(self) -> NodeState:
        """Deep copy of this subtree as an immutable NodeState."""
        return NodeState(
            properties=MappingProxyType(dict(self._properties)),
            children=MappingProxyType({name: c.get_node_state() for name, c in self._children.items()}),
        )
