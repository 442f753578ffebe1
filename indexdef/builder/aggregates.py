"""Aggregate rules: which relative paths are folded into an ancestor's fulltext."""

from indexdef.builder.base import create_child
from indexdef.builder.constants import AGG_PATH, AGG_RELATIVE_NODE, INCLUDE_NODE_PREFIX
from indexdef.tree.node import NodeBuilder


class Include:
    """One include entry of an aggregate rule."""

    def __init__(self, builder: NodeBuilder) -> None:
        self._builder = builder

    def path(self, include_path: str) -> "Include":
        self._builder.set_property(AGG_PATH, include_path)
        return self

    def relative_node(self) -> "Include":
        self._builder.set_property(AGG_RELATIVE_NODE, True)
        return self


class AggregateRule:
    """Aggregation for one primary type. Includes are keyed by path and named include0, include1, ..."""

    def __init__(self, builder: NodeBuilder, type_name: str) -> None:
        self._builder = builder
        self._type_name = type_name
        self._includes: dict[str, Include] = {}

    @property
    def type_name(self) -> str:
        return self._type_name

    def include(self, include_path: str) -> Include:
        """Return the include for include_path, creating it on first use. The path is always (re)applied."""
        include = self._includes.get(include_path)
        if include is None:
            include = Include(create_child(self._builder, f"{INCLUDE_NODE_PREFIX}{len(self._includes)}"))
            self._includes[include_path] = include
        include.path(include_path)
        return include
