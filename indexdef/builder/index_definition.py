"""
Fluent builder for a Lucene index definition.

Index rules and aggregate rules are created on first request and cached by type name,
so asking for the same rule twice returns the same builder and never adds a second node.
build() returns an independent snapshot; the builder stays usable afterwards.
"""

from indexdef.builder.aggregates import AggregateRule
from indexdef.builder.base import create_child
from indexdef.builder.constants import (
    AGGREGATES,
    ASYNC,
    ASYNC_LANE,
    COMPAT_MODE,
    COMPAT_MODE_VERSION,
    EVALUATE_PATH_RESTRICTION,
    INDEX_RULES,
    JCR_PRIMARYTYPE,
    NT_UNSTRUCTURED,
    PROP_EXCLUDED_PATHS,
    PROP_INCLUDED_PATHS,
    TYPE,
    TYPE_LUCENE,
)
from indexdef.builder.index_rules import IndexRule
from indexdef.config.logging import get_logger
from indexdef.tree.node import NodeBuilder, NodeState
from indexdef.tree.types import PropertyType

logger = get_logger(__name__)


class IndexDefinitionBuilder:
    """Root of an index definition: global flags, path filters, index rules and aggregates."""

    def __init__(self, primary_type: str = NT_UNSTRUCTURED) -> None:
        self._builder = NodeBuilder()
        self._rules: dict[str, IndexRule] = {}
        self._agg_rules: dict[str, AggregateRule] = {}
        self._builder.set_property(JCR_PRIMARYTYPE, primary_type, PropertyType.NAME)
        self._builder.set_property(COMPAT_MODE, COMPAT_MODE_VERSION)
        self._builder.set_property(ASYNC, ASYNC_LANE)
        self._builder.set_property(TYPE, TYPE_LUCENE)
        self._index_rules_builder = create_child(self._builder, INDEX_RULES)
        # created by the first aggregate_rule() call
        self._aggregates_builder: NodeBuilder | None = None

    def evaluate_path_restrictions(self) -> "IndexDefinitionBuilder":
        self._builder.set_property(EVALUATE_PATH_RESTRICTION, True)
        return self

    def included_paths(self, *paths: str) -> "IndexDefinitionBuilder":
        """Replace the included paths with exactly the given ones."""
        self._builder.set_properties(PROP_INCLUDED_PATHS, paths)
        return self

    def excluded_paths(self, *paths: str) -> "IndexDefinitionBuilder":
        """Replace the excluded paths with exactly the given ones."""
        self._builder.set_properties(PROP_EXCLUDED_PATHS, paths)
        return self

    def build(self) -> NodeState:
        """Snapshot of the definition as it is now. Later mutations do not affect it."""
        state = self._builder.get_node_state()
        logger.debug(
            "Index definition built",
            extra={"index_rules": len(self._rules), "aggregate_rules": len(self._agg_rules)},
        )
        return state

    def build_dict(self) -> dict:
        """JSON-ready form of build()."""
        return self.build().to_dict()

    # Index rules

    def index_rule(self, type_name: str) -> IndexRule:
        rule = self._rules.get(type_name)
        if rule is None:
            rule = IndexRule(create_child(self._index_rules_builder, type_name), type_name)
            self._rules[type_name] = rule
        return rule

    # Aggregates

    def aggregate_rule(self, type_name: str, *include_paths: str) -> AggregateRule:
        """Return the aggregate rule for type_name, creating it on first use, then include each path in order."""
        if self._aggregates_builder is None:
            self._aggregates_builder = create_child(self._builder, AGGREGATES)
        rule = self._agg_rules.get(type_name)
        if rule is None:
            rule = AggregateRule(create_child(self._aggregates_builder, type_name), type_name)
            self._agg_rules[type_name] = rule
        for include_path in include_paths:
            rule.include(include_path)
        return rule
