"""Index rules for a node type and the property rules they own."""

from weakref import ReferenceType, ref

from indexdef.builder.base import create_child
from indexdef.builder.constants import (
    INDEX_NODE_NAME,
    PROP_ANALYZED,
    PROP_NAME,
    PROP_NODE,
    PROP_NODE_PREFIX,
    PROP_NODE_SCOPE_INDEX,
    PROP_NOT_NULL_CHECK_ENABLED,
    PROP_NULL_CHECK_ENABLED,
    PROP_ORDERED,
    PROP_PROPERTY_INDEX,
    PROP_TYPE,
    PROP_USE_IN_EXCERPT,
)
from indexdef.tree.node import NodeBuilder
from indexdef.tree.types import ValueType


class IndexRule:
    """
    Indexing configuration for one node type. The properties container is created
    with the rule; property rules are keyed by property name and stored as prop0, prop1, ...
    """

    def __init__(self, builder: NodeBuilder, type_name: str) -> None:
        self._builder = builder
        self._properties_builder = create_child(builder, PROP_NODE)
        self._rule_name = type_name
        self._props: dict[str, PropertyRule] = {}

    @property
    def rule_name(self) -> str:
        """Node type this rule was registered under."""
        return self._rule_name

    def index_node_name(self) -> "IndexRule":
        self._builder.set_property(INDEX_NODE_NAME, True)
        return self

    def property(self, name: str) -> "PropertyRule":
        """Return the rule for property name, creating it on first use."""
        prop_rule = self._props.get(name)
        if prop_rule is None:
            node = create_child(self._properties_builder, f"{PROP_NODE_PREFIX}{len(self._props)}")
            prop_rule = PropertyRule(self, node, name)
            self._props[name] = prop_rule
        return prop_rule


class PropertyRule:
    """Flags for one property within an index rule. Setters are idempotent and chainable."""

    def __init__(self, index_rule: IndexRule, builder: NodeBuilder, name: str) -> None:
        # weak: the enclosing rule owns this object, not the other way round
        self._index_rule: ReferenceType[IndexRule] = ref(index_rule)
        self._builder = builder
        self._name = name
        builder.set_property(PROP_NAME, name)

    @property
    def name(self) -> str:
        return self._name

    def use_in_excerpt(self) -> "PropertyRule":
        self._builder.set_property(PROP_USE_IN_EXCERPT, True)
        return self

    def analyzed(self) -> "PropertyRule":
        self._builder.set_property(PROP_ANALYZED, True)
        return self

    def node_scope_index(self) -> "PropertyRule":
        self._builder.set_property(PROP_NODE_SCOPE_INDEX, True)
        return self

    def ordered(self, type_name: str | None = None) -> "PropertyRule":
        """
        Mark the property as ordered. With type_name, also record it as the explicit
        value type; an unknown name raises InvalidArgumentError and nothing is set.
        """
        if type_name is None:
            self._builder.set_property(PROP_ORDERED, True)
            return self
        value_type = ValueType.from_name(type_name)
        self._builder.set_property(PROP_ORDERED, True)
        self._builder.set_property(PROP_TYPE, value_type.value)
        return self

    def property_index(self) -> "PropertyRule":
        self._builder.set_property(PROP_PROPERTY_INDEX, True)
        return self

    def null_check_enabled(self) -> "PropertyRule":
        self._builder.set_property(PROP_NULL_CHECK_ENABLED, True)
        return self

    def not_null_check_enabled(self) -> "PropertyRule":
        self._builder.set_property(PROP_NOT_NULL_CHECK_ENABLED, True)
        return self

    def enclosing_rule(self) -> IndexRule:
        """
        The owning IndexRule. Only a weak reference is held, so the definition builder
        must still be referenced; otherwise ReferenceError is raised.
        """
        rule = self._index_rule()
        if rule is None:
            raise ReferenceError(
                f"Index rule enclosing property {self._name!r} no longer exists; keep a reference to the builder"
            )
        return rule
