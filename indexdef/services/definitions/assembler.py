"""
Assembler: replays a declarative IndexDefinitionConfig through the fluent builder.
Rules, properties and includes are applied in declaration order, so ordinal node
names (prop0, include0, ...) follow the order they appear in the config.
"""

from typing import Any

from indexdef.builder import IndexDefinitionBuilder, PropertyRule
from indexdef.config.definitions.models import IndexDefinitionConfig, PropertyRuleConfig
from indexdef.config.definitions.static import resolve_definition_config
from indexdef.config.logging import get_logger, log_extra
from indexdef.config.settings import get_settings
from indexdef.tree.node import NodeState

logger = get_logger(__name__)


def _apply_property(rule: PropertyRule, config: PropertyRuleConfig) -> None:
    if config.use_in_excerpt:
        rule.use_in_excerpt()
    if config.analyzed:
        rule.analyzed()
    if config.node_scope_index:
        rule.node_scope_index()
    if config.type is not None:
        rule.ordered(config.type)
    elif config.ordered:
        rule.ordered()
    if config.property_index:
        rule.property_index()
    if config.null_check_enabled:
        rule.null_check_enabled()
    if config.not_null_check_enabled:
        rule.not_null_check_enabled()


def assemble_builder(config: IndexDefinitionConfig) -> IndexDefinitionBuilder:
    """Create a builder and apply every setting of config to it."""
    primary_type = config.primary_type or get_settings().default_root_type
    builder = IndexDefinitionBuilder(primary_type=primary_type)
    if config.evaluate_path_restrictions:
        builder.evaluate_path_restrictions()
    if config.included_paths is not None:
        builder.included_paths(*config.included_paths)
    if config.excluded_paths is not None:
        builder.excluded_paths(*config.excluded_paths)

    for rule_config in config.index_rules:
        rule = builder.index_rule(rule_config.type_name)
        if rule_config.index_node_name:
            rule.index_node_name()
        for prop_config in rule_config.properties:
            _apply_property(rule.property(prop_config.name), prop_config)

    for agg_config in config.aggregates:
        agg = builder.aggregate_rule(agg_config.type_name)
        for include_config in agg_config.includes:
            include = agg.include(include_config.path)
            if include_config.relative_node:
                include.relative_node()
    return builder


def build_definition(config: IndexDefinitionConfig) -> NodeState:
    """Assemble config and return the built snapshot."""
    state = assemble_builder(config).build()
    logger.info(
        "Index definition assembled",
        **log_extra({
            "index_rules": len(config.index_rules),
            "aggregate_rules": len(config.aggregates),
        }),
    )
    return state


def render_definition(profile_or_inline: str | dict[str, Any]) -> dict[str, Any]:
    """
    Resolve a profile name or inline config and return the JSON-ready definition.
    Raises ValueError for unknown profiles or invalid inline configs.
    """
    config = resolve_definition_config(profile_or_inline)
    return build_definition(config).to_dict()
