"""Declarative index definition models. Read-only; no business logic."""

from pydantic import BaseModel, Field, field_validator

from indexdef.tree.types import ValueType


class PropertyRuleConfig(BaseModel):
    """Flags for one property of an index rule."""

    name: str = Field(..., min_length=1, description="Property name or relative path")
    use_in_excerpt: bool = Field(default=False)
    analyzed: bool = Field(default=False)
    node_scope_index: bool = Field(default=False)
    ordered: bool = Field(default=False)
    type: str | None = Field(default=None, description="Explicit value type; implies ordered")
    property_index: bool = Field(default=False)
    null_check_enabled: bool = Field(default=False)
    not_null_check_enabled: bool = Field(default=False)

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str | None) -> str | None:
        if value is not None:
            ValueType.from_name(value)
        return value


class IndexRuleConfig(BaseModel):
    """Index rule for one node type."""

    type_name: str = Field(..., min_length=1, description="Node type, e.g. nt:base")
    index_node_name: bool = Field(default=False)
    properties: list[PropertyRuleConfig] = Field(default_factory=list)


class IncludeConfig(BaseModel):
    """One include of an aggregate rule."""

    path: str = Field(..., min_length=1)
    relative_node: bool = Field(default=False)


class AggregateRuleConfig(BaseModel):
    """Aggregate rule for one primary type."""

    type_name: str = Field(..., min_length=1, description="Primary type, e.g. nt:file")
    includes: list[IncludeConfig] = Field(default_factory=list)


class IndexDefinitionConfig(BaseModel):
    """A complete index definition."""

    primary_type: str | None = Field(default=None, description="Root jcr:primaryType; settings default when unset")
    evaluate_path_restrictions: bool = Field(default=False)
    included_paths: list[str] | None = Field(default=None)
    excluded_paths: list[str] | None = Field(default=None)
    index_rules: list[IndexRuleConfig] = Field(default_factory=list)
    aggregates: list[AggregateRuleConfig] = Field(default_factory=list)
