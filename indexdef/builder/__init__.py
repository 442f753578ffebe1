"""Fluent builders for Lucene index definitions."""

from indexdef.builder.aggregates import AggregateRule, Include
from indexdef.builder.index_definition import IndexDefinitionBuilder
from indexdef.builder.index_rules import IndexRule, PropertyRule

__all__ = [
    "AggregateRule",
    "Include",
    "IndexDefinitionBuilder",
    "IndexRule",
    "PropertyRule",
]
