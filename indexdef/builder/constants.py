"""Property and node names of a Lucene index definition. Consumed verbatim by the indexing engine."""

JCR_PRIMARYTYPE = "jcr:primaryType"
NT_UNSTRUCTURED = "nt:unstructured"
OAK_QUERY_INDEX_DEFINITION = "oak:QueryIndexDefinition"

# Root
COMPAT_MODE = "compatVersion"
COMPAT_MODE_VERSION = 2
ASYNC = "async"
ASYNC_LANE = "async"
TYPE = "type"
TYPE_LUCENE = "lucene"
EVALUATE_PATH_RESTRICTION = "evaluatePathRestrictions"
PROP_INCLUDED_PATHS = "includedPaths"
PROP_EXCLUDED_PATHS = "excludedPaths"

# Index rules
INDEX_RULES = "indexRules"
PROP_NODE = "properties"
INDEX_NODE_NAME = "indexNodeName"
PROP_NODE_PREFIX = "prop"
PROP_NAME = "name"
PROP_TYPE = "type"
PROP_USE_IN_EXCERPT = "useInExcerpt"
PROP_ANALYZED = "analyzed"
PROP_NODE_SCOPE_INDEX = "nodeScopeIndex"
PROP_ORDERED = "ordered"
PROP_PROPERTY_INDEX = "propertyIndex"
PROP_NULL_CHECK_ENABLED = "nullCheckEnabled"
PROP_NOT_NULL_CHECK_ENABLED = "notNullCheckEnabled"

# Aggregates
AGGREGATES = "aggregates"
INCLUDE_NODE_PREFIX = "include"
AGG_PATH = "path"
AGG_RELATIVE_NODE = "relativeNode"
