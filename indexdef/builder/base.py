"""Node creation shared by all definition builders."""

from indexdef.builder.constants import JCR_PRIMARYTYPE, NT_UNSTRUCTURED
from indexdef.config.logging import get_logger
from indexdef.tree.node import NodeBuilder
from indexdef.tree.types import PropertyType

logger = get_logger(__name__)


def create_child(parent: NodeBuilder, name: str) -> NodeBuilder:
    """Create (or get) a child node and stamp it as nt:unstructured before anything else is set."""
    node = parent.child(name)
    node.set_property(JCR_PRIMARYTYPE, NT_UNSTRUCTURED, PropertyType.NAME)
    logger.debug("Definition node created", extra={"node_name": name})
    return node
