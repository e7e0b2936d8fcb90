"""Content node reader used by the component adapters."""

from .loader import load_content_tree
from .node import ContentNode, is_blank, node_from_mapping

__all__ = ["ContentNode", "is_blank", "load_content_tree", "node_from_mapping"]
