"""Read content trees from YAML exports."""

from __future__ import annotations

from pathlib import Path

from ruamel.yaml import YAML

from .node import ContentNode, node_from_mapping


def load_content_tree(path: Path, *, name: str | None = None) -> ContentNode:
    """Load a YAML content export into a :class:`ContentNode` tree.

    The root node is named after the file stem unless ``name`` is given.
    Nested mappings become child nodes in document order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    """
    if not path.exists():
        msg = f"Content file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level content structure must be a mapping."
        raise TypeError(msg)
    return node_from_mapping(name or path.stem, loaded)


__all__ = ["load_content_tree"]
