#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/serialization.py
"""JSON serialization and deserialization for trees.

Useful for inspecting parser output and for comparing trees in tests. The
format keeps node kinds, content, attributes and child order. Parent links
are never serialized; they are rebuilt by :meth:`TreeNode.append_child`.

Empty fields are omitted::

    {"kind": "link", "attributes": {"href": "http://x.test"},
     "children": [{"kind": "text", "content": "x"}]}

Examples
--------
    >>> from bbtree.ast.serialization import tree_to_json, tree_from_json
    >>> json_str = tree_to_json(doc, indent=2)
    >>> copy = tree_from_json(json_str)

"""

from __future__ import annotations

import json
from typing import Any

from bbtree.ast.nodes import NodeKind, TreeNode


def tree_to_dict(node: TreeNode) -> dict[str, Any]:
    """Convert a tree to nested dictionaries.

    Parameters
    ----------
    node : TreeNode
        Root of the tree to serialize

    Returns
    -------
    dict
        JSON-compatible representation

    """
    result: dict[str, Any] = {"kind": node.kind.value}
    if node.content:
        result["content"] = node.content
    if node.attributes:
        result["attributes"] = dict(node.attributes)
    if node.children:
        result["children"] = [tree_to_dict(child) for child in node.children]
    return result


def tree_from_dict(data: dict[str, Any]) -> TreeNode:
    """Rebuild a tree from :func:`tree_to_dict` output.

    Raises
    ------
    ValueError
        If a node has a missing or unknown kind

    """
    kind_value = data.get("kind")
    try:
        kind = NodeKind(kind_value)
    except ValueError:
        raise ValueError(f"Unknown node kind: {kind_value!r}") from None

    node = TreeNode(kind, data.get("content", ""), data.get("attributes"))
    for child_data in data.get("children", []):
        node.append_child(tree_from_dict(child_data))
    return node


def tree_to_json(node: TreeNode, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string."""
    return json.dumps(tree_to_dict(node), indent=indent, ensure_ascii=False)


def tree_from_json(json_str: str) -> TreeNode:
    """Deserialize a tree from a JSON string."""
    return tree_from_dict(json.loads(json_str))


__all__ = ["tree_from_dict", "tree_from_json", "tree_to_dict", "tree_to_json"]
