#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/__init__.py
"""Intermediate tree shared by every bbtree parser and renderer.

The module consists of several components:

- nodes: the node kind enumeration and the tree node class
- tags: the BBCode tag table shared by parser and renderer
- visitors: the visitor base class every renderer implements
- optimizer: the normalization passes run after each parse
- serialization: JSON conversion for inspection and testing

Examples
--------
    >>> from bbtree.ast import NodeKind, TreeNode, optimize_tree
    >>> doc = TreeNode(NodeKind.DOCUMENT)
    >>> doc.append_child(TreeNode(NodeKind.TEXT, "hello"))
    >>> optimize_tree(doc) is doc
    True

"""

from __future__ import annotations

from bbtree.ast.nodes import EMPTY_LEAF_KINDS, NodeKind, TreeNode
from bbtree.ast.optimizer import TreeOptimizer, optimize_tree
from bbtree.ast.serialization import tree_from_dict, tree_from_json, tree_to_dict, tree_to_json
from bbtree.ast.visitors import NodeVisitor, visitor_method_name

__all__ = [
    "EMPTY_LEAF_KINDS",
    "NodeKind",
    "NodeVisitor",
    "TreeNode",
    "TreeOptimizer",
    "optimize_tree",
    "tree_from_dict",
    "tree_from_json",
    "tree_to_dict",
    "tree_to_json",
    "visitor_method_name",
]
