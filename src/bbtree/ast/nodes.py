#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/nodes.py
"""Tree node model shared by every parser, optimizer pass and renderer.

A document is a tree of :class:`TreeNode` objects. Each node carries a
:class:`NodeKind` from a closed enumeration, a string payload (meaningful for
text nodes), an ordered attribute map and an ordered list of children.

Ownership runs strictly downward: a parent owns its children, and the
``parent`` back-reference is a weak reference used only to detach a node
from its current owner. A node is never shared between two parents.

Examples
--------
Build a small tree by hand:

    >>> from bbtree.ast import NodeKind, TreeNode
    >>> doc = TreeNode(NodeKind.DOCUMENT)
    >>> bold = TreeNode(NodeKind.BOLD)
    >>> bold.append_child(TreeNode(NodeKind.TEXT, "hello"))
    >>> doc.append_child(bold)
    >>> bold.parent is doc
    True

"""

from __future__ import annotations

import weakref
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional


class NodeKind(Enum):
    """Semantic role of a tree node.

    The value of each member is the suffix of the matching ``visit_*`` method
    on :class:`bbtree.ast.visitors.NodeVisitor`.
    """

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    TEXT = "text"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"
    CODE_BLOCK = "code_block"
    CODE_INLINE = "code_inline"
    QUOTE = "quote"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    LINE_BREAK = "line_break"
    HORIZONTAL_RULE = "horizontal_rule"
    FONT = "font"
    COLOR = "color"
    SIZE = "size"
    HTML_RAW = "html_raw"


# Kinds that are meaningful without any children
EMPTY_LEAF_KINDS = frozenset({NodeKind.IMAGE, NodeKind.HORIZONTAL_RULE, NodeKind.LINE_BREAK})


class TreeNode:
    """A single node of the intermediate document tree.

    Parameters
    ----------
    kind : NodeKind
        Semantic role of the node
    content : str or None, default = ""
        String payload. ``None`` is normalized to the empty string.
    attributes : Mapping[str, str] or None, default = None
        Initial attributes, copied in iteration order

    Raises
    ------
    TypeError
        If ``kind`` is not a :class:`NodeKind`

    """

    def __init__(
        self,
        kind: NodeKind,
        content: Optional[str] = "",
        attributes: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the node with a kind, payload and attributes."""
        if not isinstance(kind, NodeKind):
            raise TypeError(f"kind must be a NodeKind, got {type(kind).__name__}")
        self._kind = kind
        self._content = content if content is not None else ""
        self._attributes: dict[str, str] = {}
        self._children: list[TreeNode] = []
        self._parent: Optional[weakref.ReferenceType[TreeNode]] = None
        if attributes:
            for name, value in attributes.items():
                self.set_attribute(name, value)

    @property
    def kind(self) -> NodeKind:
        """Semantic role of this node."""
        return self._kind

    @property
    def content(self) -> str:
        """String payload, never ``None``."""
        return self._content

    @content.setter
    def content(self, value: Optional[str]) -> None:
        self._content = value if value is not None else ""

    @property
    def attributes(self) -> Mapping[str, str]:
        """Read-only view of the attribute map."""
        return MappingProxyType(self._attributes)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the attribute value, or ``default`` when it is not set."""
        return self._attributes.get(name, default)

    def set_attribute(self, name: Optional[str], value: Optional[str]) -> None:
        """Set an attribute. A ``None`` name or value is ignored."""
        if name is None or value is None:
            return
        self._attributes[name] = value

    def has_attribute(self, name: str) -> bool:
        """Return True when ``name`` is set on this node."""
        return name in self._attributes

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute if present."""
        self._attributes.pop(name, None)

    @property
    def children(self) -> tuple[TreeNode, ...]:
        """Children in document order, as an immutable snapshot."""
        return tuple(self._children)

    @property
    def parent(self) -> Optional[TreeNode]:
        """Node that currently owns this one, or None for a detached node."""
        return self._parent() if self._parent is not None else None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return not self._children

    @property
    def is_text(self) -> bool:
        """True for plain text nodes."""
        return self._kind is NodeKind.TEXT

    @property
    def last_child(self) -> Optional[TreeNode]:
        """Last child, or None for a leaf."""
        return self._children[-1] if self._children else None

    def append_child(self, child: Optional[TreeNode]) -> None:
        """Append ``child`` and make this node its parent.

        A child that is still attached to another node is detached first, so
        the structure stays a tree. ``None`` is ignored.
        """
        if child is None:
            return
        current = child.parent
        if current is not None:
            current.remove_child(child)
        self._children.append(child)
        child._parent = weakref.ref(self)

    def remove_child(self, child: Optional[TreeNode]) -> None:
        """Remove ``child`` and clear its parent link.

        Matching is by identity. Removing a node that is not a child of this
        node does nothing.
        """
        if child is None:
            return
        for index, existing in enumerate(self._children):
            if existing is child:
                del self._children[index]
                child._parent = None
                return

    def clear_children(self) -> None:
        """Detach every child."""
        for child in self._children:
            child._parent = None
        self._children.clear()

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_<kind>``.

        Parameters
        ----------
        visitor : Any
            Object with a ``visit_*`` method for this node's kind

        Returns
        -------
        Any
            Result of the visitor method

        """
        return getattr(visitor, f"visit_{self._kind.value}")(self)

    def __repr__(self) -> str:
        """Return a short description of the node."""
        preview = self._content if len(self._content) <= 20 else self._content[:20] + "..."
        return (
            f"TreeNode(kind={self._kind.name}, content={preview!r}, "
            f"attributes={self._attributes}, children={len(self._children)})"
        )


__all__ = ["EMPTY_LEAF_KINDS", "NodeKind", "TreeNode"]
