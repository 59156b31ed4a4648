#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

Every renderer is a :class:`NodeVisitor`. The visitor declares one abstract
method per :class:`~bbtree.ast.nodes.NodeKind`, so a subclass that forgets a
kind cannot be instantiated and the omission surfaces as a ``TypeError``
instead of silently dropped output.

Examples
--------
Count the text nodes of a document:

    >>> class TextCounter(NodeVisitor):
    ...     def __init__(self):
    ...         self.count = 0
    ...
    ...     def generic_visit(self, node):
    ...         for child in node.children:
    ...             child.accept(self)
    ...
    ...     def visit_text(self, node):
    ...         self.count += 1
    ...
    ...     # remaining visit_* methods delegate to generic_visit

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from bbtree.ast.nodes import NodeKind, TreeNode


def visitor_method_name(kind: NodeKind) -> str:
    """Return the name of the visitor method handling ``kind``."""
    return f"visit_{kind.value}"


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Subclasses implement a ``visit_*`` method for every node kind. Nodes call
    back into the visitor through :meth:`TreeNode.accept`.
    """

    def visit(self, node: TreeNode) -> Any:
        """Visit ``node`` through its kind-specific method."""
        return node.accept(self)

    def generic_visit(self, node: TreeNode) -> Any:
        """Visit every child of ``node`` in document order."""
        for child in node.children:
            child.accept(self)

    @abstractmethod
    def visit_document(self, node: TreeNode) -> Any:
        """Visit the document root."""

    @abstractmethod
    def visit_paragraph(self, node: TreeNode) -> Any:
        """Visit a paragraph."""

    @abstractmethod
    def visit_text(self, node: TreeNode) -> Any:
        """Visit a plain text node."""

    @abstractmethod
    def visit_bold(self, node: TreeNode) -> Any:
        """Visit a bold span."""

    @abstractmethod
    def visit_italic(self, node: TreeNode) -> Any:
        """Visit an italic span."""

    @abstractmethod
    def visit_underline(self, node: TreeNode) -> Any:
        """Visit an underlined span."""

    @abstractmethod
    def visit_strikethrough(self, node: TreeNode) -> Any:
        """Visit a strikethrough span."""

    @abstractmethod
    def visit_link(self, node: TreeNode) -> Any:
        """Visit a link. The target lives in the ``href`` attribute."""

    @abstractmethod
    def visit_image(self, node: TreeNode) -> Any:
        """Visit an image. The source lives in the ``src`` attribute."""

    @abstractmethod
    def visit_code_block(self, node: TreeNode) -> Any:
        """Visit a code block."""

    @abstractmethod
    def visit_code_inline(self, node: TreeNode) -> Any:
        """Visit inline code."""

    @abstractmethod
    def visit_quote(self, node: TreeNode) -> Any:
        """Visit a block quote."""

    @abstractmethod
    def visit_list(self, node: TreeNode) -> Any:
        """Visit a list. The marker style lives in the ``style`` attribute."""

    @abstractmethod
    def visit_list_item(self, node: TreeNode) -> Any:
        """Visit a list item."""

    @abstractmethod
    def visit_table(self, node: TreeNode) -> Any:
        """Visit a table."""

    @abstractmethod
    def visit_table_row(self, node: TreeNode) -> Any:
        """Visit a table row."""

    @abstractmethod
    def visit_table_cell(self, node: TreeNode) -> Any:
        """Visit a table cell."""

    @abstractmethod
    def visit_line_break(self, node: TreeNode) -> Any:
        """Visit a line break."""

    @abstractmethod
    def visit_horizontal_rule(self, node: TreeNode) -> Any:
        """Visit a horizontal rule."""

    @abstractmethod
    def visit_font(self, node: TreeNode) -> Any:
        """Visit a font-face span."""

    @abstractmethod
    def visit_color(self, node: TreeNode) -> Any:
        """Visit a colored span."""

    @abstractmethod
    def visit_size(self, node: TreeNode) -> Any:
        """Visit a sized span."""

    @abstractmethod
    def visit_html_raw(self, node: TreeNode) -> Any:
        """Visit raw markup that passes through unchanged."""


__all__ = ["NodeVisitor", "visitor_method_name"]
