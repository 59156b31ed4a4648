#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/renderers/markdown.py
"""Markdown rendering from the tree.

This module provides the MarkdownRenderer class which converts tree nodes to
Markdown text. Kinds Markdown has no syntax for (font, color and size spans,
raw HTML wrappers) contribute their children only; underline is written as
inline ``<u>`` HTML.

The renderer maintains context (list nesting and item numbering) during
traversal. Text is written without escaping.

"""

from __future__ import annotations

import logging
import re

from bbtree.ast.nodes import NodeKind, TreeNode
from bbtree.ast.visitors import NodeVisitor
from bbtree.options.markdown import MarkdownRendererOptions
from bbtree.renderers.base import BaseRenderer, InlineContentMixin, ListContextMixin, format_list_marker

logger = logging.getLogger(__name__)


class MarkdownRenderer(NodeVisitor, InlineContentMixin, ListContextMixin, BaseRenderer):
    """Render a tree to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from bbtree.parsers.bbcode import BBCodeParser
        >>> tree = BBCodeParser().parse("[list=1][*]one[/*][*]two[/*][/list]")
        >>> print(MarkdownRenderer().render_to_string(tree))
        1. one
        2. two

    """

    format_name = "markdown"

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._list_stack = []

    def _render(self, tree: TreeNode) -> str:
        self._output = []
        self._list_stack = []

        tree.accept(self)

        result = "".join(self._output)
        self._output = []
        self._list_stack = []
        return self._cleanup_output(result)

    def _cleanup_output(self, text: str) -> str:
        """Clean up the final output.

        Parameters
        ----------
        text : str
            Raw markdown text

        Returns
        -------
        str
            Cleaned markdown text

        """
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        text = re.sub(r"\n{3,}", "\n\n", text)
        return text.rstrip()

    def _at_line_start(self) -> bool:
        for chunk in reversed(self._output):
            if chunk:
                return chunk.endswith("\n")
        return True

    def _start_block(self) -> None:
        """Make sure the next output begins on a fresh line."""
        if not self._at_line_start():
            self._output.append("\n")

    def visit_document(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_paragraph(self, node: TreeNode) -> None:
        self._start_block()
        self._visit_children(node)
        self._output.append("\n\n")

    def visit_text(self, node: TreeNode) -> None:
        self._output.append(node.content)

    def visit_bold(self, node: TreeNode) -> None:
        self._output.append(f"**{self._render_children(node)}**")

    def visit_italic(self, node: TreeNode) -> None:
        self._output.append(f"*{self._render_children(node)}*")

    def visit_underline(self, node: TreeNode) -> None:
        self._output.append(f"<u>{self._render_children(node)}</u>")

    def visit_strikethrough(self, node: TreeNode) -> None:
        self._output.append(f"~~{self._render_children(node)}~~")

    def visit_link(self, node: TreeNode) -> None:
        """Render a link; without an address only the text is kept."""
        href = node.get_attribute("href")
        text = self._render_children(node)
        if href:
            self._output.append(f"[{text or href}]({href})")
        else:
            self._output.append(text)

    def visit_image(self, node: TreeNode) -> None:
        src = node.get_attribute("src") or self._plain_text(node)
        alt = node.get_attribute("alt") or ""
        if src:
            self._output.append(f"![{alt}]({src})")

    def visit_code_block(self, node: TreeNode) -> None:
        """Render a fenced code block, lengthening the fence past any run inside the code."""
        code = node.content + self._plain_text(node)
        fence = self.options.code_fence
        fence_char = fence[0]
        longest = max((len(run) for run in re.findall(re.escape(fence_char) + "+", code)), default=0)
        if longest >= len(fence):
            fence = fence_char * (longest + 1)

        language = node.get_attribute("language") or ""
        self._start_block()
        self._output.append(f"{fence}{language}\n")
        self._output.append(code)
        if not code.endswith("\n"):
            self._output.append("\n")
        self._output.append(f"{fence}\n\n")

    def visit_code_inline(self, node: TreeNode) -> None:
        code = node.content + self._plain_text(node)
        longest = max((len(run) for run in re.findall(r"`+", code)), default=0)
        ticks = "`" * (longest + 1)
        if longest:
            self._output.append(f"{ticks} {code} {ticks}")
        else:
            self._output.append(f"{ticks}{code}{ticks}")

    def visit_quote(self, node: TreeNode) -> None:
        author = node.get_attribute("author")
        quoted = self._render_children(node).strip("\n")
        lines = quoted.split("\n")
        if author:
            lines.insert(0, f"**{author}** wrote:")
            lines.insert(1, "")
        self._start_block()
        self._output.append("\n".join(f"> {line}" if line else ">" for line in lines))
        self._output.append("\n\n")

    def visit_list(self, node: TreeNode) -> None:
        self._start_block()
        self._enter_list(node)
        try:
            self._visit_children(node)
        finally:
            self._exit_list()
        self._start_block()
        if not self._list_stack:
            self._output.append("\n")

    def visit_list_item(self, node: TreeNode) -> None:
        style, index = self._next_list_item()
        label = format_list_marker(style, index)
        marker = f"{label}." if label else self.options.bullet
        indent = " " * (self.options.list_indent * max(self._list_depth - 1, 0))

        self._start_block()
        self._output.append(f"{indent}{marker} ")
        self._visit_children(node)

    def visit_table(self, node: TreeNode) -> None:
        """Render a table as a GFM pipe table; the first row becomes the header."""
        rows = [self._render_row(child) for child in node.children]
        rows = [row for row in rows if row]
        if not rows:
            return

        num_cols = max(len(row) for row in rows)
        self._start_block()
        for index, row in enumerate(rows):
            cells = row + [""] * (num_cols - len(row))
            self._output.append("| " + " | ".join(cells) + " |\n")
            if index == 0:
                self._output.append("|" + "|".join(" --- " for _ in range(num_cols)) + "|\n")
        self._output.append("\n")

    def _render_row(self, node: TreeNode) -> list[str]:
        if node.kind is NodeKind.TABLE_ROW:
            cells = [child for child in node.children if child.kind is NodeKind.TABLE_CELL]
            return [self._render_cell(cell) for cell in cells]
        # Anything else placed directly in a table becomes a one-cell row
        return [self._render_cell_content(self._render_node(node))]

    def _render_cell(self, node: TreeNode) -> str:
        return self._render_cell_content(self._render_children(node))

    @staticmethod
    def _render_cell_content(text: str) -> str:
        return text.strip().replace("\n", " ").replace("|", "\\|")

    def _render_node(self, node: TreeNode) -> str:
        saved_output = self._output
        self._output = []
        node.accept(self)
        result = "".join(self._output)
        self._output = saved_output
        return result

    def visit_table_row(self, node: TreeNode) -> None:
        # Rows are rendered by visit_table; a row outside a table is a one-row table
        self._start_block()
        cells = self._render_row(node)
        if cells:
            self._output.append("| " + " | ".join(cells) + " |\n\n")

    def visit_table_cell(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_line_break(self, node: TreeNode) -> None:
        self._output.append("\\\n" if self.options.line_break == "backslash" else "  \n")

    def visit_horizontal_rule(self, node: TreeNode) -> None:
        """Render a thematic break preceded by a blank line.

        A rule directly under a text line would turn that line into a setext
        heading.
        """
        written = "".join(self._output)
        if written.strip() and not written.endswith("\n\n"):
            self._output.append("\n" if written.endswith("\n") else "\n\n")
        self._output.append("---\n\n")

    def visit_font(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_color(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_size(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_html_raw(self, node: TreeNode) -> None:
        self._output.append(node.content)
        self._visit_children(node)


__all__ = ["MarkdownRenderer"]
