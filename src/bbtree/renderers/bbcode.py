#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/renderers/bbcode.py
"""BBCode rendering from the tree.

Tag names come from the shared tag table, so whatever the parser accepts
under several spellings (``[b]``/``[strong]``) is written back in its
canonical spelling. Text is written as-is; BBCode has no escaping.

Rendering a parsed tree and parsing the result again yields the same
optimized tree. List items are closed explicitly with ``[/*]`` for that
reason: an unclosed ``[*]`` would swallow the next item when re-parsed.
"""

from __future__ import annotations

import logging
from typing import Optional

from bbtree.ast.nodes import NodeKind, TreeNode
from bbtree.ast.tags import canonical_tag, format_table_spec, value_attribute
from bbtree.ast.visitors import NodeVisitor
from bbtree.options.bbcode import BBCodeRendererOptions
from bbtree.renderers.base import BaseRenderer, InlineContentMixin

logger = logging.getLogger(__name__)


class BBCodeRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render a tree to BBCode.

    Parameters
    ----------
    options : BBCodeRendererOptions or None, default = None
        BBCode rendering options

    Examples
    --------
        >>> from bbtree.parsers.html import HtmlParser
        >>> from bbtree.dom.soup import SoupDOMAdapter
        >>> tree = HtmlParser(SoupDOMAdapter()).parse('<strong>Hi</strong> <a href="http://a.test">a</a>')
        >>> BBCodeRenderer().render_to_string(tree)
        '[b]Hi[/b] [url=http://a.test]a[/url]'

    """

    format_name = "bbcode"

    def __init__(self, options: BBCodeRendererOptions | None = None):
        """Initialize the BBCode renderer with options."""
        BaseRenderer._validate_options_type(options, BBCodeRendererOptions, "bbcode")
        options = options or BBCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: BBCodeRendererOptions = options
        self._output: list[str] = []

    def _render(self, tree: TreeNode) -> str:
        self._output = []
        tree.accept(self)
        result = "".join(self._output)
        self._output = []
        return result

    def _tag(self, node: TreeNode, value: Optional[str] = None, body: Optional[str] = None) -> None:
        """Write ``[tag=value]body[/tag]`` using the canonical name for the node kind.

        ``value`` defaults to the kind's value attribute and ``body`` to the
        rendered children. Values are written as is: BBCode has no escape for
        ``]``, so a value containing one ends the opening tag early when read
        back. Links and images avoid this by moving such an address into the
        body.
        """
        name = canonical_tag(node.kind)
        if value is None:
            attribute = value_attribute(node.kind)
            value = node.get_attribute(attribute) if attribute else None
        if body is None:
            body = self._render_children(node)
        open_tag = f"[{name}={value}]" if value else f"[{name}]"
        self._output.append(f"{open_tag}{body}[/{name}]")

    def visit_document(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_paragraph(self, node: TreeNode) -> None:
        self._visit_children(node)
        self._output.append("\n")

    def visit_text(self, node: TreeNode) -> None:
        self._output.append(node.content)

    def visit_bold(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_italic(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_underline(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_strikethrough(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_link(self, node: TreeNode) -> None:
        """Render a link, using the short ``[url]address[/url]`` form when the text is the address."""
        href = node.get_attribute("href")
        children = node.children
        is_bare = len(children) == 1 and children[0].is_text and children[0].content == href
        # An address containing "]" cannot be a tag value; its link text is dropped
        if href and (is_bare or "]" in href):
            self._tag(node, value="", body=href)
        else:
            self._tag(node)

    def visit_image(self, node: TreeNode) -> None:
        src = node.get_attribute("src")
        if src and node.children and "]" not in src:
            self._tag(node, value=src)
        elif src:
            self._tag(node, value="", body=src)
        elif node.children:
            self._tag(node, value="")

    def visit_code_block(self, node: TreeNode) -> None:
        self._tag(node, body=node.content + self._render_children(node))

    def visit_code_inline(self, node: TreeNode) -> None:
        self._tag(node, body=node.content + self._render_children(node))

    def visit_quote(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_list(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_list_item(self, node: TreeNode) -> None:
        closing = "[/*]" if self.options.close_list_items else ""
        self._output.append(f"[*]{self._render_children(node)}{closing}")

    def visit_table(self, node: TreeNode) -> None:
        spec = format_table_spec(node.get_attribute("width"), node.get_attribute("bgcolor"))
        self._tag(node, value=spec or "")

    def visit_table_row(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_table_cell(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_line_break(self, node: TreeNode) -> None:
        self._output.append("\n")

    def visit_horizontal_rule(self, node: TreeNode) -> None:
        self._output.append(f"[{canonical_tag(NodeKind.HORIZONTAL_RULE)}]")

    def visit_font(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_color(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_size(self, node: TreeNode) -> None:
        self._tag(node)

    def visit_html_raw(self, node: TreeNode) -> None:
        self._output.append(node.content)
        self._visit_children(node)


__all__ = ["BBCodeRenderer"]
