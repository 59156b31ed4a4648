#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/renderers/html.py
"""HTML rendering from the tree.

This module provides the HtmlRenderer class, which writes the HTML flavour
produced by bulletin-board software for BBCode posts: presentational tags
(``<b>``, ``<font>``, ``<strike>``), code and quotes wrapped in classed
``<div>`` blocks, and text with line breaks turned into ``<br />``.

"""

from __future__ import annotations

import logging
from typing import Optional

from bbtree.ast.nodes import TreeNode
from bbtree.ast.visitors import NodeVisitor
from bbtree.constants import HTML_LIST_TYPE_CLASSES
from bbtree.options.html import HtmlRendererOptions
from bbtree.renderers.base import BaseRenderer, InlineContentMixin
from bbtree.utils.html_utils import escape_html
from bbtree.utils.security import sanitize_url

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render a tree to forum-style HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from bbtree.parsers.bbcode import BBCodeParser
        >>> tree = BBCodeParser().parse("[b]Hi[/b]\\nthere")
        >>> HtmlRenderer().render_to_string(tree)
        '<b>Hi</b><br />there'

    """

    format_name = "html"

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []

    def _render(self, tree: TreeNode) -> str:
        self._output = []
        tree.accept(self)
        result = "".join(self._output)
        self._output = []
        return result

    def _format_text(self, text: str) -> str:
        """Escape text, then turn line endings into ``<br />`` and double spaces into ``&nbsp;``."""
        text = escape_html(text, enabled=self.options.escape_html)
        text = text.replace("\r\n", "<br />").replace("\n", "<br />")
        return text.replace("  ", "&nbsp;&nbsp;")

    def _url(self, url: str) -> str:
        if self.options.sanitize_urls:
            url = sanitize_url(url)
        return escape_html(url)

    @staticmethod
    def _attribute(name: str, value: Optional[str]) -> str:
        """Format ``name="value"`` with a leading space, or nothing for an empty value."""
        if not value:
            return ""
        return f' {name}="{escape_html(value)}"'

    def _wrap(self, node: TreeNode, open_tag: str, close_tag: str) -> None:
        self._output.append(f"{open_tag}{self._render_children(node)}{close_tag}")

    def visit_document(self, node: TreeNode) -> None:
        self._visit_children(node)

    def visit_paragraph(self, node: TreeNode) -> None:
        self._wrap(node, "<p>", "</p>\n")

    def visit_text(self, node: TreeNode) -> None:
        self._output.append(self._format_text(node.content))

    def visit_bold(self, node: TreeNode) -> None:
        self._wrap(node, "<b>", "</b>")

    def visit_italic(self, node: TreeNode) -> None:
        self._wrap(node, "<i>", "</i>")

    def visit_underline(self, node: TreeNode) -> None:
        self._wrap(node, "<u>", "</u>")

    def visit_strikethrough(self, node: TreeNode) -> None:
        self._wrap(node, "<strike>", "</strike>")

    def visit_link(self, node: TreeNode) -> None:
        """Render a link; a link without children shows its own address."""
        href = node.get_attribute("href") or ""
        content = self._render_children(node) if node.children else self._format_text(href)
        target = self._attribute("target", self.options.link_target)
        self._output.append(f'<a href="{self._url(href)}"{target}>{content}</a>')

    def visit_image(self, node: TreeNode) -> None:
        src = self._url(node.get_attribute("src") or "")
        size = self._attribute("width", node.get_attribute("width")) + self._attribute(
            "height", node.get_attribute("height")
        )
        alt = escape_html(node.get_attribute("alt") or "")
        self._output.append(f'<img src="{src}"{size} border="0" alt="{alt}" />')

    def visit_code_block(self, node: TreeNode) -> None:
        code = self._format_text(node.content) + self._render_children(node)
        self._output.append(f'<div class="blockcode"><blockquote>{code}</blockquote></div>')

    def visit_code_inline(self, node: TreeNode) -> None:
        code = self._format_text(node.content) + self._render_children(node)
        self._output.append(f"<code>{code}</code>")

    def visit_quote(self, node: TreeNode) -> None:
        author = node.get_attribute("author")
        cite = f"<cite>{escape_html(author)}</cite>" if author else ""
        self._wrap(node, f'<div class="quote"><blockquote>{cite}', "</blockquote></div>\n")

    def visit_list(self, node: TreeNode) -> None:
        """Render a list; ordered styles carry both ``type`` and the matching ``litype`` class."""
        style = node.get_attribute("style") or ""
        css_class = HTML_LIST_TYPE_CLASSES.get(style)
        if css_class:
            open_tag = f'<ul type="{escape_html(style)}" class="{css_class}">'
        else:
            open_tag = "<ul>"
        self._wrap(node, open_tag, "</ul>")

    def visit_list_item(self, node: TreeNode) -> None:
        self._wrap(node, "<li>", "</li>")

    def visit_table(self, node: TreeNode) -> None:
        width = self._attribute("width", node.get_attribute("width"))
        background = self._background_style(node)
        self._wrap(node, f'<table class="t_table"{width}{background}>', "</table>")

    def visit_table_row(self, node: TreeNode) -> None:
        self._wrap(node, f"<tr{self._background_style(node)}>", "</tr>")

    def visit_table_cell(self, node: TreeNode) -> None:
        self._wrap(node, f"<td{self._attribute('width', node.get_attribute('width'))}>", "</td>")

    def visit_line_break(self, node: TreeNode) -> None:
        self._output.append("<br />")

    def visit_horizontal_rule(self, node: TreeNode) -> None:
        self._output.append('<hr class="l" />')

    def visit_font(self, node: TreeNode) -> None:
        self._font(node, "face")

    def visit_color(self, node: TreeNode) -> None:
        self._font(node, "color")

    def visit_size(self, node: TreeNode) -> None:
        self._font(node, "size")

    def visit_html_raw(self, node: TreeNode) -> None:
        self._output.append(node.content + self._plain_text(node))

    def _font(self, node: TreeNode, attribute: str) -> None:
        value = node.get_attribute(attribute)
        if value:
            self._wrap(node, f"<font{self._attribute(attribute, value)}>", "</font>")
        else:
            self._visit_children(node)

    def _background_style(self, node: TreeNode) -> str:
        background = node.get_attribute("bgcolor")
        if not background:
            return ""
        return f' style="background-color: {escape_html(background)}"'


__all__ = ["HtmlRenderer"]
