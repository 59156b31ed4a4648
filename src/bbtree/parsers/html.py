#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/parsers/html.py
"""HTML to tree converter.

This module converts HTML documents into a raw bbtree tree. The markup is read
through a :class:`~bbtree.dom.base.DOMAdapter`, never through a concrete HTML
library, and is sanitized with :meth:`HtmlParser.strip_unsafe_content` before
any element is converted.

Elements without a mapping are transparent: their converted contents are
spliced into the parent so no text is lost.

"""

from __future__ import annotations

import logging
import re
from typing import Optional, Union

from bbtree.ast.nodes import NodeKind, TreeNode
from bbtree.dom.base import DOMAdapter, DOMDocument, DOMElement
from bbtree.exceptions import ValidationError
from bbtree.options.html import HtmlParserOptions
from bbtree.parsers.base import BaseParser

logger = logging.getLogger(__name__)

_BACKGROUND_COLOR_PATTERN = re.compile(r"background-color\s*:\s*([^;]+)", re.IGNORECASE)
_LANGUAGE_CLASS_PATTERN = re.compile(r"^(?:language|lang)-(.+)$")


class HtmlParser(BaseParser):
    """Convert HTML to a raw tree.

    Parameters
    ----------
    dom_adapter : DOMAdapter
        Document-tree implementation used to parse the markup
    options : HtmlParserOptions or None, default = None
        Sanitization and conversion options

    Raises
    ------
    ValidationError
        If ``dom_adapter`` is None

    Examples
    --------
        >>> from bbtree.dom.soup import SoupDOMAdapter
        >>> tree = HtmlParser(SoupDOMAdapter()).parse("<b>Hi</b> there")
        >>> [child.kind.value for child in tree.children]
        ['bold', 'text']

    """

    # Elements that map onto a node kind with no attributes
    SIMPLE_ELEMENTS: dict[str, NodeKind] = {
        "p": NodeKind.PARAGRAPH,
        "span": NodeKind.PARAGRAPH,
        "b": NodeKind.BOLD,
        "strong": NodeKind.BOLD,
        "i": NodeKind.ITALIC,
        "em": NodeKind.ITALIC,
        "u": NodeKind.UNDERLINE,
        "s": NodeKind.STRIKETHROUGH,
        "strike": NodeKind.STRIKETHROUGH,
        "del": NodeKind.STRIKETHROUGH,
        "li": NodeKind.LIST_ITEM,
    }

    _ELEMENT_HANDLERS: dict[str, str] = {
        "div": "_process_div",
        "a": "_process_link",
        "img": "_process_image",
        "pre": "_process_pre",
        "code": "_process_code",
        "blockquote": "_process_blockquote",
        "ul": "_process_list",
        "ol": "_process_list",
        "table": "_process_table",
        "tr": "_process_table_row",
        "td": "_process_table_cell",
        "th": "_process_table_cell",
        "br": "_process_line_break",
        "hr": "_process_horizontal_rule",
        "font": "_process_font",
    }

    def __init__(self, dom_adapter: DOMAdapter, options: HtmlParserOptions | None = None):
        """Initialize the HTML parser with a document-tree adapter and options."""
        if dom_adapter is None:
            raise ValidationError(
                "An HTML parser requires a DOM adapter",
                parameter_name="dom_adapter",
                parameter_value=dom_adapter,
            )
        BaseParser._validate_options_type(options, HtmlParserOptions, "html")
        options = options or HtmlParserOptions()
        super().__init__(options)
        self.options: HtmlParserOptions = options
        self.dom_adapter = dom_adapter

    def parse(self, input_data: Union[str, bytes, None]) -> TreeNode:
        """Parse an HTML document into a raw tree.

        Parameters
        ----------
        input_data : str, bytes or None
            HTML markup; bytes are decoded as UTF-8

        Returns
        -------
        TreeNode
            DOCUMENT node; empty for empty input

        """
        html_content = self._load_text(input_data)
        root = TreeNode(NodeKind.DOCUMENT)
        if not html_content:
            return root

        document = self.dom_adapter.parse_html(html_content)
        removed = self.strip_unsafe_content(document)
        if removed:
            logger.debug("Removed %d unsafe elements before conversion", removed)

        self._process_contents(document.body(), root)
        return root

    def strip_unsafe_content(self, document: DOMDocument) -> int:
        """Remove denylisted elements and neutralize event handler attributes.

        Parameters
        ----------
        document : DOMDocument
            Parsed document, modified in place

        Returns
        -------
        int
            Number of elements removed

        """
        removed = 0
        if self.options.strip_elements:
            for element in document.select(", ".join(self.options.strip_elements)):
                element.remove()
                removed += 1

        if self.options.strip_event_handlers:
            for element in document.select("*"):
                for name in element.attribute_names():
                    if name.lower().startswith("on"):
                        element.set_attr(name, "")

        return removed

    def _process_contents(self, element: DOMElement, parent: TreeNode) -> None:
        """Convert the contents of ``element`` and append them to ``parent``."""
        for item in element.contents():
            if isinstance(item, str):
                if item:
                    parent.append_child(TreeNode(NodeKind.TEXT, item))
            else:
                self._process_element(item, parent)

    def _process_element(self, element: DOMElement, parent: TreeNode) -> None:
        """Convert one element and append the result to ``parent``."""
        name = element.tag_name

        simple_kind = self.SIMPLE_ELEMENTS.get(name)
        if simple_kind is not None:
            node = TreeNode(simple_kind)
            self._process_contents(element, node)
            parent.append_child(node)
            return

        handler_name = self._ELEMENT_HANDLERS.get(name)
        if handler_name is None:
            self._process_contents(element, parent)
            return

        result: Optional[TreeNode] = getattr(self, handler_name)(element, parent)
        if result is not None:
            parent.append_child(result)

    def _process_div(self, element: DOMElement, parent: TreeNode) -> Optional[TreeNode]:
        classes = element.get_attr("class").split()
        # Wrappers written by HtmlRenderer around code blocks and quotes
        if "blockcode" in classes:
            return self._code_block(element.text())
        if "quote" in classes:
            self._process_contents(element, parent)
            return None
        node = TreeNode(NodeKind.PARAGRAPH)
        self._process_contents(element, node)
        return node

    def _process_link(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.LINK)
        href = element.get_attr("href")
        if href:
            node.set_attribute("href", href)
        self._process_contents(element, node)
        return node

    def _process_image(self, element: DOMElement, parent: TreeNode) -> Optional[TreeNode]:
        if not self.options.allow_img_code:
            return None
        node = TreeNode(NodeKind.IMAGE)
        for name in ("src", "width", "height", "alt"):
            node.set_attribute(name, element.get_attr(name) or None)
        return node

    def _process_pre(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = self._code_block(element.text())
        language = self._extract_language(element)
        if language is None:
            for child in element.children():
                if child.tag_name == "code":
                    language = self._extract_language(child)
                    break
        node.set_attribute("language", language)
        return node

    def _process_code(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        ancestor = element.parent()
        while ancestor is not None:
            if ancestor.tag_name == "pre":
                return self._code_block(element.text())
            ancestor = ancestor.parent()
        node = TreeNode(NodeKind.CODE_INLINE)
        node.append_child(TreeNode(NodeKind.TEXT, element.text()))
        return node

    def _process_blockquote(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.QUOTE)
        for item in element.contents():
            if isinstance(item, str):
                if item:
                    node.append_child(TreeNode(NodeKind.TEXT, item))
            elif item.tag_name == "cite" and not node.has_attribute("author"):
                node.set_attribute("author", item.text().strip() or None)
            else:
                self._process_element(item, node)
        return node

    def _process_list(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.LIST)
        style = element.get_attr("type")
        if not style and element.tag_name == "ol":
            style = "1"
        node.set_attribute("style", style or None)
        self._process_contents(element, node)
        return node

    def _process_table(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.TABLE)
        node.set_attribute("width", element.get_attr("width") or None)
        node.set_attribute("bgcolor", self._extract_background(element))
        self._process_contents(element, node)
        return node

    def _process_table_row(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.TABLE_ROW)
        node.set_attribute("bgcolor", self._extract_background(element))
        self._process_contents(element, node)
        return node

    def _process_table_cell(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        node = TreeNode(NodeKind.TABLE_CELL)
        node.set_attribute("width", element.get_attr("width") or None)
        self._process_contents(element, node)
        return node

    def _process_line_break(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        return TreeNode(NodeKind.LINE_BREAK)

    def _process_horizontal_rule(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        return TreeNode(NodeKind.HORIZONTAL_RULE)

    def _process_font(self, element: DOMElement, parent: TreeNode) -> TreeNode:
        """Map ``<font>`` by the first attribute present among color, size and face."""
        for name, kind, attribute in (
            ("color", NodeKind.COLOR, "color"),
            ("size", NodeKind.SIZE, "size"),
            ("face", NodeKind.FONT, "face"),
        ):
            if element.has_attr(name):
                node = TreeNode(kind)
                node.set_attribute(attribute, element.get_attr(name))
                break
        else:
            node = TreeNode(NodeKind.PARAGRAPH)
        self._process_contents(element, node)
        return node

    @staticmethod
    def _code_block(text: str) -> TreeNode:
        node = TreeNode(NodeKind.CODE_BLOCK)
        node.append_child(TreeNode(NodeKind.TEXT, text))
        return node

    @staticmethod
    def _extract_background(element: DOMElement) -> Optional[str]:
        """Read a background color from the bgcolor attribute or the inline style."""
        bgcolor = element.get_attr("bgcolor").strip()
        if bgcolor:
            return bgcolor
        match = _BACKGROUND_COLOR_PATTERN.search(element.get_attr("style"))
        if match:
            return match.group(1).strip() or None
        return None

    @staticmethod
    def _extract_language(element: DOMElement) -> Optional[str]:
        """Read a code language from ``language-*`` / ``lang-*`` classes."""
        for css_class in element.get_attr("class").split():
            match = _LANGUAGE_CLASS_PATTERN.match(css_class)
            if match:
                return match.group(1)
        return None


__all__ = ["HtmlParser"]
