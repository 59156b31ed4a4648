#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/parsers/bbcode.py
"""BBCode to tree converter.

This module turns BBCode (Bulletin Board Code) markup into a raw bbtree tree.
Parsing is a single left-to-right pass over the tag tokens with an explicit
stack of open nodes:

- text between tags is appended to the node on top of the stack, merging into
  a trailing text node when there is one
- an opening tag known to the tag table becomes a child of the top node and is
  pushed, unless it is self-closing
- a closing tag pops the stack through the nearest open node of the same kind,
  implicitly closing anything opened inside it
- anything that cannot be matched (unknown tags, stray closing tags) is kept
  as literal text

Nodes still open at end of input are closed implicitly, so the parser never
fails on malformed markup.
"""

from __future__ import annotations

import logging
import re
from typing import Union

from bbtree.ast.nodes import NodeKind, TreeNode
from bbtree.ast.tags import closes, is_self_closing, parse_table_spec, resolve_tag, value_attribute
from bbtree.constants import BBCODE_INLINE_HTML_PATTERN
from bbtree.options.bbcode import BBCodeParserOptions
from bbtree.parsers.base import BaseParser
from bbtree.parsers.tokenizer import BBCodeToken, tokenize

logger = logging.getLogger(__name__)


class BBCodeParser(BaseParser):
    """Convert BBCode markup to a raw tree.

    Supported tags are those of :data:`bbtree.ast.tags.TAG_KINDS`:

    - Formatting: [b], [i], [u], [s]
    - Links and images: [url], [url=...], [img]
    - Blocks: [code], [code=language], [icode], [quote], [quote=author]
    - Lists: [list], [list=1|a|A], [*]
    - Tables: [table=width,bgcolor], [tr=bgcolor], [td=width]
    - Styling: [color=...], [size=...], [font=...]
    - Rules: [hr]

    Parameters
    ----------
    options : BBCodeParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = BBCodeParser()
        >>> tree = parser.parse("[b]Bold[/b] and [i]italic[/i] text")
        >>> [child.kind.value for child in tree.children]
        ['bold', 'text', 'italic', 'text']

    """

    HTML_TAG_PATTERN = re.compile(BBCODE_INLINE_HTML_PATTERN)

    def __init__(self, options: BBCodeParserOptions | None = None):
        """Initialize the BBCode parser with options."""
        BaseParser._validate_options_type(options, BBCodeParserOptions, "bbcode")
        options = options or BBCodeParserOptions()
        super().__init__(options)
        self.options: BBCodeParserOptions = options

    def parse(self, input_data: Union[str, bytes, None]) -> TreeNode:
        """Parse BBCode input into a raw tree.

        Parameters
        ----------
        input_data : str, bytes or None
            BBCode source; bytes are decoded as UTF-8

        Returns
        -------
        TreeNode
            DOCUMENT node; empty for empty input

        """
        text = self._load_text(input_data)
        if self.options.normalize_newlines:
            text = text.replace("\r\n", "\n").replace("\r", "\n")

        root = TreeNode(NodeKind.DOCUMENT)
        if not text:
            return root

        if not self.options.parse_tags:
            self._append_text(root, text)
            return root

        stack: list[TreeNode] = [root]
        position = 0
        token_count = 0
        literal_count = 0

        for token in tokenize(text):
            token_count += 1
            if token.start > position:
                self._append_text(stack[-1], text[position : token.start])
            position = token.end

            if token.is_closing:
                handled = self._close_tag(stack, token)
            else:
                handled = self._open_tag(stack, token)

            if not handled:
                literal_count += 1
                self._append_literal(stack[-1], token.raw)

        if position < len(text):
            self._append_text(stack[-1], text[position:])

        logger.debug(
            "Parsed BBCode: %d tags, %d kept as text, %d left open", token_count, literal_count, len(stack) - 1
        )
        return root

    def _open_tag(self, stack: list[TreeNode], token: BBCodeToken) -> bool:
        """Create the node for an opening tag; return False if the tag is not recognized."""
        kind = resolve_tag(token.name)
        if kind is None:
            return False
        if kind is NodeKind.IMAGE and not self.options.allow_img_code:
            return False

        node = TreeNode(kind)
        if token.value is not None:
            if kind is NodeKind.TABLE:
                spec = parse_table_spec(token.value)
                node.set_attribute("width", spec.width)
                node.set_attribute("bgcolor", spec.background)
            else:
                attribute = value_attribute(kind)
                if attribute:
                    node.set_attribute(attribute, token.value)

        stack[-1].append_child(node)
        if not is_self_closing(kind):
            stack.append(node)
        return True

    @staticmethod
    def _close_tag(stack: list[TreeNode], token: BBCodeToken) -> bool:
        """Pop through the nearest open node the tag closes; return False if none does."""
        # Index 0 is the document root, which no tag can close
        for index in range(len(stack) - 1, 0, -1):
            if closes(stack[index].kind, token.name):
                del stack[index:]
                return True
        return False

    def _append_text(self, parent: TreeNode, text: str) -> None:
        """Append source text, splitting out literal HTML tags when they are allowed."""
        if not self.options.allow_html:
            self._append_literal(parent, text)
            return

        position = 0
        for match in self.HTML_TAG_PATTERN.finditer(text):
            if match.start() > position:
                self._append_literal(parent, text[position : match.start()])
            raw = TreeNode(NodeKind.HTML_RAW)
            raw.append_child(TreeNode(NodeKind.TEXT, match.group(0)))
            parent.append_child(raw)
            position = match.end()
        if position < len(text):
            self._append_literal(parent, text[position:])

    @staticmethod
    def _append_literal(parent: TreeNode, text: str) -> None:
        """Append text to ``parent``, extending its last child if that is already text."""
        last = parent.last_child
        if last is not None and last.is_text:
            last.content += text
        else:
            parent.append_child(TreeNode(NodeKind.TEXT, text))


__all__ = ["BBCodeParser"]
