#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbtree/options/bbcode.py
"""Configuration options for BBCode parsing and rendering.

This module defines options classes for the bracket-tag syntax used by
bulletin boards and forums.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bbtree.constants import (
    DEFAULT_ALLOW_BBCODE,
    DEFAULT_ALLOW_HTML,
    DEFAULT_ALLOW_IMG_CODE,
    DEFAULT_BBCODE_NORMALIZE_NEWLINES,
)
from bbtree.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class BBCodeParserOptions(BaseParserOptions):
    """Configuration options for BBCode-to-tree parsing.

    Parameters
    ----------
    parse_tags : bool, default True
        Whether bracket tags are interpreted at all. When False the whole
        input becomes a single text node.
    allow_img_code : bool, default True
        Whether ``[img]`` tags become image nodes. When False they are kept
        as literal text.
    allow_html : bool, default False
        Whether HTML tags written inside the BBCode text (e.g. ``<span>``) are
        kept as raw markup nodes. When False they stay ordinary text and are
        escaped by the HTML renderer.
    normalize_newlines : bool, default True
        Convert CRLF and CR line endings to LF before parsing.

    Examples
    --------
        >>> from bbtree.parsers.bbcode import BBCodeParser
        >>> parser = BBCodeParser(BBCodeParserOptions(allow_img_code=False))
        >>> tree = parser.parse("[img]http://x.test/a.png[/img]")

    """

    parse_tags: bool = field(
        default=DEFAULT_ALLOW_BBCODE,
        metadata={"help": "Interpret bracket tags (False treats input as plain text)", "importance": "core"},
    )
    allow_img_code: bool = field(
        default=DEFAULT_ALLOW_IMG_CODE,
        metadata={"help": "Expand [img] tags into images", "importance": "core"},
    )
    allow_html: bool = field(
        default=DEFAULT_ALLOW_HTML,
        metadata={"help": "Keep literal HTML tags in BBCode text as raw markup", "importance": "security"},
    )
    normalize_newlines: bool = field(
        default=DEFAULT_BBCODE_NORMALIZE_NEWLINES,
        metadata={"help": "Normalize CRLF/CR line endings to LF", "importance": "advanced"},
    )


@dataclass(frozen=True)
class BBCodeRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-BBCode rendering.

    Parameters
    ----------
    close_list_items : bool, default True
        Emit ``[/*]`` after each list item. Without the explicit close, list
        items written back to BBCode nest into each other when re-parsed.

    """

    close_list_items: bool = field(
        default=True,
        metadata={"help": "Write [/*] after every list item", "importance": "advanced"},
    )
