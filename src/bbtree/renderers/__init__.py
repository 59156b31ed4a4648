#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning canonical bbtree trees into BBCode, HTML and Markdown."""

from bbtree.renderers.base import BaseRenderer, InlineContentMixin, ListContextMixin, format_list_marker
from bbtree.renderers.bbcode import BBCodeRenderer
from bbtree.renderers.html import HtmlRenderer
from bbtree.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "BBCodeRenderer",
    "HtmlRenderer",
    "InlineContentMixin",
    "ListContextMixin",
    "MarkdownRenderer",
    "format_list_marker",
]
