#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for bbtree parsers, renderers and converters.

All options are frozen dataclasses; use ``create_updated(**changes)`` to derive
a modified copy.
"""

from bbtree.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from bbtree.options.bbcode import BBCodeParserOptions, BBCodeRendererOptions
from bbtree.options.converter import ConverterOptions
from bbtree.options.html import HtmlParserOptions, HtmlRendererOptions
from bbtree.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "BBCodeParserOptions",
    "BBCodeRendererOptions",
    "CloneFrozenMixin",
    "ConverterOptions",
    "HtmlParserOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
]
