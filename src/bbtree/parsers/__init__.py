#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning BBCode and HTML source into raw bbtree trees."""

from bbtree.parsers.base import BaseParser
from bbtree.parsers.bbcode import BBCodeParser
from bbtree.parsers.html import HtmlParser
from bbtree.parsers.tokenizer import BBCodeToken, tokenize

__all__ = ["BaseParser", "BBCodeParser", "BBCodeToken", "HtmlParser", "tokenize"]
