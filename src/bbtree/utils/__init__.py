#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/utils/__init__.py
"""Utility modules for the bbtree package."""

from bbtree.utils.decorators import debug_timer
from bbtree.utils.html_utils import escape_html
from bbtree.utils.security import is_relative_url, is_url_safe, is_url_scheme_dangerous, sanitize_url

__all__ = [
    "debug_timer",
    "escape_html",
    "is_relative_url",
    "is_url_safe",
    "is_url_scheme_dangerous",
    "sanitize_url",
]
