#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled.

    Single quotes become ``&#039;``, the entity forum software emits.

    Examples
    --------
    >>> escape_html("<a href='x'>")
    '&lt;a href=&#039;x&#039;&gt;'

    """
    if not enabled:
        return text
    return _html_escape(text).replace("&#x27;", "&#039;")


__all__ = ["escape_html"]
