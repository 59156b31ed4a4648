#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for bbtree.

This module centralizes hardcoded values and default configuration constants
used across the bbtree library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Behavior - converter toggles
3. Security Constants - HTML ingestion and URL sanitization
4. Format-Specific Constants - settings for each supported syntax
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

SourceFormat = Literal["bbcode", "html"]
TargetFormat = Literal["bbcode", "html", "markdown"]
LineBreakStyle = Literal["spaces", "backslash"]
HtmlBackend = Literal["html.parser", "lxml", "html5lib"]

SOURCE_FORMATS: tuple[str, ...] = ("bbcode", "html")
TARGET_FORMATS: tuple[str, ...] = ("bbcode", "html", "markdown")

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_ALLOW_BBCODE = True
DEFAULT_ALLOW_HTML = False
DEFAULT_ALLOW_IMG_CODE = True
DEFAULT_ESCAPE_HTML = True
DEFAULT_OPTIMIZE = True

# =============================================================================
# Security Constants
# =============================================================================

# Elements removed before an HTML document is walked
DEFAULT_STRIP_ELEMENTS: tuple[str, ...] = ("script", "style", "noscript", "select", "object", "embed", "iframe")
DEFAULT_STRIP_EVENT_HANDLERS = True

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

DEFAULT_SANITIZE_URLS = True

# =============================================================================
# Format-Specific Constants - BBCode
# =============================================================================

DEFAULT_BBCODE_NORMALIZE_NEWLINES = True

# Literal HTML tags inside BBCode text, kept as raw nodes when HTML is allowed
BBCODE_INLINE_HTML_PATTERN = r"</?[a-zA-Z][a-zA-Z0-9]*(?:\s[^<>]*)?/?>"

# =============================================================================
# Format-Specific Constants - HTML
# =============================================================================

DEFAULT_HTML_BACKEND: HtmlBackend = "html.parser"
DEFAULT_HTML_LINK_TARGET = "_blank"

HTML_LIST_TYPE_CLASSES = {
    "1": "litype_1",
    "a": "litype_2",
    "A": "litype_3",
    "i": "litype_4",
    "I": "litype_5",
}

# =============================================================================
# Format-Specific Constants - Markdown
# =============================================================================

DEFAULT_MARKDOWN_BULLET = "-"
DEFAULT_MARKDOWN_LINE_BREAK: LineBreakStyle = "spaces"
DEFAULT_MARKDOWN_CODE_FENCE = "```"
DEFAULT_MARKDOWN_LIST_INDENT = 2
