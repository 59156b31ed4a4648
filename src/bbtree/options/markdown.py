#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbtree/options/markdown.py
"""Configuration options for Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbtree.constants import (
    DEFAULT_MARKDOWN_BULLET,
    DEFAULT_MARKDOWN_CODE_FENCE,
    DEFAULT_MARKDOWN_LINE_BREAK,
    DEFAULT_MARKDOWN_LIST_INDENT,
    LineBreakStyle,
)
from bbtree.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-Markdown rendering.

    Parameters
    ----------
    bullet : str, default "-"
        Marker for plain (unordered) list items
    line_break : {"spaces", "backslash"}, default "spaces"
        How hard line breaks are written
    code_fence : str, default "```"
        Fence used around code blocks
    list_indent : int, default 2
        Spaces of indentation per nesting level

    """

    bullet: str = field(
        default=DEFAULT_MARKDOWN_BULLET,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "*", "+"], "importance": "core"},
    )
    line_break: LineBreakStyle = field(
        default=DEFAULT_MARKDOWN_LINE_BREAK,
        metadata={"help": "Hard line break style", "choices": ["spaces", "backslash"], "importance": "advanced"},
    )
    code_fence: str = field(
        default=DEFAULT_MARKDOWN_CODE_FENCE,
        metadata={"help": "Code block fence", "importance": "advanced"},
    )
    list_indent: int = field(
        default=DEFAULT_MARKDOWN_LIST_INDENT,
        metadata={"help": "Indentation per list nesting level", "type": int, "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.bullet not in ("-", "*", "+"):
            raise ValueError(f"bullet must be one of '-', '*', '+', got {self.bullet!r}")
        if self.line_break not in ("spaces", "backslash"):
            raise ValueError(f"line_break must be 'spaces' or 'backslash', got {self.line_break!r}")
        if self.list_indent < 1:
            raise ValueError(f"list_indent must be positive, got {self.list_indent}")
