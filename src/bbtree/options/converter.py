#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbtree/options/converter.py
"""Top-level toggles consumed by the conversion entry points."""

from __future__ import annotations

from dataclasses import dataclass, field

from bbtree.constants import (
    DEFAULT_ALLOW_BBCODE,
    DEFAULT_ALLOW_HTML,
    DEFAULT_ALLOW_IMG_CODE,
    DEFAULT_ESCAPE_HTML,
    DEFAULT_OPTIMIZE,
)
from bbtree.options.base import CloneFrozenMixin
from bbtree.options.bbcode import BBCodeParserOptions
from bbtree.options.html import HtmlParserOptions, HtmlRendererOptions


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    """Switches shared by every conversion of a :class:`~bbtree.api.BBCodeConverter`.

    The defaults are the permissive but safe combination: BBCode is
    interpreted, HTML inside BBCode is not, images are expanded, HTML output
    is escaped and the tree is normalized before rendering.

    Parameters
    ----------
    allow_bbcode : bool, default True
        Interpret bracket tags in BBCode input
    allow_html : bool, default False
        Keep HTML tags written inside BBCode input as raw markup
    allow_img_code : bool, default True
        Expand ``[img]`` tags and ``<img>`` elements into images
    escape_html : bool, default True
        HTML-escape text content in HTML output
    optimize : bool, default True
        Run the normalization passes before rendering

    Examples
    --------
        >>> options = ConverterOptions().create_updated(escape_html=False)

    """

    allow_bbcode: bool = field(
        default=DEFAULT_ALLOW_BBCODE,
        metadata={"help": "Interpret bracket tags in BBCode input", "importance": "core"},
    )
    allow_html: bool = field(
        default=DEFAULT_ALLOW_HTML,
        metadata={"help": "Keep HTML tags inside BBCode input as raw markup", "importance": "security"},
    )
    allow_img_code: bool = field(
        default=DEFAULT_ALLOW_IMG_CODE,
        metadata={"help": "Expand image tags", "importance": "core"},
    )
    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={"help": "HTML-escape text content in HTML output", "importance": "security"},
    )
    optimize: bool = field(
        default=DEFAULT_OPTIMIZE,
        metadata={"help": "Normalize the tree before rendering", "importance": "core"},
    )

    def bbcode_parser_options(self) -> BBCodeParserOptions:
        """Derive the BBCode parser options implied by these toggles."""
        return BBCodeParserOptions(
            parse_tags=self.allow_bbcode,
            allow_img_code=self.allow_img_code,
            allow_html=self.allow_html,
        )

    def html_parser_options(self, base: HtmlParserOptions | None = None) -> HtmlParserOptions:
        """Derive HTML parser options, keeping the sanitization settings of ``base``."""
        return (base or HtmlParserOptions()).create_updated(allow_img_code=self.allow_img_code)

    def html_renderer_options(self, base: HtmlRendererOptions | None = None) -> HtmlRendererOptions:
        """Derive HTML renderer options, keeping the other settings of ``base``."""
        return (base or HtmlRendererOptions()).create_updated(escape_html=self.escape_html)
