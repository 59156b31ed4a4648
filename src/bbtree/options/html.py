#  Copyright (c) 2025 Tom Villani, Ph.D.

# bbtree/options/html.py
"""Configuration options for HTML parsing and rendering.

The parser options hold the sanitization denylist applied before an HTML
document is walked; the renderer options control escaping and link output.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bbtree.constants import (
    DEFAULT_ALLOW_IMG_CODE,
    DEFAULT_ESCAPE_HTML,
    DEFAULT_HTML_BACKEND,
    DEFAULT_HTML_LINK_TARGET,
    DEFAULT_SANITIZE_URLS,
    DEFAULT_STRIP_ELEMENTS,
    DEFAULT_STRIP_EVENT_HANDLERS,
    HtmlBackend,
)
from bbtree.options.base import BaseParserOptions, BaseRendererOptions


@dataclass(frozen=True)
class HtmlParserOptions(BaseParserOptions):
    """Configuration options for HTML-to-tree parsing.

    Parameters
    ----------
    strip_elements : tuple of str
        Element names removed, with their content, before conversion
    strip_event_handlers : bool, default True
        Blank out ``on*`` attributes (``onclick``, ``onload``...)
    allow_img_code : bool, default True
        Convert ``<img>`` elements into image nodes
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup backend used by :class:`~bbtree.dom.soup.SoupDOMAdapter`

    """

    strip_elements: tuple[str, ...] = field(
        default=DEFAULT_STRIP_ELEMENTS,
        metadata={"help": "Elements removed before conversion", "importance": "security"},
    )
    strip_event_handlers: bool = field(
        default=DEFAULT_STRIP_EVENT_HANDLERS,
        metadata={"help": "Blank out on* event handler attributes", "importance": "security"},
    )
    allow_img_code: bool = field(
        default=DEFAULT_ALLOW_IMG_CODE,
        metadata={"help": "Convert <img> elements into images", "importance": "core"},
    )
    html_parser: HtmlBackend = field(
        default=DEFAULT_HTML_BACKEND,
        metadata={
            "help": "BeautifulSoup parser backend",
            "choices": ["html.parser", "lxml", "html5lib"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Normalize the denylist to lower-case names."""
        object.__setattr__(self, "strip_elements", tuple(name.lower() for name in self.strip_elements))


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for tree-to-HTML rendering.

    Parameters
    ----------
    escape_html : bool, default True
        HTML-escape text content. Line endings become ``<br />`` and double
        spaces become ``&nbsp;&nbsp;`` either way.
    sanitize_urls : bool, default True
        Empty out link and image URLs that use dangerous schemes such as
        ``javascript:``
    link_target : str or None, default "_blank"
        ``target`` attribute written on links; None omits it

    """

    escape_html: bool = field(
        default=DEFAULT_ESCAPE_HTML,
        metadata={"help": "HTML-escape text content", "importance": "security"},
    )
    sanitize_urls: bool = field(
        default=DEFAULT_SANITIZE_URLS,
        metadata={"help": "Drop URLs with dangerous schemes", "importance": "security"},
    )
    link_target: str | None = field(
        default=DEFAULT_HTML_LINK_TARGET,
        metadata={"help": "target attribute for links", "importance": "advanced"},
    )
