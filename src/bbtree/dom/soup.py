#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/dom/soup.py
"""BeautifulSoup implementation of the document-tree abstraction."""

from __future__ import annotations

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from bbtree.constants import DEFAULT_HTML_BACKEND
from bbtree.dom.base import DOMAdapter, DOMDocument, DOMElement

logger = logging.getLogger(__name__)


class SoupDOMElement(DOMElement):
    """Wrap a BeautifulSoup :class:`~bs4.element.Tag`.

    Parameters
    ----------
    tag : Tag
        The wrapped element
    parser : str
        Backend used to parse markup passed to :meth:`set_inner_html` and
        :meth:`replace_with`

    """

    def __init__(self, tag: Tag, parser: str = DEFAULT_HTML_BACKEND):
        self._tag = tag
        self._parser = parser

    def _wrap(self, tag: Tag) -> SoupDOMElement:
        return SoupDOMElement(tag, self._parser)

    def _fragment(self, html: str) -> list:
        return list(BeautifulSoup(html, self._parser).contents)

    @property
    def tag_name(self) -> str:
        return (self._tag.name or "").lower()

    def get_attr(self, name: str) -> str:
        value = self._tag.get(name)
        if value is None:
            return ""
        # bs4 returns multi-valued attributes such as class as lists
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def set_attr(self, name: str, value: str) -> None:
        self._tag[name] = value

    def has_attr(self, name: str) -> bool:
        return self._tag.has_attr(name)

    def attribute_names(self) -> set[str]:
        return set(self._tag.attrs)

    def inner_html(self) -> str:
        return self._tag.decode_contents()

    def set_inner_html(self, html: str) -> None:
        self._tag.clear()
        for node in self._fragment(html):
            self._tag.append(node.extract())

    def text(self) -> str:
        return self._tag.get_text()

    def set_text(self, text: str) -> None:
        self._tag.string = text

    def children(self) -> list[DOMElement]:
        return [self._wrap(child) for child in self._tag.children if isinstance(child, Tag)]

    def contents(self) -> list[Union[DOMElement, str]]:
        items: list[Union[DOMElement, str]] = []
        for child in self._tag.children:
            if isinstance(child, Tag):
                items.append(self._wrap(child))
            elif isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                items.append(str(child))
        return items

    def select(self, pattern: str) -> list[DOMElement]:
        return [self._wrap(tag) for tag in self._tag.select(pattern)]

    def parent(self) -> Optional[DOMElement]:
        parent = self._tag.parent
        if parent is None or isinstance(parent, BeautifulSoup):
            return None
        return self._wrap(parent)

    def replace_with(self, html: str) -> None:
        nodes = self._fragment(html)
        if nodes:
            self._tag.replace_with(*nodes)
        else:
            self._tag.extract()

    def remove(self) -> None:
        self._tag.extract()

    def outer_html(self) -> str:
        return str(self._tag)

    def __repr__(self) -> str:
        return f"SoupDOMElement({self.tag_name!r})"


class SoupDOMDocument(DOMDocument):
    """Wrap a parsed :class:`~bs4.BeautifulSoup` document."""

    def __init__(self, soup: BeautifulSoup, parser: str = DEFAULT_HTML_BACKEND):
        self._soup = soup
        self._parser = parser

    def select(self, pattern: str) -> list[DOMElement]:
        return [SoupDOMElement(tag, self._parser) for tag in self._soup.select(pattern)]

    def html(self) -> str:
        return str(self._soup)

    def text(self) -> str:
        return self._soup.get_text()

    def body(self) -> DOMElement:
        # html.parser does not synthesize <body> for fragments
        body = self._soup.body
        return SoupDOMElement(body if body is not None else self._soup, self._parser)


class SoupDOMAdapter(DOMAdapter):
    """Parse HTML with BeautifulSoup.

    Parameters
    ----------
    parser : str, default "html.parser"
        BeautifulSoup tree builder. ``"lxml"`` and ``"html5lib"`` require
        their packages to be installed.

    Examples
    --------
        >>> document = SoupDOMAdapter().parse_html("<p>Hello <b>world</b></p>")
        >>> document.body().children()[0].tag_name
        'p'

    """

    def __init__(self, parser: str = DEFAULT_HTML_BACKEND):
        self.parser = parser

    def parse_html(self, html: str) -> DOMDocument:
        logger.debug("Parsing %d characters of HTML with %s", len(html), self.parser)
        return SoupDOMDocument(BeautifulSoup(html, self.parser), self.parser)

    def create_document(self) -> DOMDocument:
        return self.parse_html("")


__all__ = ["SoupDOMAdapter", "SoupDOMDocument", "SoupDOMElement"]
