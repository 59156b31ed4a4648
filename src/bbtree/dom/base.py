#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/dom/base.py
"""Document-tree abstraction consumed by the HTML parser.

The HTML ingestion path never touches a concrete HTML library. It reads and
sanitizes documents through the three interfaces below, so the library behind
them (BeautifulSoup by default, an in-memory fake in tests) can be swapped
without changing the parser.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union


class DOMElement(ABC):
    """A single element of a parsed HTML document."""

    @property
    @abstractmethod
    def tag_name(self) -> str:
        """Lower-case element name."""

    @abstractmethod
    def get_attr(self, name: str) -> str:
        """Return the attribute value, or an empty string when it is absent."""

    @abstractmethod
    def set_attr(self, name: str, value: str) -> None:
        """Set an attribute value."""

    @abstractmethod
    def has_attr(self, name: str) -> bool:
        """Return True if the attribute is present, even with an empty value."""

    @abstractmethod
    def attribute_names(self) -> set[str]:
        """Return the names of all attributes on the element."""

    @abstractmethod
    def inner_html(self) -> str:
        """Return the markup of the element's contents."""

    @abstractmethod
    def set_inner_html(self, html: str) -> None:
        """Replace the element's contents with parsed markup."""

    @abstractmethod
    def text(self) -> str:
        """Return the concatenated text of the element and its descendants."""

    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the element's contents with a single text string."""

    @abstractmethod
    def children(self) -> list[DOMElement]:
        """Return the child elements, skipping text."""

    @abstractmethod
    def contents(self) -> list[Union[DOMElement, str]]:
        """Return child elements and text strings in document order.

        Comments and other non-text markup are omitted.
        """

    @abstractmethod
    def select(self, pattern: str) -> list[DOMElement]:
        """Return descendants matching a CSS selector."""

    @abstractmethod
    def parent(self) -> Optional[DOMElement]:
        """Return the parent element, or None at the top of the document."""

    @abstractmethod
    def replace_with(self, html: str) -> None:
        """Replace the element with parsed markup."""

    @abstractmethod
    def remove(self) -> None:
        """Remove the element and its contents from the document."""

    @abstractmethod
    def outer_html(self) -> str:
        """Return the markup of the element itself."""


class DOMDocument(ABC):
    """A parsed HTML document."""

    @abstractmethod
    def select(self, pattern: str) -> list[DOMElement]:
        """Return elements matching a CSS selector."""

    @abstractmethod
    def html(self) -> str:
        """Serialize the document."""

    @abstractmethod
    def text(self) -> str:
        """Return the document's text content."""

    @abstractmethod
    def body(self) -> DOMElement:
        """Return the element holding the document content.

        For fragments without a ``<body>`` this is the document root.
        """


class DOMAdapter(ABC):
    """Factory for :class:`DOMDocument` instances."""

    @abstractmethod
    def parse_html(self, html: str) -> DOMDocument:
        """Parse markup into a document."""

    @abstractmethod
    def create_document(self) -> DOMDocument:
        """Create an empty document."""


__all__ = ["DOMAdapter", "DOMDocument", "DOMElement"]
