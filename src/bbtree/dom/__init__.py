#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document-tree abstraction and its BeautifulSoup implementation."""

from bbtree.dom.base import DOMAdapter, DOMDocument, DOMElement
from bbtree.dom.soup import SoupDOMAdapter, SoupDOMDocument, SoupDOMElement

__all__ = [
    "DOMAdapter",
    "DOMDocument",
    "DOMElement",
    "SoupDOMAdapter",
    "SoupDOMDocument",
    "SoupDOMElement",
]
