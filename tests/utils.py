"""Test utilities for the bbtree test suite.

This module provides an in-memory implementation of the document-tree
abstraction, so the HTML parser can be tested without a real HTML library,
plus small helpers for building and inspecting trees.
"""

from __future__ import annotations

import html
from typing import Optional, Union

from bbtree.ast.nodes import NodeKind, TreeNode
from bbtree.ast.serialization import tree_to_dict
from bbtree.dom.base import DOMAdapter, DOMDocument, DOMElement


class FakeElement(DOMElement):
    """Element of a hand-built document.

    Contents are FakeElement instances and plain strings. ``select`` supports
    comma-separated tag names and ``*``.
    """

    def __init__(self, tag: str, attrs: Optional[dict[str, str]] = None, contents: Optional[list] = None):
        self._tag = tag.lower()
        self._attrs = dict(attrs or {})
        self._contents: list[Union[FakeElement, str]] = []
        self._parent: Optional[FakeElement] = None
        for item in contents or []:
            self.append(item)

    def append(self, item: Union[FakeElement, str]) -> None:
        if isinstance(item, FakeElement):
            item._parent = self
        self._contents.append(item)

    @property
    def tag_name(self) -> str:
        return self._tag

    def get_attr(self, name: str) -> str:
        return self._attrs.get(name, "")

    def set_attr(self, name: str, value: str) -> None:
        self._attrs[name] = value

    def has_attr(self, name: str) -> bool:
        return name in self._attrs

    def attribute_names(self) -> set[str]:
        return set(self._attrs)

    def inner_html(self) -> str:
        return "".join(html.escape(item) if isinstance(item, str) else item.outer_html() for item in self._contents)

    def set_inner_html(self, markup: str) -> None:
        self._contents = [markup]

    def text(self) -> str:
        return "".join(item if isinstance(item, str) else item.text() for item in self._contents)

    def set_text(self, text: str) -> None:
        self._contents = [text]

    def children(self) -> list[DOMElement]:
        return [item for item in self._contents if isinstance(item, FakeElement)]

    def contents(self) -> list[Union[DOMElement, str]]:
        return list(self._contents)

    def select(self, pattern: str) -> list[DOMElement]:
        names = {name.strip().lower() for name in pattern.split(",")}
        matches: list[DOMElement] = []
        for child in self.children():
            if "*" in names or child.tag_name in names:
                matches.append(child)
            matches.extend(child.select(pattern))
        return matches

    def parent(self) -> Optional[DOMElement]:
        return self._parent

    def replace_with(self, markup: str) -> None:
        if self._parent is not None:
            siblings = self._parent._contents
            index = next(i for i, item in enumerate(siblings) if item is self)
            siblings[index] = markup
            self._parent = None

    def remove(self) -> None:
        if self._parent is not None:
            siblings = self._parent._contents
            index = next(i for i, item in enumerate(siblings) if item is self)
            del siblings[index]
            self._parent = None

    def outer_html(self) -> str:
        attrs = "".join(f' {name}="{html.escape(value)}"' for name, value in self._attrs.items())
        return f"<{self._tag}{attrs}>{self.inner_html()}</{self._tag}>"


class FakeDocument(DOMDocument):
    """Document whose body is a prebuilt FakeElement."""

    def __init__(self, body: FakeElement):
        self._body = body

    def select(self, pattern: str) -> list[DOMElement]:
        return self._body.select(pattern)

    def html(self) -> str:
        return self._body.inner_html()

    def text(self) -> str:
        return self._body.text()

    def body(self) -> DOMElement:
        return self._body


class FakeDOMAdapter(DOMAdapter):
    """Adapter returning a prebuilt body for any markup.

    Without a prebuilt body the markup is returned as a single text string.
    Every parsed string is recorded in ``parsed``.
    """

    def __init__(self, body: Optional[FakeElement] = None):
        self.body = body
        self.parsed: list[str] = []

    def parse_html(self, markup: str) -> DOMDocument:
        self.parsed.append(markup)
        if self.body is not None:
            return FakeDocument(self.body)
        return FakeDocument(FakeElement("body", contents=[markup]))

    def create_document(self) -> DOMDocument:
        return FakeDocument(FakeElement("body"))


def el(tag: str, *contents: Union[FakeElement, str], **attrs: str) -> FakeElement:
    """Build a FakeElement; ``class_`` is accepted for the class attribute."""
    attributes = {name.rstrip("_"): value for name, value in attrs.items()}
    return FakeElement(tag, attributes, list(contents))


def body(*contents: Union[FakeElement, str]) -> FakeElement:
    """Build a ``<body>`` FakeElement."""
    return FakeElement("body", contents=list(contents))


def node(kind: NodeKind, *children: TreeNode, content: str = "", **attributes: str) -> TreeNode:
    """Build a TreeNode with children in one expression."""
    result = TreeNode(kind, content, attributes)
    for child in children:
        result.append_child(child)
    return result


def text(content: str) -> TreeNode:
    """Build a TEXT node."""
    return TreeNode(NodeKind.TEXT, content)


def document(*children: TreeNode) -> TreeNode:
    """Build a DOCUMENT node."""
    return node(NodeKind.DOCUMENT, *children)


def kinds(tree: TreeNode) -> list[str]:
    """Return the kind values of ``tree``'s children."""
    return [child.kind.value for child in tree.children]


def assert_same_tree(left: TreeNode, right: TreeNode) -> None:
    """Assert two trees have identical kinds, content, attributes and shape."""
    assert tree_to_dict(left) == tree_to_dict(right)


def assert_canonical(tree: TreeNode) -> None:
    """Assert the optimizer invariants: no adjacent text and no empty containers."""
    from bbtree.ast.nodes import EMPTY_LEAF_KINDS

    for current in tree.walk():
        previous_was_text = False
        for child in current.children:
            assert not (previous_was_text and child.is_text), f"adjacent text under {current!r}"
            previous_was_text = child.is_text
            if child.is_text:
                assert child.content.strip(), f"whitespace-only text under {current!r}"
            elif child.kind not in EMPTY_LEAF_KINDS:
                assert child.children, f"empty {child.kind.value} under {current!r}"
