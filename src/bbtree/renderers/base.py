#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class that all renderers must inherit
from, along with mixins shared by the text renderers. A renderer reads a
canonical tree and produces one output syntax; it never modifies the tree.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from bbtree.ast.nodes import TreeNode
from bbtree.exceptions import BBTreeError, InvalidOptionsError, RenderingError
from bbtree.options.base import BaseRendererOptions

logger = logging.getLogger(__name__)


class BaseRenderer(ABC):
    """Abstract base class for all tree renderers.

    Subclasses implement :meth:`_render`; :meth:`render_to_string` wraps it so
    that unexpected failures surface as :class:`~bbtree.exceptions.RenderingError`.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class TextOnlyRenderer(BaseRenderer):
        ...     format_name = "text"
        ...     def _render(self, tree):
        ...         return "".join(node.content for node in tree.walk() if node.is_text)

    """

    format_name: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    def render_to_string(self, tree: Optional[TreeNode]) -> str:
        """Render a tree to text.

        Parameters
        ----------
        tree : TreeNode or None
            Root of the tree to render, normally a DOCUMENT node

        Returns
        -------
        str
            Rendered output; empty for None

        Raises
        ------
        RenderingError
            If rendering fails unexpectedly

        """
        if tree is None:
            return ""
        try:
            return self._render(tree)
        except BBTreeError:
            raise
        except Exception as e:
            raise RenderingError(
                f"Failed to render {self.format_name or type(self).__name__}: {e!r}",
                rendering_stage="rendering",
                original_error=e,
            ) from e

    @abstractmethod
    def _render(self, tree: TreeNode) -> str:
        """Produce the output for ``tree``; called with fresh traversal state."""
        raise NotImplementedError


class InlineContentMixin:
    """Mixin providing child rendering for text-based renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    Examples
    --------
    Using the mixin in a renderer:

        >>> class StarRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
        ...     def visit_bold(self, node):
        ...         self._output.append(f"*{self._render_children(node)}*")

    """

    _output: list[str]

    def _render_children(self, node: TreeNode) -> str:
        """Render the children of ``node`` to a string without touching the output.

        Parameters
        ----------
        node : TreeNode
            Node whose children are rendered

        Returns
        -------
        str
            Rendered children

        """
        saved_output = self._output
        self._output = []

        for child in node.children:
            child.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result

    def _visit_children(self, node: TreeNode) -> None:
        """Render the children of ``node`` directly into the output."""
        for child in node.children:
            child.accept(self)

    @staticmethod
    def _plain_text(node: TreeNode) -> str:
        """Concatenate the text of every TEXT node below ``node``."""
        return "".join(descendant.content for descendant in node.walk() if descendant.is_text)


@dataclass
class ListContext:
    """Rendering state for one open list.

    Parameters
    ----------
    style : str
        The list's ``style`` attribute (``""``, ``"1"``, ``"a"``, ``"A"``...)
    index : int
        Number of items rendered so far

    """

    style: str
    index: int = 0


class ListContextMixin:
    """Track open lists so items can take their marker from the owning list.

    Items never carry the list style themselves. A renderer pushes a context in
    ``visit_list`` and asks for the next marker position in ``visit_list_item``;
    an item outside any list gets the plain style.
    """

    _list_stack: list[ListContext]

    def _enter_list(self, node: TreeNode) -> ListContext:
        context = ListContext(style=(node.get_attribute("style") or "").strip())
        self._list_stack.append(context)
        return context

    def _exit_list(self) -> None:
        self._list_stack.pop()

    @property
    def _list_depth(self) -> int:
        return len(self._list_stack)

    def _next_list_item(self) -> tuple[str, int]:
        """Advance the innermost list and return its style and the item's 1-based position."""
        if not self._list_stack:
            return "", 1
        context = self._list_stack[-1]
        context.index += 1
        return context.style, context.index


def format_list_marker(style: str, index: int) -> Optional[str]:
    """Return the ordinal label for a list item, or None for plain lists.

    Parameters
    ----------
    style : str
        List style value
    index : int
        1-based item position

    Returns
    -------
    str or None
        ``"3"``, ``"c"``, ``"C"``, ``"iii"``, ``"III"``, or None when the style
        is plain or unknown

    Examples
    --------
    >>> format_list_marker("a", 28)
    'ab'
    >>> format_list_marker("I", 4)
    'IV'

    """
    if style == "1":
        return str(index)
    if style in ("a", "A"):
        label = _alphabetic(index)
        return label.upper() if style == "A" else label
    if style in ("i", "I"):
        label = _roman(index)
        return label.upper() if style == "I" else label
    return None


def _alphabetic(index: int) -> str:
    letters = []
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters.append(chr(ord("a") + remainder))
    return "".join(reversed(letters))


_ROMAN_NUMERALS = (
    (1000, "m"),
    (900, "cm"),
    (500, "d"),
    (400, "cd"),
    (100, "c"),
    (90, "xc"),
    (50, "l"),
    (40, "xl"),
    (10, "x"),
    (9, "ix"),
    (5, "v"),
    (4, "iv"),
    (1, "i"),
)


def _roman(index: int) -> str:
    parts = []
    for value, numeral in _ROMAN_NUMERALS:
        count, index = divmod(index, value)
        parts.append(numeral * count)
    return "".join(parts)
