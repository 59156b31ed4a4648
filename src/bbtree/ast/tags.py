#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/ast/tags.py
"""BBCode tag table.

One table maps bracket-tag names to node kinds. The parser uses it to resolve
opening tags and to match closing tags; the BBCode renderer uses its inverse to
pick a tag name for each kind. Keeping a single table means open handling,
close handling and output can never disagree.

Close matching is by kind, not by name: ``[b]x[/strong]`` closes the bold
span because both names resolve to :attr:`NodeKind.BOLD`.

The ``[table=...]`` value packs two positional fields, width and background
color, separated by a comma. Only those two fields exist; a third
comma-separated field is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bbtree.ast.nodes import NodeKind

# Names listed first are the canonical spelling used for output
TAG_KINDS: dict[str, NodeKind] = {
    "*": NodeKind.LIST_ITEM,
    "b": NodeKind.BOLD,
    "strong": NodeKind.BOLD,
    "i": NodeKind.ITALIC,
    "em": NodeKind.ITALIC,
    "u": NodeKind.UNDERLINE,
    "s": NodeKind.STRIKETHROUGH,
    "strike": NodeKind.STRIKETHROUGH,
    "url": NodeKind.LINK,
    "img": NodeKind.IMAGE,
    "code": NodeKind.CODE_BLOCK,
    "icode": NodeKind.CODE_INLINE,
    "quote": NodeKind.QUOTE,
    "list": NodeKind.LIST,
    "table": NodeKind.TABLE,
    "tr": NodeKind.TABLE_ROW,
    "td": NodeKind.TABLE_CELL,
    "th": NodeKind.TABLE_CELL,
    "color": NodeKind.COLOR,
    "size": NodeKind.SIZE,
    "font": NodeKind.FONT,
    "hr": NodeKind.HORIZONTAL_RULE,
}

# Attribute receiving the ``=value`` part of an opening tag
VALUE_ATTRIBUTES: dict[NodeKind, str] = {
    NodeKind.LINK: "href",
    NodeKind.IMAGE: "src",
    NodeKind.CODE_BLOCK: "language",
    NodeKind.QUOTE: "author",
    NodeKind.LIST: "style",
    NodeKind.TABLE_ROW: "bgcolor",
    NodeKind.TABLE_CELL: "width",
    NodeKind.COLOR: "color",
    NodeKind.SIZE: "size",
    NodeKind.FONT: "face",
}

SELF_CLOSING_KINDS = frozenset({NodeKind.HORIZONTAL_RULE})

_CANONICAL_TAGS: dict[NodeKind, str] = {}
for _name, _kind in TAG_KINDS.items():
    _CANONICAL_TAGS.setdefault(_kind, _name)


def resolve_tag(name: str) -> Optional[NodeKind]:
    """Return the node kind for a tag name, or None for unknown tags."""
    return TAG_KINDS.get(name.lower())


def closes(kind: NodeKind, name: str) -> bool:
    """Return True when a ``[/name]`` token closes an open node of ``kind``."""
    return resolve_tag(name) is kind


def canonical_tag(kind: NodeKind) -> Optional[str]:
    """Return the tag name used to write ``kind``, or None if BBCode has none."""
    return _CANONICAL_TAGS.get(kind)


def is_self_closing(kind: NodeKind) -> bool:
    """Return True for kinds that never take children or a closing tag."""
    return kind in SELF_CLOSING_KINDS


def value_attribute(kind: NodeKind) -> Optional[str]:
    """Return the attribute that stores the tag value for ``kind``."""
    return VALUE_ATTRIBUTES.get(kind)


@dataclass(frozen=True)
class TableSpec:
    """Decoded ``[table=width,background]`` value.

    Parameters
    ----------
    width : str or None
        First field, e.g. ``"80%"``
    background : str or None
        Second field, e.g. ``"#eee"``

    """

    width: Optional[str] = None
    background: Optional[str] = None


def parse_table_spec(value: Optional[str]) -> TableSpec:
    """Split a table value into width and background.

    Fields are trimmed and empty fields are treated as absent. Anything after
    the second comma is ignored.

    Examples
    --------
    >>> parse_table_spec("80%,#eee")
    TableSpec(width='80%', background='#eee')
    >>> parse_table_spec(",red")
    TableSpec(width=None, background='red')

    """
    if not value:
        return TableSpec()
    parts = [part.strip() for part in value.split(",")]
    width = parts[0] or None
    background = (parts[1] or None) if len(parts) > 1 else None
    return TableSpec(width=width, background=background)


def format_table_spec(width: Optional[str], background: Optional[str]) -> Optional[str]:
    """Inverse of :func:`parse_table_spec`; returns None when both are absent."""
    if background:
        return f"{width or ''},{background}"
    if width:
        return width
    return None


__all__ = [
    "SELF_CLOSING_KINDS",
    "TAG_KINDS",
    "TableSpec",
    "VALUE_ATTRIBUTES",
    "canonical_tag",
    "closes",
    "format_table_spec",
    "is_self_closing",
    "parse_table_spec",
    "resolve_tag",
    "value_attribute",
]
