#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/parsers/tokenizer.py
"""Bracket-tag tokenizer.

Finds ``[name]``, ``[name=value]`` and ``[/name]`` tags in BBCode text. Only
the tags are yielded; the text between them is recovered by the parser from
the token offsets. Bracket sequences that do not match the tag grammar
(``[ b]``, ``[b``, ``[]``) produce no token and therefore stay literal text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

TAG_PATTERN = re.compile(r"\[(/?)(\*|[a-z0-9]+)(?:=([^\]]+))?\]", re.IGNORECASE)


@dataclass(frozen=True)
class BBCodeToken:
    """A single bracket tag found in the source text.

    Parameters
    ----------
    start : int
        Offset of the opening ``[``
    end : int
        Offset just past the closing ``]``
    is_closing : bool
        True for ``[/name]`` tags
    name : str
        Lower-cased tag name
    value : str or None
        Text after ``=``, if any
    raw : str
        The exact source text of the tag

    """

    start: int
    end: int
    is_closing: bool
    name: str
    value: Optional[str]
    raw: str


def tokenize(text: str) -> Iterator[BBCodeToken]:
    """Yield the bracket tags of ``text`` from left to right.

    Parameters
    ----------
    text : str
        BBCode source

    Yields
    ------
    BBCodeToken
        One token per syntactically valid tag

    Examples
    --------
    >>> [t.name for t in tokenize("[B]x[/b] [url=http://a.test]a[/url]")]
    ['b', 'b', 'url', 'url']

    """
    for match in TAG_PATTERN.finditer(text):
        yield BBCodeToken(
            start=match.start(),
            end=match.end(),
            is_closing=bool(match.group(1)),
            name=match.group(2).lower(),
            value=match.group(3),
            raw=match.group(0),
        )


__all__ = ["BBCodeToken", "TAG_PATTERN", "tokenize"]
