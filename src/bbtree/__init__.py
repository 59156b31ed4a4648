"""bbtree - BBCode and HTML conversion through a shared document tree.

bbtree converts forum markup between BBCode and HTML, and from BBCode to
Markdown. Every conversion runs the same pipeline:

    source text -> parser -> raw tree -> optimizer -> canonical tree -> renderer

so a new output format only needs a new renderer, and a new input format only
needs a parser that builds the tree.

Key Features
------------
- Tolerant bracket-tag parser: unknown or unmatched tags stay literal text
- HTML ingestion through a pluggable document-tree abstraction, with a
  BeautifulSoup implementation and configurable sanitization
- Tree normalization (text merging, empty-node pruning, link/image backfill)
- BBCode, forum-style HTML and Markdown renderers

Requirements
------------
- Python 3.10+
- beautifulsoup4 for HTML input

Examples
--------
Basic usage:

    >>> from bbtree import bbcode_to_html, html_to_bbcode
    >>> bbcode_to_html("[b]Hello[/b], [i]world[/i]")
    '<b>Hello</b>, <i>world</i>'
    >>> html_to_bbcode("<strong>Hello</strong>")
    '[b]Hello[/b]'

Working with the tree directly:

    >>> from bbtree import parse_to_ast, render_from_ast
    >>> tree = parse_to_ast("[quote=alice]hi[/quote]", "bbcode")
    >>> render_from_ast(tree, "markdown")
    '> **alice** wrote:\\n>\\n> hi'

See Also
--------
bbtree.ast : tree model, tag table and optimizer

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "bbtree requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from bbtree.api import (  # noqa: E402
    BBCodeConverter,
    bbcode_to_html,
    bbcode_to_markdown,
    convert,
    html_to_bbcode,
    parse_to_ast,
    render_from_ast,
)
from bbtree.ast import NodeKind, TreeNode  # noqa: E402
from bbtree.dom import DOMAdapter, SoupDOMAdapter  # noqa: E402
from bbtree.exceptions import (  # noqa: E402
    BBTreeError,
    FormatError,
    InvalidOptionsError,
    RenderingError,
    ValidationError,
)
from bbtree.options import (  # noqa: E402
    BBCodeParserOptions,
    BBCodeRendererOptions,
    ConverterOptions,
    HtmlParserOptions,
    HtmlRendererOptions,
    MarkdownRendererOptions,
)

__all__ = [
    "__version__",
    "BBCodeConverter",
    "bbcode_to_html",
    "bbcode_to_markdown",
    "convert",
    "html_to_bbcode",
    "parse_to_ast",
    "render_from_ast",
    "NodeKind",
    "TreeNode",
    "DOMAdapter",
    "SoupDOMAdapter",
    "BBTreeError",
    "FormatError",
    "InvalidOptionsError",
    "RenderingError",
    "ValidationError",
    "BBCodeParserOptions",
    "BBCodeRendererOptions",
    "ConverterOptions",
    "HtmlParserOptions",
    "HtmlRendererOptions",
    "MarkdownRendererOptions",
]
