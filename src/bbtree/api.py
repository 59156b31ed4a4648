"""The major exported API functions for BBCode and HTML conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/bbtree/api.py
import logging
from typing import Optional, Sequence, Union

from bbtree.ast.nodes import TreeNode
from bbtree.ast.optimizer import TreeOptimizer
from bbtree.constants import SOURCE_FORMATS, TARGET_FORMATS
from bbtree.dom.base import DOMAdapter
from bbtree.dom.soup import SoupDOMAdapter
from bbtree.exceptions import FormatError, InvalidOptionsError, ValidationError
from bbtree.options.bbcode import BBCodeRendererOptions
from bbtree.options.converter import ConverterOptions
from bbtree.options.html import HtmlParserOptions, HtmlRendererOptions
from bbtree.options.markdown import MarkdownRendererOptions
from bbtree.parsers.base import BaseParser
from bbtree.parsers.bbcode import BBCodeParser
from bbtree.parsers.html import HtmlParser
from bbtree.renderers.base import BaseRenderer
from bbtree.renderers.bbcode import BBCodeRenderer
from bbtree.renderers.html import HtmlRenderer
from bbtree.renderers.markdown import MarkdownRenderer
from bbtree.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def _normalize_format(format: str, supported_formats: Sequence[str]) -> str:
    """Return the lower-cased format name, or raise if it is not supported.

    Raises
    ------
    FormatError
        If ``format`` is not one of ``supported_formats``

    """
    if isinstance(format, str) and format.lower() in supported_formats:
        return format.lower()
    raise FormatError(format_type=format, supported_formats=list(supported_formats))


class BBCodeConverter:
    """Convert between BBCode, HTML and Markdown through the shared tree.

    Every call builds fresh parser and renderer instances, so one converter can
    be shared between threads.

    Parameters
    ----------
    dom_adapter : DOMAdapter
        Document-tree implementation used for HTML input
    options : ConverterOptions or None, default = None
        Conversion toggles
    html_parser_options : HtmlParserOptions or None, default = None
        Sanitization settings for HTML input. ``allow_img_code`` is taken from
        ``options``.
    html_renderer_options : HtmlRendererOptions or None, default = None
        Settings for HTML output. ``escape_html`` is taken from ``options``.
    bbcode_renderer_options : BBCodeRendererOptions or None, default = None
        Settings for BBCode output
    markdown_renderer_options : MarkdownRendererOptions or None, default = None
        Settings for Markdown output

    Raises
    ------
    ValidationError
        If ``dom_adapter`` is None
    InvalidOptionsError
        If ``options`` is not a ConverterOptions

    Examples
    --------
        >>> converter = BBCodeConverter(SoupDOMAdapter())
        >>> converter.bbcode_to_html("[b]Hello[/b]")
        '<b>Hello</b>'
        >>> converter.html_to_bbcode("<i>Hi</i>")
        '[i]Hi[/i]'

    """

    def __init__(
        self,
        dom_adapter: DOMAdapter,
        options: Optional[ConverterOptions] = None,
        *,
        html_parser_options: Optional[HtmlParserOptions] = None,
        html_renderer_options: Optional[HtmlRendererOptions] = None,
        bbcode_renderer_options: Optional[BBCodeRendererOptions] = None,
        markdown_renderer_options: Optional[MarkdownRendererOptions] = None,
    ):
        if dom_adapter is None:
            raise ValidationError(
                "A DOM adapter is required for HTML conversion",
                parameter_name="dom_adapter",
                parameter_value=dom_adapter,
            )
        if options is not None and not isinstance(options, ConverterOptions):
            raise InvalidOptionsError(
                converter_name="converter",
                expected_type=ConverterOptions,
                received_type=type(options),
            )
        self.dom_adapter = dom_adapter
        self.options = options or ConverterOptions()
        self.html_parser_options = self.options.html_parser_options(html_parser_options)
        self.html_renderer_options = self.options.html_renderer_options(html_renderer_options)
        self.bbcode_renderer_options = bbcode_renderer_options
        self.markdown_renderer_options = markdown_renderer_options

    def _create_parser(self, source_format: str) -> BaseParser:
        if source_format == "html":
            return HtmlParser(self.dom_adapter, self.html_parser_options)
        return BBCodeParser(self.options.bbcode_parser_options())

    def _create_renderer(self, target_format: str) -> BaseRenderer:
        if target_format == "html":
            return HtmlRenderer(self.html_renderer_options)
        if target_format == "markdown":
            return MarkdownRenderer(self.markdown_renderer_options)
        return BBCodeRenderer(self.bbcode_renderer_options)

    def parse_to_ast(self, text: Union[str, bytes, None], format: str = "bbcode") -> TreeNode:
        """Parse source text into a tree.

        Parameters
        ----------
        text : str, bytes or None
            Source markup
        format : {"bbcode", "html"}, default "bbcode"
            Source syntax, case-insensitive

        Returns
        -------
        TreeNode
            DOCUMENT node, optimized unless ``options.optimize`` is False

        Raises
        ------
        FormatError
            If ``format`` is not a supported source format

        """
        source_format = _normalize_format(format, SOURCE_FORMATS)
        parser = self._create_parser(source_format)

        with debug_timer(logger, f"Parsing ({source_format})"):
            tree = parser.parse(text)

        if self.options.optimize:
            with debug_timer(logger, "Optimizing tree"):
                TreeOptimizer().optimize(tree)
        return tree

    def render_from_ast(self, tree: Optional[TreeNode], format: str = "html") -> str:
        """Render a tree to text.

        When ``options.optimize`` is set the tree is normalized in place first,
        so hand-built trees get the same backfill and pruning as parsed ones.

        Parameters
        ----------
        tree : TreeNode or None
            Tree to render; None renders as an empty string
        format : {"bbcode", "html", "markdown"}, default "html"
            Target syntax, case-insensitive

        Returns
        -------
        str
            Rendered output

        Raises
        ------
        FormatError
            If ``format`` is not a supported target format

        """
        target_format = _normalize_format(format, TARGET_FORMATS)
        renderer = self._create_renderer(target_format)

        if tree is not None and self.options.optimize:
            with debug_timer(logger, "Optimizing tree"):
                TreeOptimizer().optimize(tree)

        with debug_timer(logger, f"Rendering ({target_format})"):
            return renderer.render_to_string(tree)

    def convert(self, text: Union[str, bytes, None], source_format: str, target_format: str) -> str:
        """Parse ``text`` as ``source_format`` and render it as ``target_format``.

        Both formats are validated before any parsing happens.

        Raises
        ------
        FormatError
            If either format is unsupported

        """
        source_format = _normalize_format(source_format, SOURCE_FORMATS)
        target_format = _normalize_format(target_format, TARGET_FORMATS)
        return self.render_from_ast(self.parse_to_ast(text, source_format), target_format)

    def bbcode_to_html(self, text: Optional[str]) -> str:
        """Convert BBCode to HTML; empty input is returned unchanged."""
        if not text:
            return text or ""
        return self.convert(text, "bbcode", "html")

    def html_to_bbcode(self, text: Optional[str]) -> str:
        """Convert HTML to BBCode; empty input is returned unchanged."""
        if not text:
            return text or ""
        return self.convert(text, "html", "bbcode")

    def bbcode_to_markdown(self, text: Optional[str]) -> str:
        """Convert BBCode to Markdown; empty input is returned unchanged."""
        if not text:
            return text or ""
        return self.convert(text, "bbcode", "markdown")


def _default_converter(options: Optional[ConverterOptions]) -> BBCodeConverter:
    return BBCodeConverter(SoupDOMAdapter(), options)


def bbcode_to_html(text: Optional[str], options: Optional[ConverterOptions] = None) -> str:
    """Convert BBCode to forum-style HTML.

    Examples
    --------
        >>> bbcode_to_html("[url]http://example.com[/url]")
        '<a href="http://example.com" target="_blank">http://example.com</a>'

    """
    return _default_converter(options).bbcode_to_html(text)


def html_to_bbcode(text: Optional[str], options: Optional[ConverterOptions] = None) -> str:
    """Convert HTML to BBCode, using BeautifulSoup to read the markup."""
    return _default_converter(options).html_to_bbcode(text)


def bbcode_to_markdown(text: Optional[str], options: Optional[ConverterOptions] = None) -> str:
    """Convert BBCode to Markdown."""
    return _default_converter(options).bbcode_to_markdown(text)


def parse_to_ast(
    text: Union[str, bytes, None], format: str = "bbcode", options: Optional[ConverterOptions] = None
) -> TreeNode:
    """Parse BBCode or HTML into a tree. See :meth:`BBCodeConverter.parse_to_ast`."""
    return _default_converter(options).parse_to_ast(text, format)


def render_from_ast(
    tree: Optional[TreeNode], format: str = "html", options: Optional[ConverterOptions] = None
) -> str:
    """Render a tree as BBCode, HTML or Markdown. See :meth:`BBCodeConverter.render_from_ast`."""
    return _default_converter(options).render_from_ast(tree, format)


def convert(
    text: Union[str, bytes, None],
    source_format: str,
    target_format: str,
    options: Optional[ConverterOptions] = None,
) -> str:
    """Convert between formats.

    Parameters
    ----------
    text : str, bytes or None
        Source markup
    source_format : {"bbcode", "html"}
        Source syntax
    target_format : {"bbcode", "html", "markdown"}
        Target syntax
    options : ConverterOptions or None, default = None
        Conversion toggles

    Returns
    -------
    str
        Converted text

    Examples
    --------
        >>> convert("<b>bold</b>", "html", "markdown")
        '**bold**'

    """
    return _default_converter(options).convert(text, source_format, target_format)


__all__ = [
    "BBCodeConverter",
    "bbcode_to_html",
    "bbcode_to_markdown",
    "convert",
    "html_to_bbcode",
    "parse_to_ast",
    "render_from_ast",
]
