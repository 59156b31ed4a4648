#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the options dataclasses."""
import dataclasses

import pytest

from bbtree.constants import DEFAULT_STRIP_ELEMENTS
from bbtree.options import (
    BBCodeParserOptions,
    BBCodeRendererOptions,
    ConverterOptions,
    HtmlParserOptions,
    HtmlRendererOptions,
    MarkdownRendererOptions,
)

ALL_OPTIONS = [
    BBCodeParserOptions,
    BBCodeRendererOptions,
    ConverterOptions,
    HtmlParserOptions,
    HtmlRendererOptions,
    MarkdownRendererOptions,
]


@pytest.mark.unit
class TestOptionsCommon:
    """Test behavior shared by every options class."""

    @pytest.mark.parametrize("options_class", ALL_OPTIONS)
    def test_frozen(self, options_class) -> None:
        """Test options cannot be modified in place."""
        options = options_class()
        first_field = dataclasses.fields(options)[0].name

        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(options, first_field, None)

    @pytest.mark.parametrize("options_class", ALL_OPTIONS)
    def test_fields_documented(self, options_class) -> None:
        """Test every field carries help metadata."""
        for option_field in dataclasses.fields(options_class):
            assert option_field.metadata.get("help"), f"{options_class.__name__}.{option_field.name}"

    def test_create_updated(self) -> None:
        """Test cloning with changes leaves the original untouched."""
        original = ConverterOptions()
        updated = original.create_updated(escape_html=False)

        assert updated.escape_html is False
        assert original.escape_html is True
        assert updated.allow_bbcode == original.allow_bbcode

    def test_create_updated_rejects_unknown_field(self) -> None:
        """Test unknown names raise TypeError."""
        with pytest.raises(TypeError):
            ConverterOptions().create_updated(colour=True)


@pytest.mark.unit
class TestConverterOptions:
    """Test the converter toggles."""

    def test_defaults(self) -> None:
        """Test the permissive but safe defaults."""
        options = ConverterOptions()

        assert options.allow_bbcode is True
        assert options.allow_html is False
        assert options.allow_img_code is True
        assert options.escape_html is True
        assert options.optimize is True

    def test_bbcode_parser_options(self) -> None:
        """Test toggles map onto the BBCode parser."""
        derived = ConverterOptions(allow_bbcode=False, allow_html=True, allow_img_code=False).bbcode_parser_options()

        assert derived == BBCodeParserOptions(parse_tags=False, allow_html=True, allow_img_code=False)

    def test_html_parser_options_keep_base(self) -> None:
        """Test sanitization settings of a base are kept."""
        base = HtmlParserOptions(strip_event_handlers=False, allow_img_code=True)
        derived = ConverterOptions(allow_img_code=False).html_parser_options(base)

        assert derived.strip_event_handlers is False
        assert derived.allow_img_code is False
        assert base.allow_img_code is True

    def test_html_renderer_options_keep_base(self) -> None:
        """Test link settings of a base are kept."""
        derived = ConverterOptions(escape_html=False).html_renderer_options(HtmlRendererOptions(link_target="_self"))

        assert derived.link_target == "_self"
        assert derived.escape_html is False


@pytest.mark.unit
class TestFormatOptions:
    """Test per-format options."""

    def test_html_parser_defaults(self) -> None:
        """Test the default denylist."""
        options = HtmlParserOptions()

        assert options.strip_elements == DEFAULT_STRIP_ELEMENTS
        assert "script" in options.strip_elements
        assert options.strip_event_handlers is True
        assert options.html_parser == "html.parser"

    def test_strip_elements_lowercased(self) -> None:
        """Test the denylist is normalized."""
        assert HtmlParserOptions(strip_elements=("SCRIPT", "Iframe")).strip_elements == ("script", "iframe")

    def test_html_renderer_defaults(self) -> None:
        """Test HTML output defaults."""
        options = HtmlRendererOptions()

        assert options.escape_html is True
        assert options.sanitize_urls is True
        assert options.link_target == "_blank"

    def test_markdown_defaults(self) -> None:
        """Test Markdown output defaults."""
        options = MarkdownRendererOptions()

        assert (options.bullet, options.line_break, options.code_fence, options.list_indent) == ("-", "spaces", "```", 2)

    def test_markdown_validation_on_update(self) -> None:
        """Test validation also runs for updated copies."""
        with pytest.raises(ValueError):
            MarkdownRendererOptions().create_updated(bullet="#")

    def test_bbcode_defaults(self) -> None:
        """Test BBCode defaults."""
        assert BBCodeParserOptions() == BBCodeParserOptions(
            parse_tags=True, allow_img_code=True, allow_html=False, normalize_newlines=True
        )
        assert BBCodeRendererOptions().close_list_items is True
