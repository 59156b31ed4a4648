#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the BBCode tag table."""
import pytest

from bbtree.ast.nodes import NodeKind
from bbtree.ast.tags import (
    TAG_KINDS,
    TableSpec,
    canonical_tag,
    closes,
    format_table_spec,
    is_self_closing,
    parse_table_spec,
    resolve_tag,
    value_attribute,
)


@pytest.mark.unit
class TestTagResolution:
    """Test tag name to node kind mapping."""

    @pytest.mark.parametrize(
        "name,kind",
        [
            ("b", NodeKind.BOLD),
            ("strong", NodeKind.BOLD),
            ("I", NodeKind.ITALIC),
            ("em", NodeKind.ITALIC),
            ("strike", NodeKind.STRIKETHROUGH),
            ("url", NodeKind.LINK),
            ("img", NodeKind.IMAGE),
            ("code", NodeKind.CODE_BLOCK),
            ("th", NodeKind.TABLE_CELL),
            ("*", NodeKind.LIST_ITEM),
            ("hr", NodeKind.HORIZONTAL_RULE),
        ],
    )
    def test_known_tags(self, name, kind) -> None:
        """Test known tag names resolve case-insensitively."""
        assert resolve_tag(name) is kind

    def test_unknown_tag(self) -> None:
        """Test unknown names resolve to None."""
        assert resolve_tag("marquee") is None

    def test_close_matches_by_kind(self) -> None:
        """Test any alias of a kind closes it."""
        assert closes(NodeKind.BOLD, "strong")
        assert closes(NodeKind.BOLD, "B")
        assert not closes(NodeKind.BOLD, "i")
        assert not closes(NodeKind.BOLD, "nope")

    def test_canonical_names(self) -> None:
        """Test the first listed spelling is used for output."""
        assert canonical_tag(NodeKind.BOLD) == "b"
        assert canonical_tag(NodeKind.ITALIC) == "i"
        assert canonical_tag(NodeKind.STRIKETHROUGH) == "s"
        assert canonical_tag(NodeKind.TABLE_CELL) == "td"
        assert canonical_tag(NodeKind.LIST_ITEM) == "*"

    def test_kinds_without_tags(self) -> None:
        """Test kinds that BBCode cannot spell."""
        for kind in (NodeKind.DOCUMENT, NodeKind.PARAGRAPH, NodeKind.TEXT, NodeKind.LINE_BREAK, NodeKind.HTML_RAW):
            assert canonical_tag(kind) is None

    def test_canonical_tag_resolves_back(self) -> None:
        """Test every canonical name resolves to its own kind."""
        for kind in set(TAG_KINDS.values()):
            assert resolve_tag(canonical_tag(kind)) is kind

    def test_self_closing(self) -> None:
        """Test only the horizontal rule is self-closing."""
        assert is_self_closing(NodeKind.HORIZONTAL_RULE)
        assert not is_self_closing(NodeKind.IMAGE)
        assert not is_self_closing(NodeKind.LIST_ITEM)

    @pytest.mark.parametrize(
        "kind,attribute",
        [
            (NodeKind.LINK, "href"),
            (NodeKind.IMAGE, "src"),
            (NodeKind.CODE_BLOCK, "language"),
            (NodeKind.QUOTE, "author"),
            (NodeKind.LIST, "style"),
            (NodeKind.TABLE_ROW, "bgcolor"),
            (NodeKind.TABLE_CELL, "width"),
            (NodeKind.COLOR, "color"),
            (NodeKind.SIZE, "size"),
            (NodeKind.FONT, "face"),
            (NodeKind.BOLD, None),
        ],
    )
    def test_value_attributes(self, kind, attribute) -> None:
        """Test which attribute receives a tag's value."""
        assert value_attribute(kind) == attribute


@pytest.mark.unit
class TestTableSpec:
    """Test the two-field table value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, TableSpec()),
            ("", TableSpec()),
            ("80%", TableSpec(width="80%")),
            ("80%,#eee", TableSpec(width="80%", background="#eee")),
            (" 80% , red ", TableSpec(width="80%", background="red")),
            (",red", TableSpec(background="red")),
            ("80%,", TableSpec(width="80%")),
            ("80%,red,left", TableSpec(width="80%", background="red")),
        ],
    )
    def test_parse(self, value, expected) -> None:
        """Test splitting table values into width and background."""
        assert parse_table_spec(value) == expected

    @pytest.mark.parametrize(
        "width,background,expected",
        [
            (None, None, None),
            ("50%", None, "50%"),
            ("50%", "red", "50%,red"),
            (None, "red", ",red"),
        ],
    )
    def test_format(self, width, background, expected) -> None:
        """Test writing a table value back."""
        assert format_table_spec(width, background) == expected

    @pytest.mark.parametrize("value", ["50%", "50%,red", ",red"])
    def test_format_inverts_parse(self, value) -> None:
        """Test formatting a parsed value reproduces it."""
        spec = parse_table_spec(value)
        assert format_table_spec(spec.width, spec.background) == value
