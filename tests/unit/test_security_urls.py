#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for URL safety checks and HTML escaping."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from bbtree.utils.html_utils import escape_html
from bbtree.utils.security import is_relative_url, is_url_safe, is_url_scheme_dangerous, sanitize_url


@pytest.mark.unit
class TestUrlSchemes:
    """Test scheme classification."""

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "  javascript:alert(1)",
            "java\tscript:alert(1)",
            "vbscript:msgbox",
            "data:text/html;base64,PHNjcmlwdD4=",
            "about:blank",
        ],
    )
    def test_dangerous(self, url) -> None:
        """Test scriptable schemes are flagged, however they are disguised."""
        assert is_url_scheme_dangerous(url)
        assert not is_url_safe(url)
        assert sanitize_url(url) == ""

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com",
            "https://example.com/a?b=c",
            "mailto:someone@example.com",
            "data:image/png;base64,AAAA",
            "/relative/path",
            "#anchor",
            "",
        ],
    )
    def test_safe(self, url) -> None:
        """Test ordinary URLs pass through unchanged."""
        assert not is_url_scheme_dangerous(url)
        assert is_url_safe(url)
        assert sanitize_url(url) == url

    @pytest.mark.parametrize(
        "url,expected",
        [("#x", True), ("../a", True), ("?q=1", True), ("", True), ("http://a.test", False), ("a.png", False)],
    )
    def test_relative(self, url, expected) -> None:
        """Test relative URL detection."""
        assert is_relative_url(url) is expected

    @given(st.text(max_size=60))
    def test_sanitize_never_raises(self, url) -> None:
        """Test arbitrary text is either kept or emptied."""
        assert sanitize_url(url) in (url, "")

    @given(st.text(alphabet=st.sampled_from(" \t\n\r\x00\x1f"), max_size=4))
    def test_javascript_prefix_always_caught(self, noise) -> None:
        """Test whitespace and control characters before the scheme do not hide it."""
        assert sanitize_url(f"{noise}javascript:alert(1)") == ""


@pytest.mark.unit
class TestEscapeHtml:
    """Test HTML escaping."""

    def test_escapes_all_specials(self) -> None:
        """Test the five special characters."""
        assert escape_html("<a href='x'>&\"") == "&lt;a href=&#039;x&#039;&gt;&amp;&quot;"

    def test_disabled(self) -> None:
        """Test escaping can be switched off."""
        assert escape_html("<b>", enabled=False) == "<b>"

    def test_ampersand_first(self) -> None:
        """Test entities are not double-escaped in one pass."""
        assert escape_html("&lt;") == "&amp;lt;"
