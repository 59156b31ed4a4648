"""Pytest configuration and shared fixtures for the bbtree test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import FakeDOMAdapter

from bbtree.api import BBCodeConverter
from bbtree.dom.soup import SoupDOMAdapter

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def fake_dom() -> FakeDOMAdapter:
    """Provide an in-memory DOM adapter with no prebuilt document.

    Returns
    -------
    FakeDOMAdapter
        Adapter that turns any markup into a single text string.

    """
    return FakeDOMAdapter()


@pytest.fixture
def converter() -> BBCodeConverter:
    """Provide a converter over the BeautifulSoup adapter with default options."""
    return BBCodeConverter(SoupDOMAdapter())


@pytest.fixture
def sample_bbcode() -> str:
    """Provide a forum post exercising most tags.

    Returns
    -------
    str
        BBCode text used across multiple tests.

    """
    return (
        "[quote=alice]Has anyone tried [b]bbtree[/b]?[/quote]\n"
        "Yes! See [url=http://example.com]the docs[/url] and this screenshot:\n"
        "[img]http://example.com/shot.png[/img]\n"
        "[list=1][*]parse[/*][*]optimize[/*][*]render[/*][/list]\n"
        "[code]print('hi')[/code]\n"
        "[table=80%,#eeeeee][tr][td=50%]a[/td][td]b[/td][/tr][/table]\n"
        "[color=red]red[/color] [size=4]big[/size] [font=Arial]sans[/font]\n"
        "[hr]"
    )
