#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bbtree/utils/security.py
"""URL safety checks for link and image targets.

Functions
---------
- is_relative_url: Check whether a URL has no scheme
- is_url_scheme_dangerous: Check whether a URL uses a scriptable scheme
- is_url_safe: Inverse of is_url_scheme_dangerous that tolerates empty URLs
- sanitize_url: Return the URL unchanged, or an empty string when dangerous
"""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from bbtree.constants import DANGEROUS_SCHEMES

logger = logging.getLogger(__name__)


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL is relative, False otherwise

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("../parent/file.html")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    if not url or not url.strip():
        return True

    return url.strip().startswith(("#", "/", "./", "../", "?"))


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that execute script when the link is followed or the image is loaded.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("data:image/png;base64,AAAA")
    False

    """
    if not url or not url.strip():
        return False

    # Browsers ignore embedded whitespace and control characters in schemes
    url_lower = "".join(ch for ch in url.lower() if ch > " ")

    if is_relative_url(url_lower):
        return False

    if url_lower.startswith(tuple(DANGEROUS_SCHEMES)):
        return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        return True

    return scheme in ("javascript", "vbscript", "about")


def is_url_safe(url: str) -> bool:
    """Check if a URL is safe (no dangerous schemes).

    Parameters
    ----------
    url : str
        URL to validate

    Returns
    -------
    bool
        True if URL is safe, False if it uses a dangerous scheme

    """
    if not url or not url.strip():
        return True
    return not is_url_scheme_dangerous(url)


def sanitize_url(url: str) -> str:
    """Sanitize a URL by removing dangerous schemes.

    Parameters
    ----------
    url : str
        URL to sanitize

    Returns
    -------
    str
        Sanitized URL, or empty string if the URL is dangerous

    Examples
    --------
    >>> sanitize_url("https://example.com")
    'https://example.com'
    >>> sanitize_url("javascript:alert('xss')")
    ''

    """
    if not is_url_safe(url):
        logger.debug("Dropped URL with dangerous scheme: %r", url[:50])
        return ""
    return url


__all__ = [
    "is_relative_url",
    "is_url_safe",
    "is_url_scheme_dangerous",
    "sanitize_url",
]
