"""
URL validation.

Runs before any network access so malformed or disallowed URLs never
cause an outbound request.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urlsplit

from include_url.exceptions import InvalidUrlError, UnsupportedSchemeError

ALLOWED_SCHEMES = frozenset({"http", "https"})

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def validate_url(url: str) -> SplitResult:
    """Parse a URL and check that it is an absolute http(s) URL.

    Args:
        url: The URL string supplied by the call site.

    Returns:
        The parsed URL.

    Raises:
        InvalidUrlError: If the URL is relative, has a malformed authority,
            or is an http(s) URL without a host.
        UnsupportedSchemeError: If the scheme is anything but http or https.
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}", context={"url": url}) from e

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        raise InvalidUrlError(
            "Invalid URL: relative URL without a base", context={"url": url}
        )

    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise UnsupportedSchemeError(
            "Only HTTP and HTTPS URLs are supported",
            context={"url": url, "scheme": scheme},
        )

    # Also covers "http:example.com", which has no authority component
    if not parts.hostname:
        raise InvalidUrlError("Invalid URL: empty host", context={"url": url})

    try:
        # Raises for non-numeric or out-of-range ports
        parts.port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL: {e}", context={"url": url}) from e

    return parts
