"""
Core types for include-url.

- EncodingKind: the compression applied to a cache entry
- RemoteResource: a URL that passed validation
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from include_url.urls import validate_url


class EncodingKind(str, Enum):
    """Compression applied to a cache entry before it is persisted.

    The value is the textual form mixed into the cache key, so it must
    never change for an existing member.
    """

    NONE = "None"
    BROTLI = "Brotli"


@dataclass(frozen=True)
class RemoteResource:
    """An absolute http(s) URL that is safe to fetch."""

    url: str

    @property
    def scheme(self) -> str:
        return validate_url(self.url).scheme.lower()

    @property
    def host(self) -> str:
        return validate_url(self.url).hostname or ""

    @classmethod
    def parse(cls, url: str) -> RemoteResource:
        """Validate a URL and wrap it.

        Raises:
            InvalidUrlError: If the URL is not an absolute URL.
            UnsupportedSchemeError: If the scheme is not http or https.
        """
        validate_url(url)
        return cls(url=url)
