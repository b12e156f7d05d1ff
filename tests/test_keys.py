"""
Tests for cache key derivation.
"""

from __future__ import annotations

import hashlib

from include_url.keys import derive_cache_key
from include_url.types import EncodingKind

URL = "https://example.com/static/content.txt"


class TestCacheKey:
    """Tests for derive_cache_key."""

    def test_key_is_hex_sha256(self) -> None:
        """Test that keys are 64-char lowercase hex digests."""
        key = derive_cache_key("ns", URL, EncodingKind.NONE)
        assert len(key) == 64
        assert all(c in "0123456789abcdef" for c in key)

    def test_key_matches_documented_layout(self) -> None:
        """Test the exact hashed byte layout (namespace NUL url NUL encoding)."""
        expected = hashlib.sha256(b"ns\0" + URL.encode() + b"\0Brotli").hexdigest()
        assert derive_cache_key("ns", URL, EncodingKind.BROTLI) == expected

    def test_key_is_deterministic(self) -> None:
        """Test that equal inputs give equal keys."""
        assert derive_cache_key("ns", URL, EncodingKind.NONE) == derive_cache_key(
            "ns", URL, EncodingKind.NONE
        )

    def test_encoding_changes_key(self) -> None:
        """Test that changing only the encoding changes the key."""
        assert derive_cache_key("ns", URL, EncodingKind.NONE) != derive_cache_key(
            "ns", URL, EncodingKind.BROTLI
        )

    def test_namespace_changes_key(self) -> None:
        """Test that changing only the namespace changes the key."""
        assert derive_cache_key("crate_a", URL, EncodingKind.NONE) != derive_cache_key(
            "crate_b", URL, EncodingKind.NONE
        )

    def test_url_changes_key(self) -> None:
        """Test that changing only the URL changes the key."""
        assert derive_cache_key("ns", URL, EncodingKind.NONE) != derive_cache_key(
            "ns", URL + "?v=2", EncodingKind.NONE
        )

    def test_separator_prevents_boundary_collisions(self) -> None:
        """Test that shifting bytes between namespace and URL changes the key."""
        assert derive_cache_key("ab", "c", EncodingKind.NONE) != derive_cache_key(
            "a", "bc", EncodingKind.NONE
        )

    def test_accepts_encoding_value(self) -> None:
        """Test that the enum's string value works like the member."""
        assert derive_cache_key("ns", URL, "Brotli") == derive_cache_key(  # type: ignore[arg-type]
            "ns", URL, EncodingKind.BROTLI
        )
