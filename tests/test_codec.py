"""
Tests for the compression codec.
"""

from __future__ import annotations

import brotli
import pytest

from include_url import codec
from include_url.exceptions import CacheIOError
from include_url.types import EncodingKind


class TestIdentity:
    """Tests for EncodingKind.NONE."""

    def test_encode_none_is_identity(self) -> None:
        """Test that NONE leaves bytes untouched."""
        data = b"\xff\xfe raw \x00 bytes"
        assert codec.encode(data, EncodingKind.NONE) == data
        assert codec.decode(data, EncodingKind.NONE) == data


class TestBrotli:
    """Tests for EncodingKind.BROTLI."""

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"hello",
            b"\x80\x81\xfe\xff not utf-8",
            bytes(range(256)) * 64,
            b"a" * 100_000,
        ],
    )
    def test_decode_inverts_encode(self, data: bytes) -> None:
        """Test lossless recovery, including empty and non-UTF-8 input."""
        assert codec.decode(codec.encode(data, EncodingKind.BROTLI), EncodingKind.BROTLI) == data

    def test_output_is_standard_brotli_stream(self) -> None:
        """Test that any brotli decoder can read the entry."""
        data = b"hello hello hello hello"
        assert brotli.decompress(codec.encode(data, EncodingKind.BROTLI)) == data

    def test_compresses_repetitive_content(self) -> None:
        """Test that repetitive content actually shrinks."""
        data = b"include_url " * 1000
        assert len(codec.encode(data, EncodingKind.BROTLI)) < len(data) // 10

    def test_encode_is_deterministic(self) -> None:
        """Test that encoding the same bytes twice gives the same output."""
        data = bytes(range(256)) * 16
        assert codec.encode(data, EncodingKind.BROTLI) == codec.encode(
            data, EncodingKind.BROTLI
        )

    def test_decode_corrupt_stream_raises(self) -> None:
        """Test that a truncated stream surfaces as CacheIOError."""
        encoded = codec.encode(bytes(range(256)) * 64, EncodingKind.BROTLI)

        with pytest.raises(CacheIOError) as exc_info:
            codec.decode(encoded[: len(encoded) // 2], EncodingKind.BROTLI)

        assert exc_info.value.__cause__ is not None
