"""
Compression codec for cache entries.

Brotli runs at maximum quality with a 4 MiB window. Compression happens
once per cache entry at build time, so encode speed is traded for the
smallest embedded payload.
"""

from __future__ import annotations

import brotli

from include_url.exceptions import CacheIOError
from include_url.types import EncodingKind

BROTLI_QUALITY = 11
BROTLI_WINDOW = 22


def encode(data: bytes, kind: EncodingKind) -> bytes:
    """Apply the requested encoding to fetched bytes.

    Raises:
        CacheIOError: If the compressor fails.
    """
    kind = EncodingKind(kind)
    if kind is EncodingKind.NONE:
        return data
    try:
        return brotli.compress(data, quality=BROTLI_QUALITY, lgwin=BROTLI_WINDOW)
    except brotli.error as e:
        raise CacheIOError(
            f"Failed to write compressed content: {e}",
            context={"encoding": kind.value, "cause": str(e)},
        ) from e


def decode(data: bytes, kind: EncodingKind) -> bytes:
    """Invert encode() for an entry read back from the cache.

    Raises:
        CacheIOError: If the data is not a valid stream for the encoding.
    """
    kind = EncodingKind(kind)
    if kind is EncodingKind.NONE:
        return data
    try:
        return brotli.decompress(data)
    except brotli.error as e:
        raise CacheIOError(
            f"Failed to decompress content: {e}",
            context={"encoding": kind.value, "cause": str(e)},
        ) from e
