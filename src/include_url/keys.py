"""
Cache key derivation.
"""

from __future__ import annotations

import hashlib

from include_url.types import EncodingKind

# Separates the hashed fields so ("ab", "c") and ("a", "bc") cannot collide
_SEPARATOR = b"\0"


def derive_cache_key(namespace: str, url: str, encoding: EncodingKind) -> str:
    """Derive the cache key for a (namespace, url, encoding) triple.

    The key is the hex SHA-256 of the namespace, url and encoding name,
    NUL-separated. It doubles as the cache entry's filename.

    Args:
        namespace: Identifier of the consuming build unit.
        url: The URL exactly as supplied by the call site.
        encoding: Compression applied to the entry.

    Returns:
        64-character lowercase hex digest.
    """
    hasher = hashlib.sha256()
    hasher.update(namespace.encode("utf-8"))
    hasher.update(_SEPARATOR)
    hasher.update(url.encode("utf-8"))
    hasher.update(_SEPARATOR)
    hasher.update(EncodingKind(encoding).value.encode("utf-8"))
    return hasher.hexdigest()
