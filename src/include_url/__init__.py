"""
include-url: embed remote resources at build time.

Fetches a URL once and stores its (optionally Brotli-compressed) bytes in a
content-addressed cache keyed by namespace, URL and encoding:
- fetch_or_cache(): resolve a URL to its cache entry path
- validate_structured(): check cached bytes are well-formed JSON
- include_url() / include_url_bytes() / include_url_bytes_with_brotli() /
  include_json_url(): resolve a URL straight to a Python value
"""

from include_url.embed import (
    Embedder,
    include_json_url,
    include_url,
    include_url_bytes,
    include_url_bytes_with_brotli,
)
from include_url.exceptions import (
    CacheIOError,
    ContentValidationError,
    IncludeUrlError,
    InvalidUrlError,
    NetworkError,
    TypeMismatchError,
    UnsupportedSchemeError,
)
from include_url.fetcher import RemoteFetcher
from include_url.keys import derive_cache_key
from include_url.store import ContentAddressedStore, fetch_or_cache
from include_url.types import EncodingKind, RemoteResource
from include_url.validator import validate_structured

__version__ = "0.1.0"

__all__ = [
    "CacheIOError",
    "ContentAddressedStore",
    "ContentValidationError",
    "Embedder",
    "EncodingKind",
    "IncludeUrlError",
    "InvalidUrlError",
    "NetworkError",
    "RemoteFetcher",
    "RemoteResource",
    "TypeMismatchError",
    "UnsupportedSchemeError",
    "derive_cache_key",
    "fetch_or_cache",
    "include_json_url",
    "include_url",
    "include_url_bytes",
    "include_url_bytes_with_brotli",
    "validate_structured",
]
