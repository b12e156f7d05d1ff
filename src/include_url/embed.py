"""
Embedding helpers: turn cached remote resources into Python values.

Each helper resolves its URL through the content-addressed store, so the
network is hit at most once per (namespace, url, encoding) no matter how
often the value is requested.

Usage:
    from include_url import include_url, include_json_url

    README = include_url("https://example.com/static/README.md")
    post = include_json_url("https://jsonplaceholder.typicode.com/posts/1", Post)
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from include_url.exceptions import ContentValidationError, TypeMismatchError
from include_url.store import ContentAddressedStore
from include_url.types import EncodingKind
from include_url.validator import validate_structured


class Embedder:
    """Value-returning front end over a ContentAddressedStore."""

    def __init__(self, store: ContentAddressedStore) -> None:
        self.store = store

    def include_url(self, url: str) -> str:
        """Get the content of a URL as text.

        Raises:
            ContentValidationError: If the content is not valid UTF-8.
        """
        data = self.store.read(url, EncodingKind.NONE)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ContentValidationError(
                f"Content from URL is not valid UTF-8: {e}",
                context={"url": url, "cause": str(e)},
            ) from e

    def include_url_bytes(self, url: str) -> bytes:
        """Get the raw content of a URL."""
        return self.store.read(url, EncodingKind.NONE)

    def include_url_bytes_with_brotli(self, url: str) -> bytes:
        """Get the Brotli-compressed content of a URL.

        The bytes stay compressed; use codec.decode() to recover the
        original body.
        """
        return self.store.read(url, EncodingKind.BROTLI)

    def include_json_url(self, url: str, shape: Any = None) -> Any:
        """Get the content of a URL parsed as JSON.

        Args:
            url: Absolute http(s) URL serving JSON.
            shape: Optional target type (pydantic model, dataclass, TypedDict,
                or any type pydantic's TypeAdapter accepts). Without one the
                generic parsed value is returned. Fields are matched strictly:
                "1" does not satisfy an int field.

        Raises:
            ContentValidationError: If the content is not well-formed JSON.
            TypeMismatchError: If the JSON does not fit the target shape.
        """
        text = validate_structured(self.store.read(url, EncodingKind.NONE))
        adapter: TypeAdapter[Any] = TypeAdapter(Any if shape is None else shape)

        try:
            return adapter.validate_json(text, strict=True)
        except PydanticValidationError as e:
            shape_name = getattr(shape, "__name__", repr(shape))
            raise TypeMismatchError(
                f"Failed to parse JSON into {shape_name}: {e}",
                context={"url": url, "shape": shape_name, "errors": e.error_count()},
            ) from e


_default_embedder: Embedder | None = None


def get_embedder() -> Embedder:
    """Get the embedder built from settings, creating it on first use."""
    global _default_embedder
    if _default_embedder is None:
        from include_url.config import get_settings

        settings = get_settings()
        _default_embedder = Embedder(
            ContentAddressedStore(settings.cache_dir, settings.namespace)
        )
    return _default_embedder


def set_embedder(embedder: Embedder | None) -> None:
    """Replace the default embedder (None resets to settings on next use)."""
    global _default_embedder
    _default_embedder = embedder


def include_url(url: str) -> str:
    """Get the content of a URL as text, via the default embedder."""
    return get_embedder().include_url(url)


def include_url_bytes(url: str) -> bytes:
    """Get the raw content of a URL, via the default embedder."""
    return get_embedder().include_url_bytes(url)


def include_url_bytes_with_brotli(url: str) -> bytes:
    """Get the Brotli-compressed content of a URL, via the default embedder."""
    return get_embedder().include_url_bytes_with_brotli(url)


def include_json_url(url: str, shape: Any = None) -> Any:
    """Get the content of a URL parsed as JSON, via the default embedder."""
    return get_embedder().include_json_url(url, shape)
