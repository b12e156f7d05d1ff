"""
Custom exception hierarchy for include-url.

All exceptions inherit from IncludeUrlError, which provides optional context
for structured error handling and logging. Every failure is fatal for the
build step that triggered it; nothing in the package retries or falls back.
"""

from __future__ import annotations

from typing import Any


class IncludeUrlError(Exception):
    """Base exception for all include-url errors.

    Attributes:
        message: Human-readable error message.
        context: Optional structured context for logging/debugging.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(IncludeUrlError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Empty INCLUDE_URL_NAMESPACE
        - Cache directory that cannot be resolved
    """

    pass


class UrlError(IncludeUrlError):
    """Base for URL rejections raised before any network access.

    Context should include:
        - url: The rejected URL
    """

    pass


class InvalidUrlError(UrlError):
    """Raised when a URL cannot be parsed as an absolute URL."""

    pass


class UnsupportedSchemeError(UrlError):
    """Raised when a URL uses a scheme other than http or https.

    Context should include:
        - url: The rejected URL
        - scheme: The offending scheme
    """

    pass


class NetworkError(IncludeUrlError):
    """Raised when fetching a URL fails at the transport level.

    The underlying httpx exception is chained as __cause__.

    Context should include:
        - url: The URL that was being fetched
        - cause: String form of the underlying error
    """

    pass


class CacheIOError(IncludeUrlError):
    """Raised when reading, encoding or writing a cache entry fails.

    Context should include:
        - path: The cache path involved, if any
        - cause: String form of the underlying error
    """

    pass


class ContentValidationError(IncludeUrlError):
    """Raised when fetched content is not a well-formed structured value.

    Context should include:
        - cause: The parser's error message
    """

    pass


class TypeMismatchError(IncludeUrlError):
    """Raised when valid JSON cannot be parsed into the requested shape.

    Context should include:
        - shape: Name of the target type
        - errors: Number of validation errors reported
    """

    pass
