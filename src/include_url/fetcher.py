"""
Remote fetcher.

Performs one synchronous GET per call and returns the raw body. Callers
are expected to invoke it only on a cache miss.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from include_url.exceptions import InvalidUrlError, NetworkError
from include_url.logging import get_logger
from include_url.urls import validate_url

logger = get_logger(__name__)

# Identifies build-time fetches to origin servers
USER_AGENT = "include_url"


class RemoteFetcher:
    """Fetches raw bytes from http(s) URLs.

    No retries, no timeout override and no redirect policy beyond what
    httpx does by default with redirects enabled.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """Initialize the fetcher.

        Args:
            client: Optional pre-configured client (e.g. one using
                httpx.MockTransport). When omitted, the fetcher creates and
                owns its own client.
        """
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                follow_redirects=True,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self) -> RemoteFetcher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def fetch(self, url: str) -> bytes:
        """Fetch a URL and return the full response body.

        Args:
            url: Absolute http(s) URL.

        Returns:
            The response body as bytes, whatever the status code.

        Raises:
            InvalidUrlError: If the URL does not parse.
            UnsupportedSchemeError: If the scheme is not http or https.
            NetworkError: On connection, transport or body-read failure.
        """
        validate_url(url)
        client = self._get_client()

        try:
            response = client.get(url, headers={"User-Agent": USER_AGENT})
        except httpx.InvalidURL as e:
            raise InvalidUrlError(f"Invalid URL: {e}", context={"url": url}) from e
        except (httpx.HTTPError, httpx.StreamError) as e:
            logger.error("Fetch failed", url=url, error=str(e))
            raise NetworkError(
                f"Failed to fetch URL: {e}", context={"url": url, "cause": str(e)}
            ) from e

        if not response.is_success:
            logger.warning(
                "Origin returned non-success status, caching body as-is",
                url=url,
                status_code=response.status_code,
            )

        logger.info(
            "Fetched URL",
            url=url,
            status_code=response.status_code,
            size=len(response.content),
        )
        return response.content
