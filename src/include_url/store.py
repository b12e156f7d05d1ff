"""
Content-addressed store for fetched resources.

Entries live at {cache_root}/{sha256(namespace, url, encoding)} with no
extension and no metadata; the encoding is implied by the key that was
requested. An entry is written once, on the first miss, and never
rewritten or removed afterwards.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from include_url import codec
from include_url.exceptions import CacheIOError
from include_url.fetcher import RemoteFetcher
from include_url.keys import derive_cache_key
from include_url.logging import get_logger, log_context
from include_url.types import EncodingKind
from include_url.urls import validate_url

logger = get_logger(__name__)


class ContentAddressedStore:
    """Fetch-once cache of remote resources.

    Safe for concurrent writers of the same key: each writer stages into
    its own temporary file and renames it into place, and content for a
    key is deterministic, so the last rename wins with identical bytes.
    """

    def __init__(
        self,
        cache_root: str | Path,
        namespace: str,
        fetcher: RemoteFetcher | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            cache_root: Directory holding cache entries. Created if absent.
            namespace: Identifier of the consuming build unit.
            fetcher: Fetcher used on cache misses. Defaults to a new
                RemoteFetcher.

        Raises:
            CacheIOError: If the cache root cannot be created.
        """
        self.cache_root = Path(cache_root)
        self.namespace = namespace
        self.fetcher = fetcher or RemoteFetcher()

        try:
            self.cache_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(
                f"Failed to create cache directory: {e}",
                context={"path": str(self.cache_root), "cause": str(e)},
            ) from e

    def entry_path(self, url: str, encoding: EncodingKind = EncodingKind.NONE) -> Path:
        """Get the path an entry is (or would be) stored at. No I/O."""
        return self.cache_root / derive_cache_key(self.namespace, url, encoding)

    def fetch_or_cache(
        self,
        url: str,
        encoding: EncodingKind = EncodingKind.NONE,
    ) -> Path:
        """Return the cache path for a URL, fetching it on first use.

        Args:
            url: Absolute http(s) URL.
            encoding: Compression to apply before persisting.

        Returns:
            Path to the cache entry.

        Raises:
            InvalidUrlError: If the URL does not parse.
            UnsupportedSchemeError: If the scheme is not http or https.
            NetworkError: If the fetch fails.
            CacheIOError: If encoding or persisting fails.
        """
        encoding = EncodingKind(encoding)
        validate_url(url)
        path = self.entry_path(url, encoding)

        with log_context(namespace=self.namespace, url=url):
            if path.exists():
                logger.debug("Cache hit", key=path.name[:12], encoding=encoding.value)
                return path

            logger.info("Cache miss", key=path.name[:12], encoding=encoding.value)
            content = self.fetcher.fetch(url)
            content = codec.encode(content, encoding)
            self._write_entry(path, content)

        return path

    def read(self, url: str, encoding: EncodingKind = EncodingKind.NONE) -> bytes:
        """Fetch-or-cache a URL and return the stored bytes.

        The bytes are returned as stored; Brotli entries stay compressed.

        Raises:
            CacheIOError: If the entry cannot be read.
        """
        path = self.fetch_or_cache(url, encoding)
        try:
            return path.read_bytes()
        except OSError as e:
            raise CacheIOError(
                f"Failed to open cache file: {e}",
                context={"path": str(path), "cause": str(e)},
            ) from e

    def _write_entry(self, path: Path, content: bytes) -> None:
        """Atomically write an entry.

        Stages into a temp file in the cache root, then renames over the
        final name, so readers never observe a partial file.
        """
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.cache_root, prefix=f".{path.name[:16]}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise CacheIOError(
                f"Failed to write cache file: {e}",
                context={"path": str(path), "cause": str(e)},
            ) from e
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except FileNotFoundError:
                    pass

        logger.debug("Stored cache entry", key=path.name[:12], size=len(content))


def fetch_or_cache(
    namespace: str,
    url: str,
    encoding: EncodingKind = EncodingKind.NONE,
    *,
    cache_root: str | Path | None = None,
    fetcher: RemoteFetcher | None = None,
) -> Path:
    """Fetch-or-cache a URL under a namespace.

    Args:
        namespace: Identifier of the consuming build unit.
        url: Absolute http(s) URL.
        encoding: Compression to apply before persisting.
        cache_root: Cache directory. Defaults to INCLUDE_URL_CACHE_DIR.
        fetcher: Fetcher used on a miss.

    Returns:
        Path to the cache entry.
    """
    if cache_root is None:
        from include_url.config import get_settings

        cache_root = get_settings().cache_dir

    if fetcher is not None:
        return ContentAddressedStore(cache_root, namespace, fetcher).fetch_or_cache(
            url, encoding
        )

    with RemoteFetcher() as owned_fetcher:
        store = ContentAddressedStore(cache_root, namespace, owned_fetcher)
        return store.fetch_or_cache(url, encoding)
