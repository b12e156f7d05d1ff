"""
Pytest configuration and fixtures for include-url tests.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import httpx
import pytest

from include_url.config import Settings, clear_settings_cache
from include_url.embed import set_embedder
from include_url.fetcher import USER_AGENT, RemoteFetcher
from include_url.store import ContentAddressedStore


class StubServer:
    """In-process origin server backed by httpx.MockTransport.

    Serves fixed bodies per path and records every request it receives,
    so tests can assert how many network calls were made.
    """

    def __init__(self, routes: dict[str, bytes] | None = None) -> None:
        self.routes: dict[str, bytes] = dict(routes or {})
        self.requests: list[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path not in self.routes:
            return httpx.Response(404, content=b"not found")
        return httpx.Response(200, content=self.routes[request.url.path])

    def client(self) -> httpx.Client:
        return httpx.Client(
            transport=httpx.MockTransport(self.handler),
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test outputs."""
    return tmp_path


@pytest.fixture
def stub_server() -> StubServer:
    """Provide a stub origin serving a few fixed resources."""
    return StubServer(
        {
            "/x": b"hello",
            "/post.json": b'{"userId": 1, "id": 7, "title": "t", "body": "b"}',
            "/post_loose.json": b'{"userId": "1", "id": 7, "title": "t", "body": "b"}',
            "/post_float.json": b'{"userId": 1, "id": 7.0, "title": "t", "body": "b"}',
            "/broken.json": b"not json",
            "/binary": bytes(range(256)) * 4,
            "/empty": b"",
        }
    )


@pytest.fixture
def stub_fetcher(stub_server: StubServer) -> Generator[RemoteFetcher, None, None]:
    """Provide a fetcher wired to the stub server."""
    client = stub_server.client()
    yield RemoteFetcher(client)
    client.close()


@pytest.fixture
def store(temp_dir: Path, stub_fetcher: RemoteFetcher) -> ContentAddressedStore:
    """Provide a store rooted in a temp directory using the stub fetcher."""
    return ContentAddressedStore(temp_dir / "cache", "ns", fetcher=stub_fetcher)


@pytest.fixture
def mock_env_vars(temp_dir: Path) -> Generator[dict[str, str], None, None]:
    """Provide mock environment variables for testing."""
    env_vars = {
        "INCLUDE_URL_CACHE_DIR": str(temp_dir / "env_cache"),
        "INCLUDE_URL_NAMESPACE": "test-crate",
        "LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, env_vars, clear=False):
        clear_settings_cache()
        yield env_vars


@pytest.fixture
def mock_settings(mock_env_vars: dict[str, str]) -> Generator[Settings, None, None]:
    """Provide a Settings instance with mock configuration."""
    from include_url.config import get_settings

    settings = get_settings()
    settings.ensure_cache_dir()
    yield settings
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Reset the settings cache and default embedder around each test."""
    clear_settings_cache()
    set_embedder(None)
    yield
    clear_settings_cache()
    set_embedder(None)
