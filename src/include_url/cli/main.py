"""
CLI for include-url.

Commands:
    include-url fetch URL - Fetch a URL into the cache and print its path
    include-url json URL - Fetch a URL, check it is JSON, print its path
    include-url key URL - Print the cache key for a URL without fetching
    include-url config - Show current configuration
    include-url version - Print version
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from include_url import __version__
from include_url.config import Settings, clear_settings_cache, get_settings
from include_url.exceptions import ConfigurationError, IncludeUrlError
from include_url.keys import derive_cache_key
from include_url.logging import setup_logging
from include_url.store import ContentAddressedStore
from include_url.types import EncodingKind
from include_url.validator import validate_structured

app = typer.Typer(
    name="include-url",
    help="Fetch remote resources once into a content-addressed build cache",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)

NamespaceOption = Annotated[
    Optional[str],
    typer.Option("--namespace", "-n", help="Build-unit namespace for the cache key"),
]
CacheDirOption = Annotated[
    Optional[Path],
    typer.Option("--cache-dir", "-c", help="Cache root directory"),
]
BrotliOption = Annotated[
    bool,
    typer.Option("--brotli", "-b", help="Store the entry Brotli-compressed"),
]


def _load_settings() -> Settings:
    """Load settings, exiting with a readable message if they are invalid."""
    try:
        clear_settings_cache()
        settings = get_settings()
    except ConfigurationError as e:
        error_console.print(f"[red]Configuration is invalid:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    setup_logging(settings.LOG_LEVEL, log_file=settings.LOG_FILE)
    return settings


def _open_store(
    settings: Settings, namespace: str | None, cache_dir: Path | None
) -> ContentAddressedStore:
    return ContentAddressedStore(
        cache_dir if cache_dir is not None else settings.cache_dir,
        namespace or settings.namespace,
    )


@app.command()
def fetch(
    url: Annotated[str, typer.Argument(help="http(s) URL to fetch")],
    brotli: BrotliOption = False,
    namespace: NamespaceOption = None,
    cache_dir: CacheDirOption = None,
) -> None:
    """Fetch a URL into the cache (no-op on a hit) and print the entry path."""
    settings = _load_settings()
    encoding = EncodingKind.BROTLI if brotli else EncodingKind.NONE

    try:
        store = _open_store(settings, namespace, cache_dir)
        path = store.fetch_or_cache(url, encoding)
    except IncludeUrlError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(str(path), soft_wrap=True)


@app.command("json")
def json_(
    url: Annotated[str, typer.Argument(help="http(s) URL serving JSON")],
    namespace: NamespaceOption = None,
    cache_dir: CacheDirOption = None,
) -> None:
    """Fetch a URL, check the content is well-formed JSON, print the entry path."""
    settings = _load_settings()

    try:
        store = _open_store(settings, namespace, cache_dir)
        path = store.fetch_or_cache(url, EncodingKind.NONE)
        validate_structured(store.read(url, EncodingKind.NONE))
    except IncludeUrlError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(str(path), soft_wrap=True)


@app.command()
def key(
    url: Annotated[str, typer.Argument(help="URL as written at the call site")],
    brotli: BrotliOption = False,
    namespace: NamespaceOption = None,
) -> None:
    """Print the cache key for a URL. Never touches the network."""
    settings = _load_settings()
    encoding = EncodingKind.BROTLI if brotli else EncodingKind.NONE
    console.print(
        derive_cache_key(namespace or settings.namespace, url, encoding), soft_wrap=True
    )


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = _load_settings()

    table = Table(title="Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in settings.display().items():
        table.add_row(name, value)

    console.print()
    console.print(table)
    console.print()


@app.command()
def version() -> None:
    """Print the version number."""
    console.print(f"include-url version {__version__}")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
