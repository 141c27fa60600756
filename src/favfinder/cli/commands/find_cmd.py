# ABOUTME: The `favfinder find` command for discovering the icons of a web page.
# ABOUTME: Retrieves the page, its manifest and well-known paths, then prints ranked icons.

from typing import Any

import click
from rich.console import Console

from favfinder.cli.options import finder_kwargs, finder_options
from favfinder.cli.output import print_icons
from favfinder.discovery.finder import Finder
from favfinder.discovery.html_parser import DocumentParseError
from favfinder.discovery.http import DEFAULT_TIMEOUT, FaviconHttpClient, IconFetchError
from favfinder.discovery.urls import InvalidURLError

console = Console()


def _create_finder(*, timeout: float, proxy: str | None, **options: Any) -> Finder:
    """Create a Finder backed by the default HTTP client."""
    http_client = FaviconHttpClient(timeout=timeout, proxy=proxy)
    return Finder(http_client=http_client, **options)


@click.command()
@click.argument("url")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0.1),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Seconds to wait for each HTTP request.",
)
@click.option("--proxy", default=None, help="Proxy URL for all requests.")
@finder_options
def find(url: str, timeout: float, proxy: str | None, as_json: bool, **options: Any) -> None:
    """Find the favicons of the web page at URL."""
    finder = _create_finder(timeout=timeout, proxy=proxy, **finder_kwargs(**options))
    try:
        icons = finder.find(url)
    except (InvalidURLError, IconFetchError, DocumentParseError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    print_icons(console, icons, as_json=as_json)
