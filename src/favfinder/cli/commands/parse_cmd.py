# ABOUTME: The `favfinder parse` command for finding icons in a saved HTML file.
# ABOUTME: Resolves references against an optional base URL; network sources need that base.

from pathlib import Path
from typing import Any

import click
from rich.console import Console

from favfinder.cli.options import finder_kwargs, finder_options
from favfinder.cli.output import print_icons
from favfinder.discovery.finder import Finder
from favfinder.discovery.html_parser import DocumentParseError
from favfinder.discovery.urls import InvalidURLError

console = Console()


def _create_finder(**options: Any) -> Finder:
    """Create a Finder backed by the default HTTP client."""
    return Finder(**options)


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-b",
    "--base-url",
    default=None,
    help="URL the HTML was retrieved from, used to resolve relative references.",
)
@finder_options
def parse(path: Path, base_url: str | None, as_json: bool, **options: Any) -> None:
    """Find the favicons declared in the HTML file at PATH."""
    finder = _create_finder(**finder_kwargs(**options))
    try:
        with path.open("rb") as markup:
            icons = finder.find_reader(markup, base_url)
    except (InvalidURLError, DocumentParseError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    print_icons(console, icons, as_json=as_json)
