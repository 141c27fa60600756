# ABOUTME: Shared Click options for favfinder CLI commands.
# ABOUTME: Source switches and icon filters, plus conversion into Finder keyword arguments.

from collections.abc import Callable
from typing import Any

import click

from favfinder.discovery import filters

_FINDER_OPTIONS = [
    click.option(
        "--no-manifest",
        is_flag=True,
        default=False,
        help="Do not read the web-app manifest.",
    ),
    click.option(
        "--no-well-known",
        is_flag=True,
        default=False,
        help="Do not probe /favicon.ico and /apple-touch-icon.png.",
    ),
    click.option(
        "-m",
        "--mime-type",
        "mime_types",
        multiple=True,
        help="Only keep icons of this MIME type (repeatable).",
    ),
    click.option("--png", "only_png", is_flag=True, default=False, help="Only keep PNG icons."),
    click.option("--ico", "only_ico", is_flag=True, default=False, help="Only keep ICO icons."),
    click.option(
        "--square",
        "only_square",
        is_flag=True,
        default=False,
        help="Only keep square icons (icons of unknown size are kept).",
    ),
    click.option(
        "--sized",
        "only_sized",
        is_flag=True,
        default=False,
        help="Only keep icons whose size is known.",
    ),
    click.option("--min-width", type=click.IntRange(min=0), default=None),
    click.option("--max-width", type=click.IntRange(min=0), default=None),
    click.option("--min-height", type=click.IntRange(min=0), default=None),
    click.option("--max-height", type=click.IntRange(min=0), default=None),
    click.option(
        "--json",
        "as_json",
        is_flag=True,
        default=False,
        help="Print icons as a JSON array instead of a table.",
    ),
]


def finder_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared source and filter options to a command."""
    for option in reversed(_FINDER_OPTIONS):
        fn = option(fn)
    return fn


def finder_kwargs(
    *,
    no_manifest: bool,
    no_well_known: bool,
    mime_types: tuple[str, ...],
    only_png: bool,
    only_ico: bool,
    only_square: bool,
    only_sized: bool,
    min_width: int | None,
    max_width: int | None,
    min_height: int | None,
    max_height: int | None,
) -> dict[str, Any]:
    """Translate parsed CLI options into Finder keyword arguments."""
    chain = []
    if only_png:
        chain.append(filters.only_png())
    if only_ico:
        chain.append(filters.only_ico())
    if only_square:
        chain.append(filters.only_square())
    if only_sized:
        chain.append(filters.ignore_no_size())
    return {
        "filters": chain,
        "mime_types": mime_types,
        "min_width": min_width,
        "max_width": max_width,
        "min_height": min_height,
        "max_height": max_height,
        "ignore_manifest": no_manifest,
        "ignore_well_known": no_well_known,
    }
