# ABOUTME: Rendering of discovered icons for the terminal.
# ABOUTME: Prints a Rich table, or the serializable records as JSON.

import json

import click
from rich.console import Console
from rich.table import Table

from favfinder.discovery.types import Icon


def print_icons(console: Console, icons: list[Icon], *, as_json: bool = False) -> None:
    """Print icons in ranked order."""
    if as_json:
        click.echo(json.dumps([icon.to_dict() for icon in icons], indent=2))
        return

    if not icons:
        console.print("[yellow]No icons found.[/yellow]")
        return

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Size", justify="right")
    table.add_column("Type")
    table.add_column("URL", style="bold", overflow="fold")

    for index, icon in enumerate(icons, 1):
        size = f"{icon.width}x{icon.height}" if icon.has_size else "[dim]unknown[/dim]"
        table.add_row(str(index), size, icon.mime_type, icon.url)

    console.print(table)
    console.print(f"\n[dim]{len(icons)} icon(s)[/dim]")
