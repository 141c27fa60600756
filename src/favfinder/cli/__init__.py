# ABOUTME: CLI package for favfinder, built on Click.
# ABOUTME: Defines the root command group, logging setup and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from favfinder.cli.commands import find_cmd, parse_cmd


@click.group()
@click.version_option(package_name="favfinder")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log requests and skipped icon sources to stderr.",
)
def cli(verbose: bool) -> None:
    """favfinder - find favicons for websites."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


cli.add_command(find_cmd.find)
cli.add_command(parse_cmd.parse)
