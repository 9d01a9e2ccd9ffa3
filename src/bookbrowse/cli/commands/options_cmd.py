# ABOUTME: The `bookbrowse authors` and `bookbrowse genres` commands.
# ABOUTME: List the ids accepted by the search command's --author and --genre options.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.cli.options import catalog_option, load_or_exit
from bookbrowse.core import Browser
from bookbrowse.render.views import OptionKind


def _print_options(kind: OptionKind, catalog_path: Path | None) -> None:
    console = Console()
    source, _ = load_or_exit(catalog_path, None, console)

    sink = RichSink(console)
    browser = Browser(source.catalog, sink)
    browser.initialize_theme()
    sink.render_option_list(kind, browser.option_entries(kind))
    sink.print_options(kind)


@click.command("authors")
@catalog_option
def authors(catalog_path: Path | None) -> None:
    """List author ids and names."""
    _print_options(OptionKind.AUTHOR, catalog_path)


@click.command("genres")
@catalog_option
def genres(catalog_path: Path | None) -> None:
    """List genre ids and names."""
    _print_options(OptionKind.GENRE, catalog_path)
