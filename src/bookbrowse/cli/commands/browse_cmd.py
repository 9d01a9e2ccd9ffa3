# ABOUTME: The `bookbrowse browse` command for an interactive browsing session.
# ABOUTME: Starts the browser and hands control to the prompt loop.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.cli.options import catalog_option, load_or_exit, page_size_option
from bookbrowse.cli.session import BrowseSession
from bookbrowse.core import Browser


@click.command("browse")
@catalog_option
@page_size_option
def browse(catalog_path: Path | None, page_size: int | None) -> None:
    """Browse the catalog interactively: page, search, view, and switch themes."""
    console = Console()
    source, effective_page_size = load_or_exit(catalog_path, page_size, console)

    sink = RichSink(console)
    browser = Browser(source.catalog, sink, page_size=effective_page_size)
    browser.start()
    BrowseSession(browser, sink, console=console).run()
