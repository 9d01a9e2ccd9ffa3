# ABOUTME: The `bookbrowse ls` command for listing the catalog page by page.
# ABOUTME: Shows the first window and optionally presses "show more" for later pages.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.cli.options import catalog_option, load_or_exit, page_size_option
from bookbrowse.core import Browser


@click.command("ls")
@catalog_option
@page_size_option
@click.option(
    "--pages",
    type=click.IntRange(min=1),
    default=1,
    help="Number of page windows to show (default 1).",
)
def ls(catalog_path: Path | None, page_size: int | None, pages: int) -> None:
    """List books in catalog order, one page window at a time."""
    console = Console()
    source, effective_page_size = load_or_exit(catalog_path, page_size, console)

    browser = Browser(source.catalog, RichSink(console), page_size=effective_page_size)
    browser.start()
    for _ in range(pages - 1):
        if not browser.handle_show_more().window:
            break

    console.print(f"\n[dim]{len(source.catalog)} book(s)[/dim]")
