# ABOUTME: The `bookbrowse search` command for filtering the catalog.
# ABOUTME: Matches title text, author id, and genre id, then pages through the results.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.cli.options import catalog_option, load_or_exit, page_size_option
from bookbrowse.core import ANY, Browser, Query


@click.command("search")
@click.option("--title", "title_text", default="", help="Case-insensitive title substring.")
@click.option("--author", "author_id", default=ANY, help="Author id (see `bookbrowse authors`).")
@click.option("--genre", "genre_id", default=ANY, help="Genre id (see `bookbrowse genres`).")
@click.option(
    "--pages",
    type=click.IntRange(min=1),
    default=1,
    help="Number of result pages to show (default 1).",
)
@catalog_option
@page_size_option
def search(
    title_text: str,
    author_id: str,
    genre_id: str,
    pages: int,
    catalog_path: Path | None,
    page_size: int | None,
) -> None:
    """Search the catalog by title, author, and genre."""
    console = Console()
    source, effective_page_size = load_or_exit(catalog_path, page_size, console)

    browser = Browser(source.catalog, RichSink(console), page_size=effective_page_size)
    browser.initialize_theme()
    result = browser.handle_query_submit(
        Query(title_text=title_text, author_id=author_id, genre_id=genre_id)
    )
    if result.empty_state:
        return

    for _ in range(pages - 1):
        if not browser.handle_show_more().window:
            break

    console.print(f"\n[dim]{len(result.match_set)} result(s)[/dim]")
