# ABOUTME: The `bookbrowse info` command for showing a book's description.
# ABOUTME: Opens the description dialog for a single book by id.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.cli.options import catalog_option, load_or_exit
from bookbrowse.core import Browser


@click.command("info")
@click.argument("book_id")
@catalog_option
def info(book_id: str, catalog_path: Path | None) -> None:
    """Show title, author, year, and description for a book by ID."""
    console = Console()
    source, _ = load_or_exit(catalog_path, None, console)

    browser = Browser(source.catalog, RichSink(console))
    browser.initialize_theme()

    if browser.handle_selection(book_id) is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)
