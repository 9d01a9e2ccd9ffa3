# ABOUTME: Shared Click options and catalog loading for Bookbrowse CLI commands.
# ABOUTME: Provides --catalog and --page-size and turns DataError into a clean exit.

from pathlib import Path

import click
from rich.console import Console

from bookbrowse.catalog import CatalogSource, DataError, load_catalog
from bookbrowse.core import DEFAULT_PAGE_SIZE

DEFAULT_CATALOG_PATH = Path.home() / ".bookbrowse" / "catalog.json"

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="BOOKBROWSE_CATALOG",
    help=f"Path to the catalog JSON file (default: {DEFAULT_CATALOG_PATH})",
)

page_size_option = click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=None,
    help=f"Books per page (default: catalog's booksPerPage, else {DEFAULT_PAGE_SIZE}).",
)


def load_or_exit(
    catalog_path: Path | None, page_size: int | None, console: Console
) -> tuple[CatalogSource, int]:
    """Load the catalog or print the error and exit with status 1.

    Returns:
        The loaded source and the effective page size.
    """
    try:
        source = load_catalog(catalog_path or DEFAULT_CATALOG_PATH, page_size=page_size)
    except DataError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc
    return source, source.page_size or DEFAULT_PAGE_SIZE
