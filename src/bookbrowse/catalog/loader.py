# ABOUTME: Loads the catalog data set from a JSON document on disk.
# ABOUTME: Maps source records to Book instances and reports malformed input as DataError.

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any

from bookbrowse.catalog.catalog import Catalog, DataError
from bookbrowse.catalog.types import Book

logger = logging.getLogger(__name__)


@dataclass
class CatalogSource:
    """A loaded catalog plus the page size the data set asks for."""

    catalog: Catalog
    page_size: int | None = None


def parse_published(value: Any) -> date | None:
    """Parse an ISO-8601 date or datetime string into a date.

    Accepts a trailing ``Z`` for UTC timestamps. Empty values yield None.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise DataError(f"Published date must be a string, got {type(value).__name__}")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise DataError(f"Unparseable published date {value!r}") from exc


def row_to_book(row: Any) -> Book:
    """Convert a source record (dict) into a Book.

    Source records use the field names ``id, title, author, image,
    description, published, genres``.
    """
    if not isinstance(row, dict):
        raise DataError(f"Book record must be an object, got {type(row).__name__}")
    try:
        book_id = row["id"]
        title = row["title"]
        author_id = row["author"]
    except KeyError as exc:
        raise DataError(f"Book record missing required field {exc.args[0]!r}") from exc

    genres = row.get("genres") or []
    if not isinstance(genres, list):
        raise DataError(f"Genres for book {book_id!r} must be a list")

    return Book(
        id=str(book_id),
        title=str(title),
        author_id=str(author_id),
        image_url=row.get("image") or "",
        description=row.get("description") or "",
        published=parse_published(row.get("published")),
        genre_ids=tuple(str(g) for g in genres),
    )


def load_catalog(path: Path, page_size: int | None = None) -> CatalogSource:
    """Read and validate a catalog JSON document.

    The document is an object with ``books`` (list), ``authors`` and
    ``genres`` (id -> name objects) and an optional ``booksPerPage``.

    Args:
        path: Location of the JSON file.
        page_size: Overrides the document's ``booksPerPage`` when given.

    Returns:
        The validated catalog and effective page size (None if neither
        the caller nor the document set one).

    Raises:
        DataError: If the file is missing, unreadable, or malformed.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DataError(f"Cannot read catalog {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DataError(f"Catalog {path} is not valid UTF-8: {exc}") from exc

    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DataError(f"Catalog {path} is not valid JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise DataError(f"Catalog {path} must be a JSON object")

    books = document.get("books")
    if not isinstance(books, list):
        raise DataError("Catalog 'books' must be a list")

    if page_size is None:
        page_size = document.get("booksPerPage")
    if page_size is not None and (
        isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1
    ):
        raise DataError(f"Page size must be a positive integer, got {page_size!r}")

    catalog = Catalog(
        [row_to_book(row) for row in books],
        document.get("authors"),
        document.get("genres"),
    )
    logger.debug("Loaded %d books from %s", len(catalog), path)
    return CatalogSource(catalog=catalog, page_size=page_size)
