# ABOUTME: Filter engine: matches catalog books against a title/author/genre query.
# ABOUTME: Predicates are ANDed and the result keeps catalog source order.

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from bookbrowse.catalog.catalog import Catalog
from bookbrowse.catalog.types import Book

logger = logging.getLogger(__name__)

ANY = "any"


@dataclass(frozen=True)
class Query:
    """A search submission. Defaults match every book."""

    title_text: str = ""
    author_id: str = ANY
    genre_id: str = ANY

    @classmethod
    def from_form(cls, form: Mapping[str, str | None]) -> "Query":
        """Build a query from submitted form fields.

        Accepts either the form names (``title``, ``author``, ``genre``) or the
        attribute names. Missing or None fields fall back to the defaults.
        """
        title = form.get("title_text", form.get("title"))
        author = form.get("author_id", form.get("author"))
        genre = form.get("genre_id", form.get("genre"))
        return cls(
            title_text=title if title is not None else "",
            author_id=author if author is not None else ANY,
            genre_id=genre if genre is not None else ANY,
        )


def title_matches(book: Book, title_text: str) -> bool:
    """Case-insensitive substring match; a blank needle matches everything."""
    if title_text.strip() == "":
        return True
    return title_text.casefold() in book.title.casefold()


def author_matches(book: Book, author_id: str) -> bool:
    return author_id == ANY or book.author_id == author_id


def genre_matches(book: Book, genre_id: str) -> bool:
    return genre_id == ANY or genre_id in book.genre_ids


def matches(book: Book, query: Query) -> bool:
    """True if the book satisfies every predicate of the query."""
    return (
        title_matches(book, query.title_text)
        and author_matches(book, query.author_id)
        and genre_matches(book, query.genre_id)
    )


class FilterEngine:
    """Owns the current match set and recomputes it per query."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._match_set: tuple[Book, ...] = catalog.all_books()

    @property
    def match_set(self) -> tuple[Book, ...]:
        """Result of the last applied query; the full catalog before any query."""
        return self._match_set

    def apply_query(self, query: Query) -> tuple[Book, ...]:
        """Filter the catalog and replace the match set with the result."""
        self._match_set = tuple(b for b in self._catalog.all_books() if matches(b, query))
        logger.debug("Query %r matched %d book(s)", query, len(self._match_set))
        return self._match_set
