# ABOUTME: Core data structures for the book catalog.
# ABOUTME: Book is immutable for the session; authors and genres are id -> name tables.

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date

Authors = Mapping[str, str]
Genres = Mapping[str, str]


@dataclass(frozen=True)
class Book:
    """A single catalog entry.

    Created once when the catalog is loaded and never mutated afterwards.
    ``author_id`` keys into the authors table and every ``genre_ids`` entry
    keys into the genres table; the Catalog enforces both on construction.
    """

    id: str
    title: str
    author_id: str
    image_url: str = ""
    description: str = ""
    published: date | None = None
    genre_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def published_year(self) -> int | None:
        """Year of publication, if known."""
        return self.published.year if self.published else None
