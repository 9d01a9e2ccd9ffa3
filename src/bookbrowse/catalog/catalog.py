# ABOUTME: The read-only catalog of books plus author and genre lookup tables.
# ABOUTME: Validates its input up front and fails fast with DataError.

from collections.abc import Mapping, Sequence

from bookbrowse.catalog.types import Authors, Book, Genres


class DataError(Exception):
    """Raised when the catalog input is missing or malformed."""


class Catalog:
    """Holds the session's books in source order along with author/genre names."""

    def __init__(
        self,
        books: Sequence[Book] | None,
        authors: Authors | None,
        genres: Genres | None,
    ) -> None:
        if books is None:
            raise DataError("Source required: no books supplied")
        if isinstance(books, (str, bytes, Mapping)) or not isinstance(books, Sequence):
            raise DataError(f"Books must be a sequence, got {type(books).__name__}")
        if len(books) == 0:
            raise DataError("Catalog must contain at least one book")
        if not isinstance(authors, Mapping):
            raise DataError("Authors must be a mapping of id to name")
        if not isinstance(genres, Mapping):
            raise DataError("Genres must be a mapping of id to name")

        seen: set[str] = set()
        for book in books:
            if not isinstance(book, Book):
                raise DataError(f"Expected Book, got {type(book).__name__}")
            if book.id in seen:
                raise DataError(f"Duplicate book id {book.id!r}")
            seen.add(book.id)
            if book.author_id not in authors:
                raise DataError(f"Book {book.id!r} references unknown author {book.author_id!r}")
            for genre_id in book.genre_ids:
                if genre_id not in genres:
                    raise DataError(f"Book {book.id!r} references unknown genre {genre_id!r}")

        self._books = tuple(books)
        self._authors = dict(authors)
        self._genres = dict(genres)

    def __len__(self) -> int:
        return len(self._books)

    def all_books(self) -> tuple[Book, ...]:
        """Return every book in source order."""
        return self._books

    def lookup_author(self, author_id: str) -> str:
        """Return the display name for an author id.

        Raises:
            KeyError: If the author id is unknown.
        """
        return self._authors[author_id]

    def lookup_genre(self, genre_id: str) -> str:
        """Return the display name for a genre id.

        Raises:
            KeyError: If the genre id is unknown.
        """
        return self._genres[genre_id]

    def authors(self) -> dict[str, str]:
        """Author id -> name, in source order."""
        return dict(self._authors)

    def genres(self) -> dict[str, str]:
        """Genre id -> name, in source order."""
        return dict(self._genres)

    def get_by_id(self, book_id: str) -> Book | None:
        """Find a book by id, scanning in source order."""
        for book in self._books:
            if book.id == book_id:
                return book
        return None
