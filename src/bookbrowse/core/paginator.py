# ABOUTME: Page-window slicing over the current match set.
# ABOUTME: Tracks the page index and reports how many books remain unshown.

import logging
from collections.abc import Sequence

from bookbrowse.catalog.catalog import DataError
from bookbrowse.catalog.types import Book

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 36


class Paginator:
    """Walks a match set one fixed-size window at a time.

    Successive windows partition the match set in order with no overlap.
    Out-of-range pages produce empty windows rather than errors.
    """

    def __init__(self, match_set: Sequence[Book], page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise DataError(f"page_size must be a positive integer, got {page_size!r}")
        self._match_set = tuple(match_set)
        self._page_size = page_size
        self._page_index = 0

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def match_set(self) -> tuple[Book, ...]:
        return self._match_set

    @property
    def total(self) -> int:
        return len(self._match_set)

    def reset(self) -> None:
        self._page_index = 0

    def replace(self, match_set: Sequence[Book]) -> None:
        """Swap in a new match set and go back to the first page."""
        self._match_set = tuple(match_set)
        self.reset()

    def current_window(self) -> tuple[Book, ...]:
        start = self._page_index * self._page_size
        return self._match_set[start : start + self._page_size]

    def advance(self) -> tuple[Book, ...]:
        """Move to the next page and return its window."""
        self._page_index += 1
        logger.debug("Advanced to page %d", self._page_index)
        return self.current_window()

    def remaining(self) -> int:
        """Books after the current window; never negative."""
        return max(0, len(self._match_set) - (self._page_index + 1) * self._page_size)

    def has_more(self) -> bool:
        return self.remaining() > 0
