# ABOUTME: Browser session: synchronous command handlers for every user action.
# ABOUTME: Updates filter, page, dialog, and theme state, then drives the rendering sink.

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from bookbrowse.catalog.catalog import Catalog
from bookbrowse.catalog.types import Book
from bookbrowse.core.dialogs import DescriptionDialog, SearchDialog, SettingsDialog
from bookbrowse.core.paginator import DEFAULT_PAGE_SIZE, Paginator
from bookbrowse.core.query import ANY, FilterEngine, Query
from bookbrowse.core.theme import Theme, ThemeResolver, ThemeState
from bookbrowse.render.sink import RenderingSink
from bookbrowse.render.views import BookDetail, BookPreview, DialogKind, OptionKind

logger = logging.getLogger(__name__)

_ANY_LABELS = {
    OptionKind.AUTHOR: "All Authors",
    OptionKind.GENRE: "All Genres",
}


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a search submission."""

    match_set: tuple[Book, ...]
    window: tuple[Book, ...]
    remaining: int
    empty_state: bool


@dataclass(frozen=True)
class PageResult:
    """Outcome of a "show more" request."""

    window: tuple[Book, ...]
    remaining: int
    page_index: int


@dataclass(frozen=True)
class BrowserSnapshot:
    """Observable state of a browser session at one point in time."""

    page_index: int
    remaining: int
    match_count: int
    theme: Theme
    empty_state: bool
    description_open: bool
    search_open: bool
    settings_open: bool
    settings_selection: str
    search_form: Query


class Browser:
    """Owns the browsing state and exposes one handler per user action.

    The caller (a CLI or UI harness) wires input events to these handlers.
    Each handler updates state first, then issues render calls in the order
    window, remaining count, empty-state, dialog visibility.
    """

    def __init__(
        self,
        catalog: Catalog,
        sink: RenderingSink,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        prefers_dark: bool | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._catalog = catalog
        self._sink = sink
        self._engine = FilterEngine(catalog)
        self._paginator = Paginator(self._engine.match_set, page_size)
        self._theme_state = ThemeState()
        self._theme = ThemeResolver(
            sink, self._theme_state, prefers_dark=prefers_dark, environ=environ
        )
        self._description = DescriptionDialog()
        self._search = SearchDialog()
        self._settings = SettingsDialog(self._theme_state)
        self._empty_state = False

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def match_set(self) -> tuple[Book, ...]:
        return self._engine.match_set

    @property
    def theme(self) -> Theme:
        return self._theme_state.current

    @property
    def description(self) -> DescriptionDialog:
        return self._description

    @property
    def search(self) -> SearchDialog:
        return self._search

    @property
    def settings(self) -> SettingsDialog:
        return self._settings

    def current_window(self) -> tuple[Book, ...]:
        return self._paginator.current_window()

    def remaining(self) -> int:
        return self._paginator.remaining()

    # --- View helpers ---

    def preview(self, book: Book) -> BookPreview:
        return BookPreview(
            id=book.id,
            title=book.title,
            author=self._catalog.lookup_author(book.author_id),
            image_url=book.image_url,
        )

    def detail(self, book: Book) -> BookDetail:
        """Description dialog body; subtitle is "<author> <year>"."""
        author = self._catalog.lookup_author(book.author_id)
        year = book.published_year
        subtitle = f"{author} {year}" if year is not None else author
        return BookDetail(
            id=book.id,
            title=book.title,
            subtitle=subtitle,
            description=book.description,
            image_url=book.image_url,
        )

    def option_entries(self, kind: OptionKind) -> list[tuple[str, str]]:
        """Select-list entries: the "any" choice followed by the catalog's in source order."""
        table = self._catalog.authors() if kind is OptionKind.AUTHOR else self._catalog.genres()
        return [(ANY, _ANY_LABELS[kind]), *table.items()]

    def _render_window(self, window: tuple[Book, ...], *, append: bool) -> None:
        self._sink.render_book_window([self.preview(b) for b in window], append=append)

    # --- Start-up ---

    def initialize_theme(self) -> Theme:
        """Apply the environment-preferred theme and show it in the settings picker."""
        theme = self._theme.initialize()
        self._settings.sync()
        return theme

    def start(self) -> Theme:
        """Render the first page, both option lists, the initial theme, and the count."""
        self._render_window(self._paginator.current_window(), append=False)
        self._sink.render_option_list(OptionKind.GENRE, self.option_entries(OptionKind.GENRE))
        self._sink.render_option_list(OptionKind.AUTHOR, self.option_entries(OptionKind.AUTHOR))
        theme = self.initialize_theme()
        self._sink.set_remaining_count(self._paginator.remaining())
        return theme

    # --- Pagination ---

    def handle_show_more(self) -> PageResult:
        """Append the next page window. No-op once nothing remains."""
        if not self._paginator.has_more():
            logger.debug("Show more requested with nothing remaining")
            return PageResult(window=(), remaining=0, page_index=self._paginator.page_index)

        window = self._paginator.advance()
        remaining = self._paginator.remaining()
        self._render_window(window, append=True)
        self._sink.set_remaining_count(remaining)
        return PageResult(window=window, remaining=remaining, page_index=self._paginator.page_index)

    # --- Description dialog ---

    def resolve_selection(self, book_id: str | None) -> Book | None:
        if book_id is None:
            return None
        return self._catalog.get_by_id(book_id)

    def handle_selection(self, book_id: str | None) -> Book | None:
        """Toggle the description dialog from a click on a book preview.

        While the dialog is open any click closes it. While closed, an id that
        does not resolve to a book is ignored.

        Returns:
            The book now shown, or None if the dialog is closed afterwards.
        """
        was_open = self._description.is_open
        book = None if was_open else self.resolve_selection(book_id)

        if not self._description.toggle(book):
            logger.debug("Selection %r did not resolve to a book", book_id)
            return None
        if was_open:
            self._sink.set_dialog_open(DialogKind.DESCRIPTION, False)
            return None

        assert book is not None
        self._sink.render_description(self.detail(book))
        self._sink.set_dialog_open(DialogKind.DESCRIPTION, True)
        return book

    def handle_description_close(self) -> None:
        if self._description.close():
            self._sink.set_dialog_open(DialogKind.DESCRIPTION, False)

    # --- Search dialog ---

    def open_search(self) -> None:
        if self._search.open():
            self._sink.set_dialog_open(DialogKind.SEARCH, True)

    def cancel_search(self) -> None:
        """Close without searching and clear the form."""
        if self._search.cancel():
            self._sink.set_dialog_open(DialogKind.SEARCH, False)

    def handle_search_toggle(self) -> None:
        if self._search.is_open:
            self.cancel_search()
        else:
            self.open_search()

    def handle_query_submit(self, payload: "Query | Mapping[str, str | None]") -> QueryResult:
        """Apply a search, reset paging, and re-render from the first window.

        The empty-state indicator is raised on an empty result and only
        cleared by a later non-empty one.
        """
        query = payload if isinstance(payload, Query) else Query.from_form(payload)
        was_open = self._search.is_open
        self._search.submit(query)

        match_set = self._engine.apply_query(query)
        self._paginator.replace(match_set)
        window = self._paginator.current_window()
        remaining = self._paginator.remaining()
        empty = not match_set
        empty_changed = empty != self._empty_state
        self._empty_state = empty

        self._render_window(window, append=False)
        self._sink.set_remaining_count(remaining)
        if empty_changed:
            self._sink.show_empty_state(empty)
        if was_open:
            self._sink.set_dialog_open(DialogKind.SEARCH, False)

        logger.debug("Search returned %d match(es), %d remaining", len(match_set), remaining)
        return QueryResult(
            match_set=match_set, window=window, remaining=remaining, empty_state=empty
        )

    # --- Settings dialog ---

    def open_settings(self) -> None:
        if self._settings.open():
            self._sink.set_dialog_open(DialogKind.SETTINGS, True)

    def cancel_settings(self) -> None:
        """Close without changing the theme; the picker reverts to the applied theme."""
        if self._settings.cancel():
            self._sink.set_dialog_open(DialogKind.SETTINGS, False)

    def handle_settings_toggle(self) -> None:
        if self._settings.is_open:
            self.cancel_settings()
        else:
            self.open_settings()

    def handle_theme_submit(self, payload: "str | Theme | Mapping[str, str]") -> Theme:
        """Validate and apply a submitted theme, then close the settings dialog."""
        value = payload.get("theme", "") if isinstance(payload, Mapping) else payload
        was_open = self._settings.is_open
        raw = self._settings.submit(value)

        theme = self._theme.resolve(raw)
        self._theme.apply(theme)
        self._settings.select(theme)

        if was_open:
            self._sink.set_dialog_open(DialogKind.SETTINGS, False)
        return theme

    def snapshot(self) -> BrowserSnapshot:
        return BrowserSnapshot(
            page_index=self._paginator.page_index,
            remaining=self._paginator.remaining(),
            match_count=self._paginator.total,
            theme=self._theme_state.current,
            empty_state=self._empty_state,
            description_open=self._description.is_open,
            search_open=self._search.is_open,
            settings_open=self._settings.is_open,
            settings_selection=self._settings.selection,
            search_form=self._search.form,
        )
