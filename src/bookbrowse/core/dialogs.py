# ABOUTME: Open/closed state machines for the description, search, and settings dialogs.
# ABOUTME: Each dialog resets its displayed inputs on cancel according to its own contract.

from enum import Enum

from bookbrowse.catalog.types import Book
from bookbrowse.core.query import Query
from bookbrowse.core.theme import Theme, ThemeState
from bookbrowse.render.views import DialogKind


class DialogState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class Dialog:
    """Two-state modal surface. Starts closed and toggles indefinitely.

    Transition methods return True when the state changed and False when the
    call was a no-op (opening an open dialog, closing a closed one).
    """

    kind: DialogKind

    def __init__(self) -> None:
        self._state = DialogState.CLOSED

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is DialogState.OPEN

    def open(self) -> bool:
        if self.is_open:
            return False
        self._state = DialogState.OPEN
        self._on_open()
        return True

    def cancel(self) -> bool:
        if not self.is_open:
            return False
        self._state = DialogState.CLOSED
        self._on_cancel()
        return True

    def _close(self) -> None:
        self._state = DialogState.CLOSED

    def _on_open(self) -> None:
        pass

    def _on_cancel(self) -> None:
        pass


class DescriptionDialog(Dialog):
    """Shows one book's details. Opened by selecting a preview; no submit."""

    kind = DialogKind.DESCRIPTION

    def __init__(self) -> None:
        super().__init__()
        self._active: Book | None = None

    @property
    def active(self) -> Book | None:
        """The book currently shown, or None while closed."""
        return self._active

    def show(self, book: Book) -> bool:
        if self.is_open:
            return False
        self._active = book
        return self.open()

    def toggle(self, book: Book | None) -> bool:
        """Click semantics: any click while open closes, ignoring the target.

        While closed, a click that resolved to no book leaves the dialog closed.
        """
        if self.is_open:
            return self.close()
        if book is None:
            return False
        return self.show(book)

    def close(self) -> bool:
        return self.cancel()

    def _on_cancel(self) -> None:
        self._active = None


class SearchDialog(Dialog):
    """Search form overlay. Cancel clears the form without applying it."""

    kind = DialogKind.SEARCH

    def __init__(self) -> None:
        super().__init__()
        self._form = Query()
        self._focused_field: str | None = None

    @property
    def form(self) -> Query:
        """Values currently shown in the form inputs."""
        return self._form

    @property
    def focused_field(self) -> str | None:
        return self._focused_field

    def fill(self, **fields: str) -> None:
        """Edit displayed form values, e.g. ``fill(title_text="dune")``."""
        self._form = Query(
            title_text=fields.get("title_text", self._form.title_text),
            author_id=fields.get("author_id", self._form.author_id),
            genre_id=fields.get("genre_id", self._form.genre_id),
        )

    def submit(self, query: Query) -> Query:
        """Close the dialog and hand back the query to apply."""
        self._form = query
        self._focused_field = None
        self._close()
        return query

    def _on_open(self) -> None:
        self._focused_field = "title"

    def _on_cancel(self) -> None:
        self._form = Query()
        self._focused_field = None


class SettingsDialog(Dialog):
    """Theme picker. Cancel restores the displayed choice to the applied theme."""

    kind = DialogKind.SETTINGS

    def __init__(self, theme_state: ThemeState) -> None:
        super().__init__()
        self._theme_state = theme_state
        self._selection: str = theme_state.current.value

    @property
    def selection(self) -> str:
        """The value shown in the theme select input."""
        return self._selection

    def select(self, value: "str | Theme") -> None:
        self._selection = value.value if isinstance(value, Theme) else value

    def submit(self, value: "str | Theme") -> str:
        """Close the dialog and hand back the raw submitted value."""
        self.select(value)
        self._close()
        return self._selection

    def sync(self) -> None:
        """Show the applied theme in the select input."""
        self._selection = self._theme_state.current.value

    def _on_open(self) -> None:
        self.sync()

    def _on_cancel(self) -> None:
        self.sync()
