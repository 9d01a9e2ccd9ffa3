# ABOUTME: RenderingSink protocol defining what the core asks the presentation layer to draw.
# ABOUTME: Any front end (Rich console, test recorder, GUI) implements this.

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from bookbrowse.render.views import RGB, BookDetail, BookPreview, DialogKind, OptionKind


@runtime_checkable
class RenderingSink(Protocol):
    """Protocol for the presentation layer.

    The core calls out to the sink, never the reverse. Within a single user
    action the calls arrive in the order: book window, remaining count,
    empty-state indicator, dialog visibility.
    """

    def render_book_window(self, previews: Sequence[BookPreview], *, append: bool) -> None: ...

    def render_option_list(self, kind: OptionKind, entries: Sequence[tuple[str, str]]) -> None: ...

    def set_remaining_count(self, remaining: int) -> None: ...

    def set_dialog_open(self, dialog: DialogKind, is_open: bool) -> None: ...

    def show_empty_state(self, visible: bool) -> None: ...

    def apply_theme_colors(self, dark: RGB, light: RGB) -> None: ...

    def render_description(self, detail: BookDetail) -> None: ...
