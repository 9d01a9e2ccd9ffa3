# ABOUTME: RecordingSink, an in-memory RenderingSink for asserting render calls.
# ABOUTME: Stores every call in order so tests can check sequencing and payloads.

from collections.abc import Sequence
from typing import Any

from bookbrowse.render.views import RGB, BookDetail, BookPreview, DialogKind, OptionKind


class RecordingSink:
    """Implements RenderingSink by appending (method, payload) tuples to `calls`."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def render_book_window(self, previews: Sequence[BookPreview], *, append: bool) -> None:
        self.calls.append(("render_book_window", (list(previews), append)))

    def render_option_list(self, kind: OptionKind, entries: Sequence[tuple[str, str]]) -> None:
        self.calls.append(("render_option_list", (kind, list(entries))))

    def set_remaining_count(self, remaining: int) -> None:
        self.calls.append(("set_remaining_count", remaining))

    def set_dialog_open(self, dialog: DialogKind, is_open: bool) -> None:
        self.calls.append(("set_dialog_open", (dialog, is_open)))

    def show_empty_state(self, visible: bool) -> None:
        self.calls.append(("show_empty_state", visible))

    def apply_theme_colors(self, dark: RGB, light: RGB) -> None:
        self.calls.append(("apply_theme_colors", (dark, light)))

    def render_description(self, detail: BookDetail) -> None:
        self.calls.append(("render_description", detail))

    def names(self) -> list[str]:
        """Method names in call order."""
        return [name for name, _ in self.calls]

    def last(self, name: str) -> Any:
        """Payload of the most recent call to `name`."""
        for call_name, payload in reversed(self.calls):
            if call_name == name:
                return payload
        raise AssertionError(f"{name} was never called")

    def clear(self) -> None:
        self.calls.clear()
