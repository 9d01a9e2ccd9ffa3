# ABOUTME: Rich-backed RenderingSink that draws the browser to the terminal.
# ABOUTME: Keeps the row-number -> book id mapping used to resolve selections.

from collections.abc import Sequence

from rich.color import Color
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.table import Table

from bookbrowse.core.theme import THEME_COLORS, Theme
from bookbrowse.render.views import RGB, BookDetail, BookPreview, DialogKind, OptionKind


class RichSink:
    """Renders book windows, counts, and dialogs with Rich tables and panels."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()
        self._rows: list[BookPreview] = []
        self._options: dict[OptionKind, list[tuple[str, str]]] = {}
        self._open: dict[DialogKind, bool] = {kind: False for kind in DialogKind}
        self._remaining = 0
        self._empty = False
        colors = THEME_COLORS[Theme.DAY]
        self.apply_theme_colors(colors.dark, colors.light)

    @property
    def rows(self) -> list[BookPreview]:
        """Every preview currently listed, in display order."""
        return list(self._rows)

    @property
    def remaining(self) -> int:
        return self._remaining

    def is_open(self, dialog: DialogKind) -> bool:
        return self._open[dialog]

    def options(self, kind: OptionKind) -> list[tuple[str, str]]:
        return list(self._options.get(kind, []))

    def preview_at(self, row_number: int) -> BookPreview | None:
        """Look up a listed book by its 1-based row number."""
        if 1 <= row_number <= len(self._rows):
            return self._rows[row_number - 1]
        return None

    # --- RenderingSink ---

    def render_book_window(self, previews: Sequence[BookPreview], *, append: bool) -> None:
        if not append:
            self._rows = []
        start = len(self._rows) + 1
        self._rows.extend(previews)
        if not previews:
            if not append and self._empty:
                self._print_empty_message()
            return

        table = Table(header_style=self._header_style, border_style=self._border_style)
        table.add_column("#", style="dim", width=4)
        table.add_column("ID", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Author")
        for number, preview in enumerate(previews, start=start):
            table.add_row(
                str(number), escape(preview.id), escape(preview.title), escape(preview.author)
            )
        self._console.print(table)

    def render_option_list(self, kind: OptionKind, entries: Sequence[tuple[str, str]]) -> None:
        self._options[kind] = list(entries)

    def set_remaining_count(self, remaining: int) -> None:
        self._remaining = remaining
        if remaining > 0:
            self._console.print(f"[dim]Show more ({remaining})[/dim]")

    def set_dialog_open(self, dialog: DialogKind, is_open: bool) -> None:
        self._open[dialog] = is_open

    def show_empty_state(self, visible: bool) -> None:
        self._empty = visible
        if visible:
            self._print_empty_message()

    def apply_theme_colors(self, dark: RGB, light: RGB) -> None:
        self._header_style = Style(
            color=Color.from_rgb(*dark), bgcolor=Color.from_rgb(*light), bold=True
        )
        self._border_style = Style(color=Color.from_rgb(*dark))

    def render_description(self, detail: BookDetail) -> None:
        description = escape(detail.description) if detail.description else "[dim]No description.[/dim]"
        body = f"[bold]{escape(detail.subtitle)}[/bold]\n\n{description}"
        self._console.print(
            Panel(
                body,
                title=escape(detail.title),
                subtitle=escape(detail.id),
                border_style=self._border_style,
            )
        )

    def _print_empty_message(self) -> None:
        self._console.print(
            "[yellow]No results found. Your filters might be too narrow.[/yellow]"
        )

    # --- Extra output for list commands ---

    def print_options(self, kind: OptionKind) -> None:
        table = Table(header_style=self._header_style, border_style=self._border_style)
        table.add_column("ID", style="dim")
        table.add_column("Name", style="bold")
        for option_id, name in self._options.get(kind, []):
            table.add_row(escape(option_id), escape(name))
        self._console.print(table)
