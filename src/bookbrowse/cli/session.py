# ABOUTME: Interactive browse session driving the Browser from terminal prompts.
# ABOUTME: Maps typed commands to show-more, selection, search, and settings handlers.

import click
from rich.console import Console

from bookbrowse.cli.console_sink import RichSink
from bookbrowse.core import ANY, Browser, Theme
from bookbrowse.render.views import OptionKind


class BrowseSession:
    """Prompt loop over a started Browser.

    Selections are made by row number; the RichSink owns the mapping from
    row number to book id.
    """

    def __init__(self, browser: Browser, sink: RichSink, *, console: Console | None = None) -> None:
        self._browser = browser
        self._sink = sink
        self._console = console or Console()

    def run(self) -> None:
        """Loop until the user quits."""
        while True:
            prompt_parts = "[m] More  [v<N>] View  [s] Search  [t] Theme  [q] Quit"
            choice = click.prompt(prompt_parts, type=str, default="q").strip().lower()

            if choice == "q":
                return
            if choice == "m":
                self._show_more()
                continue
            if choice == "s":
                self._search()
                continue
            if choice == "t":
                self._settings()
                continue
            if choice.startswith("v"):
                self._view(choice[1:].strip())

    def _show_more(self) -> None:
        result = self._browser.handle_show_more()
        if not result.window:
            self._console.print("[dim]Nothing more to show.[/dim]")

    def _view(self, row: str) -> None:
        try:
            preview = self._sink.preview_at(int(row))
        except ValueError:
            preview = None

        book = self._browser.handle_selection(preview.id if preview else None)
        if book is None:
            return

        click.prompt("[c] Close", type=str, default="c")
        self._browser.handle_description_close()

    def _choose_option(self, kind: OptionKind, label: str) -> str:
        ids = [option_id for option_id, _ in self._sink.options(kind)]
        return click.prompt(label, type=click.Choice(ids), default=ANY, show_choices=False)

    def _search(self) -> None:
        browser = self._browser
        browser.open_search()

        title = click.prompt("Title", type=str, default="", show_default=False)
        browser.search.fill(title_text=title)
        author = self._choose_option(OptionKind.AUTHOR, "Author id")
        browser.search.fill(author_id=author)
        genre = self._choose_option(OptionKind.GENRE, "Genre id")
        browser.search.fill(genre_id=genre)

        action = click.prompt("[enter] Search  [c] Cancel", type=str, default="", show_default=False)
        if action.strip().lower() == "c":
            browser.cancel_search()
            return

        result = browser.handle_query_submit(browser.search.form)
        self._console.print(f"\n[dim]{len(result.match_set)} result(s)[/dim]")

    def _settings(self) -> None:
        browser = self._browser
        browser.open_settings()

        choices = [theme.value for theme in Theme]
        value = click.prompt(
            f"Theme [{'/'.join(choices)}] or [c] Cancel",
            type=str,
            default=browser.settings.selection,
        )
        if value.strip().lower() == "c":
            browser.cancel_settings()
            return

        theme = browser.handle_theme_submit({"theme": value})
        self._console.print(f"Theme set to [bold]{theme.value}[/bold].")
