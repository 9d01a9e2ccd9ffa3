# ABOUTME: Unit tests for the Browser command handlers.
# ABOUTME: Validates state updates and render call ordering for each user action.

from typing import Any

import pytest

from bookbrowse.catalog import Catalog, DataError
from bookbrowse.core import Browser, Query, Theme
from bookbrowse.render.views import BookPreview, DialogKind, OptionKind
from tests.fixtures.sinks import RecordingSink


@pytest.fixture
def browser(catalog: Catalog, sink: RecordingSink) -> Browser:
    return Browser(catalog, sink, page_size=2, prefers_dark=False)


class TestConstruction:
    """Tests for Browser set-up."""

    @pytest.mark.parametrize("page_size", [0, -3])
    def test_bad_page_size_fails_fast(
        self, catalog: Catalog, sink: RecordingSink, page_size: int
    ) -> None:
        with pytest.raises(DataError, match="page_size"):
            Browser(catalog, sink, page_size=page_size)
        assert sink.calls == []


class TestStart:
    """Tests for Browser.start."""

    def test_start_call_order(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        assert sink.names() == [
            "render_book_window",
            "render_option_list",
            "render_option_list",
            "apply_theme_colors",
            "set_remaining_count",
        ]

    def test_start_renders_first_window(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        previews, append = sink.last("render_book_window")
        assert append is False
        assert previews == [
            BookPreview("b1", "Dune Messiah", "Frank Herbert", "https://covers.example.com/b1.jpg"),
            BookPreview("b2", "The Hobbit", "J.R.R. Tolkien", "https://covers.example.com/b2.jpg"),
        ]
        assert sink.last("set_remaining_count") == 3

    def test_option_lists_lead_with_any(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        genre_call, author_call = [p for n, p in sink.calls if n == "render_option_list"]
        assert genre_call[0] is OptionKind.GENRE
        assert genre_call[1][0] == ("any", "All Genres")
        assert author_call[0] is OptionKind.AUTHOR
        assert author_call[1] == [
            ("any", "All Authors"),
            ("herbert", "Frank Herbert"),
            ("tolkien", "J.R.R. Tolkien"),
            ("eco", "Umberto Eco"),
        ]

    def test_start_resolves_theme(self, catalog: Catalog, sink: RecordingSink) -> None:
        browser = Browser(catalog, sink, prefers_dark=True)
        assert browser.start() is Theme.NIGHT
        assert browser.settings.selection == "night"


class TestShowMore:
    """Tests for Browser.handle_show_more."""

    def test_appends_next_window(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        sink.clear()

        result = browser.handle_show_more()

        assert [b.id for b in result.window] == ["b3", "b4"]
        assert result.remaining == 1
        assert result.page_index == 1
        assert sink.names() == ["render_book_window", "set_remaining_count"]
        assert sink.last("render_book_window")[1] is True

    def test_noop_when_nothing_remains(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        browser.handle_show_more()
        browser.handle_show_more()
        sink.clear()

        result = browser.handle_show_more()

        assert result.window == ()
        assert result.page_index == 2
        assert sink.calls == []

    def test_forty_books(self, large_catalog: Catalog, sink: RecordingSink) -> None:
        browser = Browser(large_catalog, sink, page_size=36, prefers_dark=False)
        browser.start()
        assert len(browser.current_window()) == 36
        assert browser.remaining() == 4

        result = browser.handle_show_more()
        assert len(result.window) == 4
        assert result.remaining == 0


class TestSelection:
    """Tests for the description dialog handlers."""

    def test_selection_opens_description(self, browser: Browser, sink: RecordingSink) -> None:
        book = browser.handle_selection("b3")

        assert book is not None
        assert book.title == "The Name of the Rose"
        assert browser.description.is_open
        assert sink.names() == ["render_description", "set_dialog_open"]
        detail = sink.last("render_description")
        assert detail.subtitle == "Umberto Eco 1980"
        assert sink.last("set_dialog_open") == (DialogKind.DESCRIPTION, True)

    @pytest.mark.parametrize("book_id", ["missing", None, ""])
    def test_unknown_selection_is_ignored(
        self, browser: Browser, sink: RecordingSink, book_id: Any
    ) -> None:
        assert browser.handle_selection(book_id) is None
        assert not browser.description.is_open
        assert sink.calls == []

    def test_second_selection_closes(self, browser: Browser, sink: RecordingSink) -> None:
        browser.handle_selection("b3")
        sink.clear()

        assert browser.handle_selection("b1") is None
        assert not browser.description.is_open
        assert sink.calls == [("set_dialog_open", (DialogKind.DESCRIPTION, False))]

    def test_reopen_after_close_by_click(self, browser: Browser, sink: RecordingSink) -> None:
        browser.handle_selection("b3")
        browser.handle_selection("b3")
        assert browser.handle_selection("b4") is not None
        assert browser.description.active is not None
        assert browser.description.active.id == "b4"
        assert sink.last("set_dialog_open") == (DialogKind.DESCRIPTION, True)

    def test_close_request(self, browser: Browser, sink: RecordingSink) -> None:
        browser.handle_selection("b1")
        browser.handle_description_close()
        assert not browser.description.is_open
        assert sink.last("set_dialog_open") == (DialogKind.DESCRIPTION, False)

    def test_close_when_closed_is_silent(self, browser: Browser, sink: RecordingSink) -> None:
        browser.handle_description_close()
        assert sink.calls == []

    def test_detail_subtitle_has_author_and_year(self, browser: Browser) -> None:
        book = browser.catalog.get_by_id("b1")
        assert book is not None
        detail = browser.detail(book)
        assert detail.subtitle == "Frank Herbert 1969"


class TestSearch:
    """Tests for the search dialog handlers."""

    def test_toggle_opens_and_cancels(self, browser: Browser, sink: RecordingSink) -> None:
        browser.handle_search_toggle()
        assert browser.search.is_open
        browser.search.fill(title_text="rose")
        browser.handle_search_toggle()

        assert not browser.search.is_open
        assert browser.search.form == Query()
        assert sink.calls == [
            ("set_dialog_open", (DialogKind.SEARCH, True)),
            ("set_dialog_open", (DialogKind.SEARCH, False)),
        ]

    def test_cancel_does_not_apply_query(self, browser: Browser) -> None:
        browser.open_search()
        browser.search.fill(author_id="eco")
        browser.cancel_search()
        assert len(browser.match_set) == 5

    def test_submit_call_order(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        browser.handle_show_more()
        browser.open_search()
        sink.clear()

        result = browser.handle_query_submit({"title": "", "author": "eco", "genre": "any"})

        assert [b.id for b in result.match_set] == ["b3", "b4"]
        assert result.remaining == 0
        assert not result.empty_state
        assert browser.snapshot().page_index == 0
        assert sink.names() == ["render_book_window", "set_remaining_count", "set_dialog_open"]
        assert sink.last("render_book_window")[1] is False
        assert sink.last("set_dialog_open") == (DialogKind.SEARCH, False)

    def test_dune_query(self, browser: Browser) -> None:
        result = browser.handle_query_submit(Query(title_text="dune"))
        assert [b.title for b in result.match_set] == ["Dune Messiah"]

    def test_empty_result_signals_empty_state(
        self, browser: Browser, sink: RecordingSink
    ) -> None:
        browser.open_search()
        sink.clear()

        result = browser.handle_query_submit(Query(genre_id="scifi"))

        assert result.match_set == ()
        assert result.empty_state
        assert sink.names() == [
            "render_book_window",
            "set_remaining_count",
            "show_empty_state",
            "set_dialog_open",
        ]
        assert sink.last("show_empty_state") is True
        assert not browser.search.is_open

    def test_empty_state_persists_until_non_empty_result(
        self, browser: Browser, sink: RecordingSink
    ) -> None:
        browser.handle_query_submit(Query(genre_id="scifi"))
        sink.clear()

        browser.handle_query_submit(Query(title_text="nothing like this"))
        assert "show_empty_state" not in sink.names()
        assert browser.snapshot().empty_state

        browser.handle_query_submit(Query(title_text="rose"))
        assert sink.last("show_empty_state") is False
        assert not browser.snapshot().empty_state

    def test_submit_without_open_dialog_skips_visibility(
        self, browser: Browser, sink: RecordingSink
    ) -> None:
        browser.handle_query_submit(Query())
        assert "set_dialog_open" not in sink.names()


class TestSettings:
    """Tests for the settings dialog handlers."""

    def test_submit_applies_theme(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        browser.open_settings()
        sink.clear()

        assert browser.handle_theme_submit({"theme": "night"}) is Theme.NIGHT

        assert browser.theme is Theme.NIGHT
        assert browser.settings.selection == "night"
        assert sink.calls == [
            ("apply_theme_colors", ((255, 255, 255), (10, 10, 20))),
            ("set_dialog_open", (DialogKind.SETTINGS, False)),
        ]

    def test_cancel_restores_selection(self, browser: Browser, sink: RecordingSink) -> None:
        browser.start()
        browser.handle_settings_toggle()
        browser.settings.select("night")
        browser.handle_settings_toggle()

        assert not browser.settings.is_open
        assert browser.settings.selection == "day"
        assert browser.theme is Theme.DAY
        assert sink.last("set_dialog_open") == (DialogKind.SETTINGS, False)

    def test_unknown_value_falls_back_to_environment(self, catalog: Catalog) -> None:
        sink = RecordingSink()
        browser = Browser(catalog, sink, prefers_dark=True)
        browser.start()
        browser.handle_theme_submit("day")
        assert browser.handle_theme_submit("sepia") is Theme.NIGHT
        assert browser.settings.selection == "night"


class TestSnapshot:
    """Tests for Browser.snapshot."""

    def test_initial_snapshot(self, browser: Browser) -> None:
        browser.start()
        snap = browser.snapshot()
        assert snap.page_index == 0
        assert snap.remaining == 3
        assert snap.match_count == 5
        assert snap.theme is Theme.DAY
        assert not (snap.description_open or snap.search_open or snap.settings_open)
        assert snap.search_form == Query()
