# ABOUTME: Browser core: filtering, pagination, dialog state machines, and theming.
# ABOUTME: Exports the Browser command handlers and the components they compose.

from bookbrowse.core.browser import Browser, BrowserSnapshot, PageResult, QueryResult
from bookbrowse.core.dialogs import (
    DescriptionDialog,
    Dialog,
    DialogState,
    SearchDialog,
    SettingsDialog,
)
from bookbrowse.core.paginator import DEFAULT_PAGE_SIZE, Paginator
from bookbrowse.core.query import ANY, FilterEngine, Query
from bookbrowse.core.theme import THEME_COLORS, Theme, ThemeColors, ThemeResolver, ThemeState

__all__ = [
    "ANY",
    "DEFAULT_PAGE_SIZE",
    "THEME_COLORS",
    "Browser",
    "BrowserSnapshot",
    "DescriptionDialog",
    "Dialog",
    "DialogState",
    "FilterEngine",
    "PageResult",
    "Paginator",
    "Query",
    "QueryResult",
    "SearchDialog",
    "SettingsDialog",
    "Theme",
    "ThemeColors",
    "ThemeResolver",
    "ThemeState",
]
