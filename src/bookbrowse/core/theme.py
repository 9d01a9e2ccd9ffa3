# ABOUTME: Day/night theme resolution and the process-wide theme state.
# ABOUTME: Picks the initial theme from the environment and emits colour pairs to the sink.

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from bookbrowse.render.sink import RenderingSink
from bookbrowse.render.views import RGB

logger = logging.getLogger(__name__)

COLOR_SCHEME_ENV = "BOOKBROWSE_COLOR_SCHEME"

# Background indexes of the 16-colour palette that read as dark.
_DARK_BACKGROUNDS = {"0", "1", "2", "3", "4", "5", "6", "8"}


class Theme(str, Enum):
    DAY = "day"
    NIGHT = "night"


@dataclass(frozen=True)
class ThemeColors:
    """The two surface colours a theme applies."""

    dark: RGB
    light: RGB


THEME_COLORS: dict[Theme, ThemeColors] = {
    Theme.DAY: ThemeColors(dark=(10, 10, 20), light=(255, 255, 255)),
    Theme.NIGHT: ThemeColors(dark=(255, 255, 255), light=(10, 10, 20)),
}


class ThemeState:
    """Currently applied theme. Committed through ThemeResolver.apply."""

    def __init__(self, current: Theme = Theme.DAY) -> None:
        self._current = current

    @property
    def current(self) -> Theme:
        return self._current

    def commit(self, theme: Theme) -> None:
        self._current = theme


def detect_prefers_dark(environ: Mapping[str, str] | None = None) -> bool:
    """Read the environment's colour-scheme preference.

    ``BOOKBROWSE_COLOR_SCHEME`` (``dark``/``light``) takes precedence, then the
    background component of the terminal's ``COLORFGBG``. Defaults to light.
    """
    env = os.environ if environ is None else environ

    scheme = env.get(COLOR_SCHEME_ENV, "").strip().lower()
    if scheme in ("dark", "light"):
        return scheme == "dark"

    colorfgbg = env.get("COLORFGBG", "")
    if colorfgbg:
        return colorfgbg.split(";")[-1].strip() in _DARK_BACKGROUNDS
    return False


class ThemeResolver:
    """Resolves, validates, and applies themes."""

    def __init__(
        self,
        sink: RenderingSink,
        state: ThemeState,
        *,
        prefers_dark: bool | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._sink = sink
        self._state = state
        self._prefers_dark = prefers_dark
        self._environ = environ

    @property
    def state(self) -> ThemeState:
        return self._state

    def default_theme(self) -> Theme:
        """Theme implied by the environment: night if dark is preferred."""
        prefers_dark = self._prefers_dark
        if prefers_dark is None:
            prefers_dark = detect_prefers_dark(self._environ)
        return Theme.NIGHT if prefers_dark else Theme.DAY

    def initialize(self) -> Theme:
        """Resolve the start-up theme from the environment and apply it."""
        theme = self.default_theme()
        self.apply(theme)
        return theme

    def resolve(self, value: "str | Theme") -> Theme:
        """Validate a submitted theme value.

        Unrecognised values fall back to the environment default.
        """
        if isinstance(value, Theme):
            return value
        try:
            return Theme(str(value).strip().lower())
        except ValueError:
            fallback = self.default_theme()
            logger.warning("Unknown theme %r, using %s", value, fallback.value)
            return fallback

    def apply(self, theme: Theme) -> None:
        colors = THEME_COLORS[theme]
        self._sink.apply_theme_colors(colors.dark, colors.light)
        self._state.commit(theme)
        logger.debug("Applied %s theme", theme.value)
