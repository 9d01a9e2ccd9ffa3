# ABOUTME: View records and enums passed from the core to a rendering sink.
# ABOUTME: The sink never sees catalog internals, only these resolved values.

from dataclasses import dataclass
from enum import Enum

RGB = tuple[int, int, int]


class DialogKind(str, Enum):
    """The three dialogs of the browser."""

    DESCRIPTION = "description"
    SEARCH = "search"
    SETTINGS = "settings"


class OptionKind(str, Enum):
    """Which select list an option set belongs to."""

    AUTHOR = "author"
    GENRE = "genre"


@dataclass(frozen=True)
class BookPreview:
    """One entry in the book list: enough to draw a preview button."""

    id: str
    title: str
    author: str
    image_url: str


@dataclass(frozen=True)
class BookDetail:
    """Body of the description dialog."""

    id: str
    title: str
    subtitle: str
    description: str
    image_url: str
