# ABOUTME: Shared pytest fixtures for Bookbrowse tests.
# ABOUTME: Provides sample catalogs (small and 40-book), JSON catalog files, and a recording sink.

import json
from pathlib import Path

import pytest

from bookbrowse.catalog import Catalog
from bookbrowse.catalog.loader import row_to_book
from tests.fixtures.catalog_data import (
    AUTHORS,
    BOOK_ROWS,
    CATALOG_DOCUMENT,
    GENRES,
    large_catalog_document,
)
from tests.fixtures.sinks import RecordingSink


@pytest.fixture
def catalog() -> Catalog:
    """Five books by three authors; no book carries the 'scifi' genre."""
    return Catalog([row_to_book(row) for row in BOOK_ROWS], AUTHORS, GENRES)


@pytest.fixture
def large_catalog() -> Catalog:
    """Forty generated books, enough to span two 36-book pages."""
    document = large_catalog_document()
    return Catalog([row_to_book(row) for row in document["books"]], AUTHORS, GENRES)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    """The five-book catalog written as JSON (booksPerPage = 2)."""
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(CATALOG_DOCUMENT))
    return path


@pytest.fixture
def large_catalog_file(tmp_path: Path) -> Path:
    """The forty-book catalog written as JSON (booksPerPage = 36)."""
    path = tmp_path / "large.json"
    path.write_text(json.dumps(large_catalog_document()))
    return path
