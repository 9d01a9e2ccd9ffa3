# ABOUTME: Public API for the catalog layer.
# ABOUTME: Exports the Book type, the Catalog holder, DataError, and the JSON loader.

from bookbrowse.catalog.catalog import Catalog, DataError
from bookbrowse.catalog.loader import CatalogSource, load_catalog
from bookbrowse.catalog.types import Book

__all__ = [
    "Book",
    "Catalog",
    "CatalogSource",
    "DataError",
    "load_catalog",
]
