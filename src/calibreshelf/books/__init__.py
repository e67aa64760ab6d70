# ABOUTME: Book domain package: the projected LibraryBook model and display helpers.
# ABOUTME: Exports LibraryBook, SeriesPosition, and the formatting functions.

from calibreshelf.books.comments import comments_document
from calibreshelf.books.formatting import format_series_index
from calibreshelf.books.types import LibraryBook, SeriesPosition

__all__ = [
    "LibraryBook",
    "SeriesPosition",
    "comments_document",
    "format_series_index",
]
