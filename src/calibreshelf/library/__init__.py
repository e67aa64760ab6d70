# ABOUTME: Public API for reading Calibre libraries.
# ABOUTME: Exports repository access, error types, records, and the projector.

from calibreshelf.library.mapping import AuthorRecord, BookRecord
from calibreshelf.library.projector import list_books, load_library
from calibreshelf.library.repository import (
    LibraryConnectionError,
    MetadataRepository,
    QueryError,
    metadata_db_path,
    open_repository,
)

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "LibraryConnectionError",
    "MetadataRepository",
    "QueryError",
    "list_books",
    "load_library",
    "metadata_db_path",
    "open_repository",
]
