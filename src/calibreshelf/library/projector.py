# ABOUTME: Projects a Calibre library's rows into immutable LibraryBook values.
# ABOUTME: Runs the book listing, then per-book author, series, file, and comments lookups.

import logging
from pathlib import Path

from calibreshelf.books.formatting import format_series_index
from calibreshelf.books.types import LibraryBook, SeriesPosition
from calibreshelf.library import queries
from calibreshelf.library.mapping import (
    BookRecord,
    row_to_author_record,
    row_to_book_record,
    row_to_comment_text,
    row_to_data_file,
    row_to_series_name,
)
from calibreshelf.library.repository import MetadataRepository, QueryError, open_repository

logger = logging.getLogger(__name__)

COVER_FILENAME = "cover.jpg"


def cover_path(library_root: Path, record: BookRecord) -> Path | None:
    """Where Calibre keeps the book's cover, or None if it has none.

    The file itself is never checked; loading it is up to the caller.
    """
    if not record.has_cover:
        return None
    return library_root / record.path / COVER_FILENAME


def _resolve_authors(repository: MetadataRepository, record: BookRecord) -> tuple[str, ...]:
    try:
        authors = repository.query(queries.BOOK_AUTHORS, row_to_author_record, (record.id,))
    except QueryError as exc:
        logger.warning("Author lookup failed for book %d: %s", record.id, exc)
        return ()
    return tuple(author.name for author in authors)


def _resolve_series(
    repository: MetadataRepository, record: BookRecord
) -> SeriesPosition | None:
    try:
        names = repository.query(queries.BOOK_SERIES, row_to_series_name, (record.id,))
    except QueryError as exc:
        logger.warning("Series lookup failed for book %d: %s", record.id, exc)
        return None
    if not names:
        return None
    return SeriesPosition(name=names[0], position=format_series_index(record.series_index))


def _resolve_file(repository: MetadataRepository, record: BookRecord) -> Path | None:
    """Path of the first stored format of a book.

    With several formats only one is returned, in whatever order SQLite
    yields the data rows.
    """
    try:
        files = repository.query(queries.BOOK_FILE, row_to_data_file, (record.id,))
    except QueryError as exc:
        logger.warning("File lookup failed for book %d: %s", record.id, exc)
        return None
    if not files:
        return None
    return repository.library_root / record.path / files[0].filename


def _resolve_comments(repository: MetadataRepository, record: BookRecord) -> str | None:
    try:
        texts = repository.query(queries.BOOK_COMMENTS, row_to_comment_text, (record.id,))
    except QueryError as exc:
        logger.warning("Comments lookup failed for book %d: %s", record.id, exc)
        return None
    return texts[0] if texts else None


def project_book(repository: MetadataRepository, record: BookRecord) -> LibraryBook:
    """Assemble one LibraryBook from a book row and its enrichment lookups.

    A failed lookup leaves only its own field empty.
    """
    return LibraryBook(
        id=record.id,
        title=record.title,
        author_list=_resolve_authors(repository, record),
        cover_path=cover_path(repository.library_root, record),
        file_path=_resolve_file(repository, record),
        comments=_resolve_comments(repository, record),
        series_position=_resolve_series(repository, record),
        custom_title_sort=record.title_sort,
        custom_author_sort=record.author_sort,
    )


def list_books(repository: MetadataRepository) -> list[LibraryBook]:
    """Return every book of the library, in the books table's row order.

    Args:
        repository: An open repository for the library.

    Returns:
        One LibraryBook per mappable row of the books table.

    Raises:
        QueryError: If the books table itself cannot be read.
    """
    records = repository.query(queries.BOOKS, row_to_book_record)
    books = [project_book(repository, record) for record in records]
    logger.debug("Projected %d book(s) from %s", len(books), repository.library_root)
    return books


def load_library(library_root: Path) -> list[LibraryBook]:
    """Open a library, project all of its books, and close it again.

    Raises:
        LibraryConnectionError: If the library's database cannot be opened.
        QueryError: If the books table cannot be read.
    """
    with open_repository(library_root) as repository:
        return list_books(repository)
