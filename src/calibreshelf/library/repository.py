# ABOUTME: Read-only SQLite access to a Calibre library's metadata.db.
# ABOUTME: Opens and validates the database, runs queries, resolves columns by name.

import logging
import sqlite3
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType
from typing import Any, TypeVar

from calibreshelf.library import queries

logger = logging.getLogger(__name__)

METADATA_DB_NAME = "metadata.db"

T = TypeVar("T")


class LibraryConnectionError(ConnectionError):
    """Raised when a library's metadata.db is missing, unreadable, or not a Calibre database."""


class QueryError(Exception):
    """Raised when an SQL statement fails to prepare or execute."""


class MissingValueError(ValueError):
    """Raised by ResolvedRow.required when a required column holds NULL."""


class ResolvedRow:
    """One result row whose values are looked up by column name.

    The name-to-index map is built once per statement and shared by every row
    of that statement, so Calibre's column order never matters.
    """

    __slots__ = ("_columns", "_values")

    def __init__(self, values: Sequence[Any], columns: dict[str, int]) -> None:
        self._values = values
        self._columns = columns

    def __getitem__(self, name: str) -> Any:
        return self._values[self._columns[name]]

    def get(self, name: str, default: Any = None) -> Any:
        """Return the value of a column, or default if the column is absent."""
        index = self._columns.get(name)
        return default if index is None else self._values[index]

    def required(self, name: str) -> Any:
        """Return the value of a column that must be present and non-NULL.

        Raises:
            KeyError: If the statement returned no such column.
            MissingValueError: If the column is NULL in this row.
        """
        value = self[name]
        if value is None:
            raise MissingValueError(f"Column '{name}' is NULL")
        return value

    def keys(self) -> list[str]:
        return list(self._columns)


def metadata_db_path(library_root: Path) -> Path:
    """Location of the metadata database inside a library folder."""
    return library_root / METADATA_DB_NAME


def _resolve_columns(cursor: sqlite3.Cursor) -> dict[str, int]:
    """Map each result column name to its position. First occurrence wins."""
    columns: dict[str, int] = {}
    for index, description in enumerate(cursor.description or ()):
        columns.setdefault(description[0], index)
    return columns


class MetadataRepository:
    """Owns one read-only connection to a Calibre library's metadata.db."""

    def __init__(self, conn: sqlite3.Connection, library_root: Path) -> None:
        self._conn = conn
        self._library_root = library_root
        self._closed = False

    @classmethod
    def open(cls, library_root: Path) -> "MetadataRepository":
        """Open the metadata database of a Calibre library in read-only mode.

        Args:
            library_root: The library folder containing metadata.db.

        Returns:
            A repository that must be closed by the caller.

        Raises:
            LibraryConnectionError: If the database is missing, unreadable,
                not an SQLite file, or has no books table.
        """
        db_path = metadata_db_path(library_root)
        if not db_path.is_file():
            raise LibraryConnectionError(f"No Calibre database found at {db_path}")

        try:
            conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as exc:
            raise LibraryConnectionError(f"Unable to open {db_path}: {exc}") from exc

        try:
            tables = {row[0] for row in conn.execute(queries.LIST_TABLES).fetchall()}
        except sqlite3.Error as exc:
            conn.close()
            raise LibraryConnectionError(f"Unable to read {db_path}: {exc}") from exc

        missing = queries.REQUIRED_TABLES - tables
        if missing:
            conn.close()
            raise LibraryConnectionError(
                f"{db_path} is not a Calibre library (missing tables: {', '.join(sorted(missing))})"
            )

        logger.debug("Opened Calibre library at %s", library_root)
        return cls(conn, library_root)

    @property
    def library_root(self) -> Path:
        """The library folder this repository was opened for."""
        return self._library_root

    def query(
        self,
        sql: str,
        row_mapper: Callable[[ResolvedRow], T],
        params: Sequence[Any] = (),
    ) -> list[T]:
        """Run a read-only statement and map every row to a domain value.

        Rows for which row_mapper raises KeyError (missing column),
        MissingValueError (NULL in a required field), or ValueError / TypeError
        (a value of the wrong type) are skipped.

        Raises:
            QueryError: If the statement fails to prepare or execute.
        """
        try:
            cursor = self._conn.execute(sql, params)
            columns = _resolve_columns(cursor)
            rows = cursor.fetchall()
        except sqlite3.Error as exc:
            raise QueryError(f"Query failed: {exc}") from exc

        results: list[T] = []
        for values in rows:
            try:
                results.append(row_mapper(ResolvedRow(values, columns)))
            except (KeyError, ValueError, TypeError) as exc:
                logger.debug("Skipping unmappable row: %s", exc)
        return results

    def close(self) -> None:
        """Close the underlying connection. Safe to call more than once."""
        if not self._closed:
            self._conn.close()
            self._closed = True
            logger.debug("Closed Calibre library at %s", self._library_root)

    def __enter__(self) -> "MetadataRepository":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@contextmanager
def open_repository(library_root: Path) -> Iterator[MetadataRepository]:
    """Open a library's repository and close it on every exit path."""
    repository = MetadataRepository.open(library_root)
    try:
        yield repository
    finally:
        repository.close()
