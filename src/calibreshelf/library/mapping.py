# ABOUTME: Converts resolved Calibre rows into typed records.
# ABOUTME: Row mappers raise KeyError or MissingValueError to have a row skipped.

from dataclasses import dataclass

from calibreshelf.library.repository import ResolvedRow

# Calibre's column default for books.series_index
DEFAULT_SERIES_INDEX = 1.0


@dataclass(frozen=True)
class BookRecord:
    """A raw row of Calibre's books table."""

    id: int
    title: str
    title_sort: str | None
    author_sort: str | None
    path: str
    has_cover: bool
    series_index: float


@dataclass(frozen=True)
class AuthorRecord:
    """A row of Calibre's authors table."""

    id: int
    name: str
    sort: str | None


@dataclass(frozen=True)
class DataFile:
    """A row of Calibre's data table: one stored format of a book."""

    format: str
    name: str

    @property
    def filename(self) -> str:
        """On-disk file name, e.g. 'Dune - Frank Herbert.epub'."""
        return f"{self.name}.{self.format.lower()}"


def row_to_book_record(row: ResolvedRow) -> BookRecord:
    """Convert a books row. id, title and path are required; the rest are optional."""
    series_index = row.get("series_index")
    return BookRecord(
        id=int(row.required("id")),
        title=row.required("title"),
        title_sort=row.get("sort"),
        author_sort=row.get("author_sort"),
        path=row.required("path"),
        has_cover=bool(row.get("has_cover")),
        series_index=DEFAULT_SERIES_INDEX if series_index is None else float(series_index),
    )


def row_to_author_record(row: ResolvedRow) -> AuthorRecord:
    return AuthorRecord(
        id=int(row.required("id")),
        name=row.required("name"),
        sort=row.get("sort"),
    )


def row_to_series_name(row: ResolvedRow) -> str:
    return row.required("name")


def row_to_data_file(row: ResolvedRow) -> DataFile:
    return DataFile(format=row.required("format"), name=row.required("name"))


def row_to_comment_text(row: ResolvedRow) -> str:
    return row.required("text")
