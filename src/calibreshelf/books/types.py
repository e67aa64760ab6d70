# ABOUTME: Domain types for a projected Calibre library.
# ABOUTME: LibraryBook is the contract handed to the CLI and any other front end.

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SeriesPosition:
    """A book's place in a named series, e.g. book "2.5" of "The Expanse"."""

    name: str
    position: str


@dataclass(frozen=True)
class LibraryBook:
    """One book of a Calibre library, fully resolved for display.

    Optional fields are None when the library has no value for them. The two
    sort keys are always strings: they fall back to values derived from the
    title and author list when Calibre stores no custom sort value.
    """

    id: int
    title: str
    author_list: tuple[str, ...] = ()
    cover_path: Path | None = None
    file_path: Path | None = None
    comments: str | None = None
    series_position: SeriesPosition | None = None
    custom_title_sort: str | None = None
    custom_author_sort: str | None = None

    def authors(self, separator: str = " & ") -> str:
        """Display string for the author list."""
        return separator.join(self.author_list)

    @property
    def sortable_title(self) -> str:
        if self.custom_title_sort is not None:
            return self.custom_title_sort
        return self.title

    @property
    def sortable_author_list(self) -> str:
        if self.custom_author_sort is not None:
            return self.custom_author_sort
        return ", ".join(self.author_list)
