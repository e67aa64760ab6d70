# ABOUTME: Shared pytest fixtures for calibreshelf tests.
# ABOUTME: Provides empty and pre-populated Calibre library folders under tmp_path.

from collections.abc import Iterator
from pathlib import Path

import pytest

from tests.fixtures.library_builder import LibraryBuilder


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    """Path of a (not yet created) Calibre library folder."""
    return tmp_path / "Calibre Library"


@pytest.fixture
def library_builder(library_root: Path) -> Iterator[LibraryBuilder]:
    """A LibraryBuilder writing to library_root; committed and closed on teardown."""
    builder = LibraryBuilder(library_root)
    yield builder
    builder.close()


@pytest.fixture
def sample_library(library_root: Path) -> Path:
    """Create a small Calibre library with known contents.

    Books, in row order:
        1. Atomic Habits - no authors, no series, cover, no formats.
        2. Inkwell Tales - Rachel A. Rosen & Zilla Novikov, series
           "Found Family" #2.5, EPUB and MOBI, HTML comments.
        3. The Name of the Rose - Umberto Eco, custom sort values,
           series "Adso of Melk" #1, EPUB, cover.
    """
    builder = LibraryBuilder(library_root)

    builder.add_book("Atomic Habits", path="Author/Atomic Habits (1)", has_cover=True)

    tales = builder.add_book(
        "Inkwell Tales",
        path="Rachel A. Rosen/Inkwell Tales (2)",
        series_index=2.5,
    )
    builder.add_author(tales, "Rachel A. Rosen", "Rosen, Rachel A.")
    builder.add_author(tales, "Zilla Novikov", "Novikov, Zilla")
    builder.set_series(tales, "Found Family")
    builder.add_format(tales, "EPUB", "Inkwell Tales - Rachel A. Rosen")
    builder.add_format(tales, "MOBI", "Inkwell Tales - Rachel A. Rosen")
    builder.set_comments(tales, "<p>Two <strong>voices</strong>, one story.</p>")

    rose = builder.add_book(
        "The Name of the Rose",
        sort="Name of the Rose, The",
        author_sort="Eco, Umberto",
        path="Umberto Eco/The Name of the Rose (3)",
        has_cover=True,
    )
    builder.add_author(rose, "Umberto Eco", "Eco, Umberto")
    builder.set_series(rose, "Adso of Melk")
    builder.add_format(rose, "EPUB", "The Name of the Rose - Umberto Eco")

    builder.close()
    return library_root
