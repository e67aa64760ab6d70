# ABOUTME: Unit tests for Calibre row mappers.
# ABOUTME: Validates required/optional column handling and record construction.

import pytest

from calibreshelf.library.mapping import (
    DEFAULT_SERIES_INDEX,
    AuthorRecord,
    BookRecord,
    DataFile,
    row_to_author_record,
    row_to_book_record,
    row_to_comment_text,
    row_to_data_file,
    row_to_series_name,
)
from calibreshelf.library.repository import MissingValueError, ResolvedRow


def _row(**values: object) -> ResolvedRow:
    """Build a ResolvedRow from keyword arguments, in argument order."""
    return ResolvedRow(tuple(values.values()), {name: i for i, name in enumerate(values)})


class TestRowToBookRecord:
    """Tests for row_to_book_record."""

    def test_full_row(self) -> None:
        """All books columns map onto BookRecord fields."""
        row = _row(
            id=3, title="The Name of the Rose", sort="Name of the Rose, The",
            author_sort="Eco, Umberto", path="Umberto Eco/The Name of the Rose (3)",
            has_cover=1, series_index=2.0, uuid="ignored",
        )
        assert row_to_book_record(row) == BookRecord(
            id=3,
            title="The Name of the Rose",
            title_sort="Name of the Rose, The",
            author_sort="Eco, Umberto",
            path="Umberto Eco/The Name of the Rose (3)",
            has_cover=True,
            series_index=2.0,
        )

    def test_optional_columns_may_be_missing(self) -> None:
        """Older schemas without sort columns still map."""
        record = row_to_book_record(_row(id=1, title="Dune", path="Frank Herbert/Dune (1)"))
        assert record.title_sort is None
        assert record.author_sort is None
        assert record.has_cover is False
        assert record.series_index == DEFAULT_SERIES_INDEX

    def test_null_series_index_uses_calibre_default(self) -> None:
        record = row_to_book_record(_row(id=1, title="Dune", path="p", series_index=None))
        assert record.series_index == 1.0

    def test_integer_series_index_becomes_float(self) -> None:
        record = row_to_book_record(_row(id=1, title="Dune", path="p", series_index=4))
        assert isinstance(record.series_index, float)

    def test_null_title_raises(self) -> None:
        with pytest.raises(MissingValueError):
            row_to_book_record(_row(id=1, title=None, path="p"))

    def test_missing_path_column_raises(self) -> None:
        with pytest.raises(KeyError):
            row_to_book_record(_row(id=1, title="Dune"))

    def test_has_cover_zero_is_false(self) -> None:
        record = row_to_book_record(_row(id=1, title="Dune", path="p", has_cover=0))
        assert record.has_cover is False

    def test_record_is_immutable(self) -> None:
        record = row_to_book_record(_row(id=1, title="Dune", path="p"))
        with pytest.raises(AttributeError):
            record.title = "Children of Dune"  # type: ignore[misc]


class TestSmallMappers:
    """Tests for the enrichment row mappers."""

    def test_author_record(self) -> None:
        row = _row(id=5, name="Zilla Novikov", sort="Novikov, Zilla")
        assert row_to_author_record(row) == AuthorRecord(
            id=5, name="Zilla Novikov", sort="Novikov, Zilla"
        )

    def test_author_record_without_sort(self) -> None:
        assert row_to_author_record(_row(id=5, name="Anonymous")).sort is None

    def test_series_name(self) -> None:
        assert row_to_series_name(_row(name="Found Family")) == "Found Family"

    def test_comment_text_null_raises(self) -> None:
        with pytest.raises(MissingValueError):
            row_to_comment_text(_row(text=None))

    def test_data_file(self) -> None:
        row = _row(format="EPUB", name="Dune - Frank Herbert")
        assert row_to_data_file(row) == DataFile(format="EPUB", name="Dune - Frank Herbert")


class TestDataFile:
    """Tests for DataFile.filename."""

    def test_filename_lowercases_format(self) -> None:
        data_file = DataFile(format="EPUB", name="Dune - Frank Herbert")
        assert data_file.filename == "Dune - Frank Herbert.epub"

    def test_filename_keeps_name_case(self) -> None:
        data_file = DataFile(format="AZW3", name="The Name of the Rose - Umberto Eco")
        assert data_file.filename == "The Name of the Rose - Umberto Eco.azw3"
