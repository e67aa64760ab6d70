# ABOUTME: Shared Click arguments and helpers for calibreshelf CLI commands.
# ABOUTME: Provides the LIBRARY argument and error-reporting library loading.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from calibreshelf.books.types import LibraryBook
from calibreshelf.library.projector import load_library
from calibreshelf.library.repository import LibraryConnectionError, QueryError

LIBRARY_ENVVAR = "CALIBRESHELF_LIBRARY"

library_argument = click.argument(
    "library",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar=LIBRARY_ENVVAR,
)


def load_or_exit(library: Path, console: Console) -> list[LibraryBook]:
    """Project a library's books, printing an error and exiting 1 on failure."""
    try:
        return load_library(library)
    except (LibraryConnectionError, QueryError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc


def find_book(books: list[LibraryBook], book_id: int) -> LibraryBook | None:
    """Return the book with the given Calibre ID, or None if there is none."""
    return next((book for book in books if book.id == book_id), None)
