# ABOUTME: The `calibreshelf ls` command for listing the books of a Calibre library.
# ABOUTME: Displays a Rich table (or JSON) of every projected book.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calibreshelf.books.types import LibraryBook
from calibreshelf.cli.options import library_argument, load_or_exit

console = Console()

_SORT_KEYS = {
    "title": lambda book: book.sortable_title.casefold(),
    "author": lambda book: book.sortable_author_list.casefold(),
}


def book_to_dict(book: LibraryBook) -> dict:
    """JSON-ready view of a LibraryBook."""
    series = book.series_position
    return {
        "id": book.id,
        "title": book.title,
        "authors": list(book.author_list),
        "sortable_title": book.sortable_title,
        "sortable_author_list": book.sortable_author_list,
        "series": {"name": series.name, "position": series.position} if series else None,
        "cover_path": str(book.cover_path) if book.cover_path else None,
        "file_path": str(book.file_path) if book.file_path else None,
        "comments": book.comments,
    }


def _file_format(book: LibraryBook) -> str:
    """Extension of the book's file, e.g. 'epub', or '-' when it has none."""
    if book.file_path is None:
        return "-"
    return book.file_path.suffix.lstrip(".") or "-"


@click.command("ls")
@library_argument
@click.option(
    "--sort",
    "sort_by",
    type=click.Choice(["none", "title", "author"]),
    default="none",
    help="Order by sortable title or author list (default: library order).",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)
def ls(library: Path, sort_by: str, json_output: bool) -> None:
    """List all books in a Calibre library."""
    books = load_or_exit(library, console)

    if sort_by in _SORT_KEYS:
        books = sorted(books, key=_SORT_KEYS[sort_by])

    if json_output:
        click.echo(json_lib.dumps([book_to_dict(book) for book in books], indent=2))
        return

    if not books:
        console.print("[yellow]No books in the library.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", style="bold")
    table.add_column("Authors")
    table.add_column("Series")
    table.add_column("Cover", width=5)
    table.add_column("Format", width=6)

    for book in books:
        series_display = ""
        if book.series_position:
            series = book.series_position
            series_display = escape(f"{series.name} #{series.position}")

        table.add_row(
            str(book.id),
            escape(book.title),
            escape(book.authors()) or "[dim]unknown[/dim]",
            series_display,
            "yes" if book.cover_path else "no",
            _file_format(book),
        )

    console.print(table)
    console.print(f"\n[dim]{len(books)} book(s)[/dim]")
