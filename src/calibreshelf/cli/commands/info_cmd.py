# ABOUTME: The `calibreshelf info` command for displaying one book in detail.
# ABOUTME: Shows title, authors, sort keys, series, cover and file paths, and comments.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from calibreshelf.cli.options import find_book, library_argument, load_or_exit

console = Console()


@click.command("info")
@library_argument
@click.argument("book_id", type=int)
def info(library: Path, book_id: int) -> None:
    """Show detailed metadata for a book by its Calibre ID."""
    book = find_book(load_or_exit(library, console), book_id)

    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=14)
    table.add_column("Value")

    table.add_row("ID", str(book.id))
    table.add_row("Title", escape(book.title))
    table.add_row("Authors", escape(book.authors()) or "unknown")
    table.add_row("Title Sort", escape(book.sortable_title))
    if book.sortable_author_list:
        table.add_row("Author Sort", escape(book.sortable_author_list))
    if book.series_position:
        series = book.series_position
        table.add_row("Series", escape(f"{series.name} #{series.position}"))
    table.add_row("Cover", escape(str(book.cover_path)) if book.cover_path else "none")
    table.add_row("File", escape(str(book.file_path)) if book.file_path else "none")
    if book.comments:
        table.add_row("Comments", escape(book.comments))

    console.print(table)
