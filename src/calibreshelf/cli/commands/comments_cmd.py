# ABOUTME: The `calibreshelf comments` command for exporting a book's comments.
# ABOUTME: Prints the comments wrapped in a styled, standalone HTML document.

from pathlib import Path

import click
from rich.console import Console

from calibreshelf.books.comments import comments_document
from calibreshelf.cli.options import find_book, library_argument, load_or_exit

console = Console(stderr=True)


@click.command("comments")
@library_argument
@click.argument("book_id", type=int)
def comments(library: Path, book_id: int) -> None:
    """Print a book's comments as an HTML document."""
    book = find_book(load_or_exit(library, console), book_id)

    if book is None:
        console.print(f"[red]Book {book_id} not found.[/red]")
        raise SystemExit(1)

    click.echo(comments_document(book.comments))
