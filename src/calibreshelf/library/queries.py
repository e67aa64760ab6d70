# ABOUTME: SQL statements run against a Calibre metadata.db.
# ABOUTME: Read-only queries for the book listing and per-book enrichment lookups.

# Tables that must exist for a file to count as a Calibre library.
REQUIRED_TABLES: frozenset[str] = frozenset({"books"})

LIST_TABLES = "SELECT name FROM sqlite_master WHERE type='table'"

BOOKS = "SELECT * FROM books"

BOOK_AUTHORS = """
SELECT authors.id, authors.name, authors.sort
FROM books_authors_link
JOIN authors ON books_authors_link.author = authors.id
WHERE books_authors_link.book = ?
"""

BOOK_SERIES = """
SELECT series.name
FROM books_series_link
JOIN series ON books_series_link.series = series.id
WHERE books_series_link.book = ?
LIMIT 1
"""

# No ORDER BY: with several formats the first row SQLite hands back wins.
BOOK_FILE = "SELECT format, name FROM data WHERE book = ? LIMIT 1"

BOOK_COMMENTS = "SELECT text FROM comments WHERE book = ? LIMIT 1"
