# ABOUTME: calibreshelf - a read-only browser for Calibre e-book libraries.
# ABOUTME: Projects a library's metadata.db into immutable LibraryBook values.
