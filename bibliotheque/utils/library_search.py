from __future__ import annotations

from typing import Optional

from ..domain.models import Book


def book_matches_query(book: Book, query: Optional[str]) -> bool:
    """Return True if every token of `query` occurs in the title or author name.

    Matching is case-insensitive; an empty or blank query matches everything.
    """
    if not query:
        return True

    tokens = [t.strip().casefold() for t in query.split() if t.strip()]
    if not tokens:
        return True

    haystack = " ".join((
        book.title,
        book.normalized_title,
        book.author.name,
        book.author.normalized_name,
    )).casefold()
    return all(token in haystack for token in tokens)
