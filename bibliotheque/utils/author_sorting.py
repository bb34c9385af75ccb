from __future__ import annotations

from typing import Tuple

from ..domain.models import Book


def _normalize_first_last(name: str) -> str:
    """Return a normalized 'first last' string suitable for sorting.

    - "Last, First" -> "First Last"
    - trims and collapses whitespace

    This does not attempt language-specific surname particles.
    """
    raw = (name or "").strip()
    if not raw:
        return ""

    if "," in raw:
        last, rest = [part.strip() for part in raw.split(",", 1)]
        if last and rest:
            raw = f"{rest} {last}".strip()

    return " ".join(raw.split())


def _split_last_first(first_last: str) -> Tuple[str, str]:
    """Split a normalized 'first last' string into (last, first).

    Uses the last whitespace-delimited token as the surname.
    """
    s = (first_last or "").strip()
    if not s:
        return ("", "")

    parts = s.split()
    if len(parts) == 1:
        return (parts[0], "")

    return (parts[-1], " ".join(parts[:-1]))


def title_sort_key_for_book(book: Book) -> Tuple[str, str]:
    return (book.title.casefold(), _normalize_first_last(book.author.name).casefold())


def author_first_sort_key_for_book(book: Book) -> Tuple[str, str]:
    """Sort key for 'Author First Last' ordering.

    Returns (author_key, title_key) for stable deterministic ordering.
    """
    return (
        _normalize_first_last(book.author.name).casefold(),
        book.title.casefold(),
    )


def author_last_sort_key_for_book(book: Book) -> Tuple[str, str, str]:
    """Sort key for 'Author Last, First' ordering.

    Returns (last, first, title) where last/first are derived from a normalized
    "first last" representation.
    """
    last, first = _split_last_first(_normalize_first_last(book.author.name))
    return (last.casefold(), first.casefold(), book.title.casefold())
