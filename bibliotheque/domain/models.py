"""
Domain models for the catalog.

These models represent the core entities independent of any web or CLI concerns.
An Author may back several Books; Books keep a plain reference to the same
Author instance rather than a copy of its name.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple
import uuid

from .errors import InvalidAuthorError, InvalidBookError


DESCRIPTION_SEPARATOR = " par "


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Author:
    """Author domain model."""
    name: str
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        # Blank names are accepted; only the type is checked.
        if not isinstance(self.name, str):
            raise InvalidAuthorError(
                f"Author name must be text, got {type(self.name).__name__}"
            )

    @property
    def normalized_name(self) -> str:
        """Normalized name for matching (handle variations like 'Hugo, Victor' vs 'Victor Hugo')."""
        return self._normalize_name(self.name)

    @staticmethod
    def _normalize_name(name: str) -> str:
        # Handle "Last, First" format
        if ',' in name:
            parts = [part.strip() for part in name.split(',')]
            if len(parts) == 2 and all(parts):
                name = f"{parts[1]} {parts[0]}"

        return " ".join(name.split()).lower()


@dataclass(frozen=True)
class Book:
    """Book domain model - a title attributed to exactly one author."""
    title: str
    author: Author
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        if not isinstance(self.title, str):
            raise InvalidBookError(
                f"Book title must be text, got {type(self.title).__name__}"
            )
        if self.author is None:
            raise InvalidBookError(f"Book '{self.title}' requires an author")
        if not isinstance(self.author, Author):
            raise InvalidBookError(
                f"Book '{self.title}' author must be an Author, got {type(self.author).__name__}"
            )

    @property
    def normalized_title(self) -> str:
        """Normalize title for fuzzy matching."""
        return self.title.strip().lower()

    def describe(self) -> str:
        """Human-readable description: '<title> par <author name>'."""
        return f"{self.title}{DESCRIPTION_SEPARATOR}{self.author.name}"

    def __str__(self) -> str:
        return self.describe()


class Catalog:
    """Ordered collection of books.

    Insertion order is display order. Entries are never reordered,
    deduplicated or removed.
    """

    def __init__(self, books: Optional[Iterable[Book]] = None):
        self._entries: List[Book] = []
        for book in books or ():
            self.add(book)

    def add(self, book: Book) -> None:
        """Append a book to the end of the catalog."""
        if not isinstance(book, Book):
            raise InvalidBookError(
                f"Only books can be cataloged, got {type(book).__name__}"
            )
        self._entries.append(book)

    def list_all(self) -> Iterator[str]:
        """Yield each entry's description in insertion order.

        Every call returns a fresh generator, so the listing can be restarted.
        """
        for book in self._entries:
            yield book.describe()

    def render(self) -> str:
        """All descriptions joined by newlines; empty string for an empty catalog."""
        return "\n".join(self.list_all())

    @property
    def books(self) -> Tuple[Book, ...]:
        """Snapshot of the entries in insertion order."""
        return tuple(self._entries)

    def authors(self) -> List[Author]:
        """Distinct authors in order of first appearance."""
        seen = set()
        authors = []
        for book in self._entries:
            if book.author.id not in seen:
                seen.add(book.author.id)
                authors.append(book.author)
        return authors

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Book]:
        return iter(tuple(self._entries))

    def __repr__(self) -> str:
        return f"Catalog({len(self._entries)} books)"
