"""
Catalog Service

Application service around a single Catalog.
Focused responsibility: resolving author names to shared Author instances,
adding books, and exposing search and sorted views of the catalog.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..domain.errors import CatalogError
from ..domain.models import Author, Book, Catalog
from ..utils.author_sorting import (
    author_first_sort_key_for_book,
    author_last_sort_key_for_book,
    title_sort_key_for_book,
)
from ..utils.library_search import book_matches_query

logger = logging.getLogger(__name__)


SORT_KEYS: Dict[str, Optional[Callable]] = {
    'insertion': None,
    'title': title_sort_key_for_book,
    'author_first': author_first_sort_key_for_book,
    'author_last': author_last_sort_key_for_book,
}

DEMO_BOOKS = [
    ("Les Misérables", "Victor Hugo"),
]


class CatalogService:
    """Service for catalog operations over one in-memory Catalog."""

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        # Authors already present in the catalog, keyed by normalized name;
        # the first author seen for a name wins, as in add()
        self._authors_by_name: Dict[str, Author] = {}
        for author in self.catalog.authors():
            self._authors_by_name.setdefault(author.normalized_name, author)

    def find_or_create_author(self, name: str) -> Author:
        """Return the cataloged author with this normalized name, or a new unregistered one."""
        author = Author(name)
        existing = self._authors_by_name.get(author.normalized_name)
        if existing is not None:
            logger.debug(f"Reusing author {existing.id} for '{name}'")
            return existing
        return author

    def add_book(self, title: str, author_name: str) -> Book:
        """Create a book for `author_name` (reusing a known author) and catalog it."""
        try:
            book = Book(title, self.find_or_create_author(author_name))
        except CatalogError as e:
            logger.warning(f"Rejected book '{title}': {e.message}")
            raise
        return self.add(book)

    def add(self, book: Book) -> Book:
        """Catalog an already constructed book."""
        try:
            self.catalog.add(book)
        except CatalogError as e:
            logger.warning(f"Rejected catalog entry: {e.message}")
            raise
        # Authors are registered only once one of their books is cataloged
        self._authors_by_name.setdefault(book.author.normalized_name, book.author)
        logger.info(f"Cataloged book {book.id}: {book.describe()}")
        return book

    def list_descriptions(self) -> List[str]:
        return list(self.catalog.list_all())

    def render(self) -> str:
        return self.catalog.render()

    def get_book(self, book_id: str) -> Optional[Book]:
        for book in self.catalog:
            if book.id == book_id:
                return book
        return None

    def get_author(self, author_id: str) -> Optional[Author]:
        for author in self.catalog.authors():
            if author.id == author_id:
                return author
        return None

    def list_authors(self) -> List[Author]:
        return self.catalog.authors()

    def count_books_by_author(self, author: Author) -> int:
        return sum(1 for book in self.catalog if book.author.id == author.id)

    def search(self, query: Optional[str]) -> List[Book]:
        """Books whose title or author matches every token of `query`, in insertion order."""
        return [book for book in self.catalog if book_matches_query(book, query)]

    def sorted_books(self, order: str = 'insertion', books: Optional[List[Book]] = None) -> List[Book]:
        """Return books in the requested order without touching the catalog.

        Orders: 'insertion', 'title', 'author_first', 'author_last'.
        """
        if order not in SORT_KEYS:
            raise CatalogError(
                f"Unknown sort order '{order}'. Expected one of: {', '.join(SORT_KEYS)}"
            )
        selected = list(self.catalog) if books is None else list(books)
        key = SORT_KEYS[order]
        if key is None:
            return selected
        return sorted(selected, key=key)

    def seed_demo(self) -> List[Book]:
        """Catalog the demonstration books."""
        return [self.add_book(title, author_name) for title, author_name in DEMO_BOOKS]
