"""Exceptions raised by the catalog domain."""


class CatalogError(Exception):
    """Base exception for catalog operations."""
    def __init__(self, message: str = "Catalog operation failed"):
        self.message = message
        super().__init__(self.message)


class InvalidAuthorError(CatalogError):
    """Raised when an author is constructed from something that is not a name."""


class InvalidBookError(CatalogError):
    """Raised when a book lacks a valid title or author, or a non-book is cataloged."""
