"""
Domain layer - Core catalog models.

This module contains the author, book and catalog models,
isolated from external concerns like web frameworks and configuration.
"""

from .errors import CatalogError, InvalidAuthorError, InvalidBookError
from .models import Author, Book, Catalog

__all__ = [
    'Author',
    'Book',
    'Catalog',
    'CatalogError',
    'InvalidAuthorError',
    'InvalidBookError',
]
