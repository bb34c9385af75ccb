"""JSON API blueprints."""

from .books import authors_api, books_api

__all__ = ['authors_api', 'books_api']
