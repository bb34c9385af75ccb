"""
Services Package

- CatalogService: author resolution, book insertion, search and sorted views

The module-level service is created lazily so the app factory, the CLI and
tests share one catalog per process until reset_all_services() is called.
"""

import logging

from .catalog_service import CatalogService, DEMO_BOOKS, SORT_KEYS

logger = logging.getLogger(__name__)

_catalog_service = None


def get_catalog_service(seed_demo: bool = False) -> CatalogService:
    """Get catalog service instance with lazy initialization."""
    global _catalog_service
    if _catalog_service is None:
        _catalog_service = CatalogService()
        if seed_demo:
            _catalog_service.seed_demo()
            logger.debug("Catalog service seeded with demo books")
    return _catalog_service


def reset_all_services() -> None:
    """Drop the cached service instances (used by tests and app re-creation)."""
    global _catalog_service
    _catalog_service = None


__all__ = [
    'CatalogService',
    'DEMO_BOOKS',
    'SORT_KEYS',
    'get_catalog_service',
    'reset_all_services',
]
