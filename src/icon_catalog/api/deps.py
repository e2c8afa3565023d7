"""FastAPI dependency injection for the catalog service."""

from functools import lru_cache

from icon_catalog.config import settings
from icon_catalog.services.catalog import CatalogService
from icon_catalog.services.tables import resolve_tables


@lru_cache
def get_catalog_service() -> CatalogService:
    """Get the catalog service built from configured tables.

    Tables are loaded once per process.
    """
    rules, synonyms = resolve_tables(settings.rules_file, settings.synonyms_file)
    return CatalogService(rules=rules, synonyms=synonyms)
