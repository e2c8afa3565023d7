"""Catalog building and table loading services."""

from .catalog import CatalogService, scan_directory, write_catalog
from .tables import load_rule_table, load_synonym_table, resolve_tables

__all__ = [
    "CatalogService",
    "load_rule_table",
    "load_synonym_table",
    "resolve_tables",
    "scan_directory",
    "write_catalog",
]
