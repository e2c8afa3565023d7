"""Pydantic schemas for catalog data and table files."""

from .icon import (
    CatalogResponse,
    CatalogSummary,
    CategoryCount,
    CategoryGroup,
    CategoryInfo,
    ClassifyRequest,
    ClassifyResponse,
    IconCatalog,
    IconRecord,
)
from .tables import RuleEntry, RuleTableFile, SynonymTableFile

__all__ = [
    "CatalogResponse",
    "CatalogSummary",
    "CategoryCount",
    "CategoryGroup",
    "CategoryInfo",
    "ClassifyRequest",
    "ClassifyResponse",
    "IconCatalog",
    "IconRecord",
    "RuleEntry",
    "RuleTableFile",
    "SynonymTableFile",
]
