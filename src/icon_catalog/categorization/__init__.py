"""Icon categorization utilities.

This module places icons into a fixed taxonomy based on their identifiers. It
is intentionally rule-based (no image analysis) so results are fast and
auditable.
"""

from .rules import (
    CATEGORIES,
    DEFAULT_RULES,
    Category,
    Rule,
    RuleTable,
    category_rank,
    classify,
    matching_categories,
)

__all__ = [
    "CATEGORIES",
    "DEFAULT_RULES",
    "Category",
    "Rule",
    "RuleTable",
    "category_rank",
    "classify",
    "matching_categories",
]
