"""Icon categorization and search-tag generation.

Typical use:

    >>> from icon_catalog import classify, expand_tags, normalize
    >>> classify("ArrowUpRight").value
    'Navigation'
    >>> normalize("APIKeyIcon")
    ['api', 'key', 'icon']
"""

__version__ = "0.1.0"

from icon_catalog.categorization import Category, classify, matching_categories
from icon_catalog.descriptions import describe
from icon_catalog.naming import base_name, normalize, to_display_name, to_kebab_case
from icon_catalog.tagging import expand_tags, render_tags

__all__ = [
    "Category",
    "base_name",
    "classify",
    "describe",
    "expand_tags",
    "matching_categories",
    "normalize",
    "render_tags",
    "to_display_name",
    "to_kebab_case",
]
