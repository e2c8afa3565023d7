"""Search-tag generation: normalized words plus synonym expansion."""

from .expander import expand_tags, render_tags
from .synonyms import DEFAULT_SYNONYMS, SynonymTable

__all__ = ["DEFAULT_SYNONYMS", "SynonymTable", "expand_tags", "render_tags"]
