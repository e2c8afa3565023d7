"""Search-tag generation for icons."""

from __future__ import annotations

from collections.abc import Iterable

from icon_catalog.naming.normalizer import normalize
from icon_catalog.tagging.synonyms import DEFAULT_SYNONYMS, SynonymTable


def expand_tags(identifier: str, synonyms: SynonymTable = DEFAULT_SYNONYMS) -> set[str]:
    """Build the search tag set for an icon identifier.

    The set always contains the identifier's normalized words, plus the tags
    contributed by every word that is a trigger in ``synonyms``.

    Example:
        >>> sorted(expand_tags("AddUser"))[:4]
        ['account', 'add', 'create', 'insert']
    """
    words = normalize(identifier)
    tags = set(words)
    for word in words:
        tags.update(synonyms.get(word, ()))
    return tags


def render_tags(tags: Iterable[str]) -> str:
    """Comma-joined keywords in a stable order, as shown in the catalog."""
    return ", ".join(sorted(tags))
