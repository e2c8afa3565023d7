"""Icon identifier normalization.

Icon identifiers come from asset file names (``ArrowUpRight.svg`` ->
``ArrowUpRight``). This module splits them into lowercase words and derives the
display forms used by the generated catalog.

Word boundaries are inserted:
- between a lowercase letter or digit and a following uppercase letter
  (``arrowUp`` -> ``arrow Up``)
- between an uppercase letter and a following uppercase+lowercase pair, so
  acronym runs stay intact (``APIKey`` -> ``API Key``)

Case is checked with ``str.islower``/``str.isupper``, so accented and
non-Latin letters split the same way (``ÉtoileÉclat`` -> ``Étoile Éclat``).
Anything that is not a letter, digit or combining mark separates words.
"""

from __future__ import annotations

import unicodedata


def _is_mark(char: str) -> bool:
    return unicodedata.category(char).startswith("M")


def _is_word_char(char: str) -> bool:
    # Combining marks stay with their base letter (decomposed accents).
    return char.isalnum() or _is_mark(char)


def _next_base_char(text: str, index: int) -> str:
    for char in text[index + 1:]:
        if not _is_mark(char):
            return char
    return ""


def _starts_word(prev: str, char: str, following: str) -> bool:
    if not char.isupper():
        return False
    if prev.islower() or prev.isdigit():
        return True
    return prev.isupper() and following.islower()


def split_words(identifier: str) -> list[str]:
    """Split an identifier into words, keeping their original case.

    Existing separators (hyphens, underscores, spaces) also split words.
    May return an empty list.
    """
    words: list[str] = []
    current: list[str] = []
    prev = ""
    for index, char in enumerate(identifier):
        if not _is_word_char(char):
            if current:
                words.append("".join(current))
                current = []
            prev = ""
            continue
        if _is_mark(char):
            current.append(char)
            continue
        if current and _starts_word(prev, char, _next_base_char(identifier, index)):
            words.append("".join(current))
            current = []
        current.append(char)
        prev = char
    if current:
        words.append("".join(current))
    return words


def normalize(identifier: str) -> list[str]:
    """Split an icon identifier into lowercase word tokens.

    Always returns at least one token: an empty identifier yields ``[""]`` and
    an identifier made only of separators yields the whole string lowercased.

    Examples:
        >>> normalize("APIKeyIcon")
        ['api', 'key', 'icon']
        >>> normalize("x-crossed")
        ['x', 'crossed']
    """
    words = [w.lower() for w in split_words(identifier)]
    if not words:
        return [identifier.lower()]
    return words


def to_kebab_case(identifier: str) -> str:
    """``ArrowBottomLeftSm`` -> ``arrow-bottom-left-sm``."""
    return "-".join(normalize(identifier))


def to_display_name(identifier: str) -> str:
    """``ArrowUpRight`` -> ``Arrow Up Right``."""
    return " ".join(word[:1].upper() + word[1:] for word in normalize(identifier))
