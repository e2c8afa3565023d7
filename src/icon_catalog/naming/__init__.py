"""Identifier normalization and display-name helpers."""

from .base_name import base_name
from .normalizer import normalize, split_words, to_display_name, to_kebab_case

__all__ = ["base_name", "normalize", "split_words", "to_display_name", "to_kebab_case"]
