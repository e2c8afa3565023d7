"""Schemas for YAML rule and synonym table files.

Example rules file::

    rules:
      - category: Navigation
        keywords: [arrow, chevron]
      - category: Actions
        keywords: [add, plus]

Example synonyms file::

    synonyms:
      add: [plus, create, new]
      user: [person, people]
"""

from pydantic import BaseModel, Field, field_validator

from icon_catalog.categorization.rules import Category


def _clean_words(words: list[str]) -> list[str]:
    cleaned = [word.strip().lower() for word in words]
    if any(not word for word in cleaned):
        raise ValueError("Words cannot be empty")
    return cleaned


class RuleEntry(BaseModel):
    category: Category
    keywords: list[str] = Field(..., min_length=1)

    @field_validator("category")
    @classmethod
    def category_not_fallback(cls, v: Category) -> Category:
        """Other is the implicit fallback and cannot carry keywords."""
        if v is Category.OTHER:
            raise ValueError("Other is the fallback category and cannot have a rule")
        return v

    @field_validator("keywords")
    @classmethod
    def keywords_lowercase(cls, v: list[str]) -> list[str]:
        return _clean_words(v)


class RuleTableFile(BaseModel):
    rules: list[RuleEntry] = Field(..., min_length=1)


class SynonymTableFile(BaseModel):
    synonyms: dict[str, list[str]]

    @field_validator("synonyms")
    @classmethod
    def synonyms_lowercase(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        table: dict[str, list[str]] = {}
        for trigger, tags in v.items():
            key = trigger.strip().lower()
            if not key:
                raise ValueError("Trigger words cannot be empty")
            table[key] = _clean_words(tags)
        return table
