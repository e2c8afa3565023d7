"""Icon catalog request/response schemas."""

from pydantic import BaseModel, Field, field_validator

from icon_catalog.categorization.rules import Category


class IconRecord(BaseModel):
    """Everything the catalog knows about one icon."""

    name: str = Field(..., description="Icon identifier (file name without extension)")
    kebab_name: str = Field(..., description="Identifier in kebab-case, e.g. arrow-up-right")
    display_name: str = Field(..., description="Title-cased words, e.g. Arrow Up Right")
    category: Category
    tags: list[str] = Field(..., description="Search tags, sorted")
    keywords: str = Field(..., description="Tags joined with ', ' for display")
    description: str
    base_name: str = Field(..., description="Group name shared by icon variants")


class CategoryGroup(BaseModel):
    category: Category
    icons: list[str]


class IconCatalog(BaseModel):
    """Icons sorted by name plus their grouping by category.

    Groups follow rule-table order; categories without icons are omitted.
    """

    icons: list[IconRecord]
    groups: list[CategoryGroup]


class CategoryCount(BaseModel):
    category: Category
    count: int


class CatalogSummary(BaseModel):
    total: int
    categories: list[CategoryCount] = Field(
        ..., description="Icon count per category, largest first"
    )
    uncategorized: list[str] = Field(..., description="Icons that fell through to Other")
    all_tagged: bool
    overlapping: dict[str, list[Category]] = Field(
        default_factory=dict,
        description="Icons whose name matches more than one category rule",
    )


class CatalogResponse(BaseModel):
    catalog: IconCatalog
    summary: CatalogSummary


class CategoryInfo(BaseModel):
    category: Category
    rank: int
    keywords: list[str]


class ClassifyRequest(BaseModel):
    identifiers: list[str] = Field(..., min_length=1, max_length=1000)

    @field_validator("identifiers")
    @classmethod
    def identifiers_not_empty(cls, v: list[str]) -> list[str]:
        """Reject blank identifiers; surrounding whitespace is stripped."""
        cleaned = [identifier.strip() for identifier in v]
        if any(not identifier for identifier in cleaned):
            raise ValueError("Identifiers cannot be empty")
        return cleaned


class ClassifyResponse(BaseModel):
    icons: list[IconRecord]
