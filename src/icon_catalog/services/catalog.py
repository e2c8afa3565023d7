"""Icon catalog building.

This module orchestrates the catalog workflow:
1. Scan an icon directory and strip file extensions to get identifiers
2. Classify, tag and describe each identifier
3. Group icons by category in rule-table order
4. Summarize the result and write it as JSON for the documentation build
"""

import json
import logging
from pathlib import Path

from icon_catalog.categorization.rules import (
    DEFAULT_RULES,
    Category,
    RuleTable,
    category_rank,
    classify,
    matching_categories,
)
from icon_catalog.core.exceptions import IconDirectoryError, IconNotFoundError
from icon_catalog.descriptions import describe
from icon_catalog.naming import base_name, to_display_name, to_kebab_case
from icon_catalog.schemas.icon import (
    CatalogSummary,
    CategoryCount,
    CategoryGroup,
    CategoryInfo,
    IconCatalog,
    IconRecord,
)
from icon_catalog.tagging.expander import expand_tags, render_tags
from icon_catalog.tagging.synonyms import DEFAULT_SYNONYMS, SynonymTable

logger = logging.getLogger(__name__)


def scan_directory(directory: str | Path, extension: str = ".svg") -> list[str]:
    """List icon identifiers in a directory.

    Args:
        directory: Directory containing icon asset files
        extension: File extension to include (with or without the leading dot)

    Returns:
        Sorted identifiers (file names without the extension)

    Raises:
        IconDirectoryError: If the directory is missing or is a file
    """
    path = Path(directory)
    if not path.exists():
        raise IconDirectoryError("ICON_001", details={"path": str(path)}, http_status=404)
    if not path.is_dir():
        raise IconDirectoryError("ICON_002", details={"path": str(path)}, http_status=400)

    suffix = extension if extension.startswith(".") else f".{extension}"
    identifiers = []
    for entry in path.iterdir():
        if not entry.is_file() or entry.suffix.lower() != suffix.lower():
            logger.debug(f"Skipping {entry.name}")
            continue
        identifiers.append(entry.stem)

    identifiers.sort()
    logger.info(f"Found {len(identifiers)} icons in {path}")
    return identifiers


class CatalogService:
    """Builds catalog records from icon identifiers.

    The service holds the rule and synonym tables so one configured instance
    can be shared by the CLI and the API.

    Example:
        >>> service = CatalogService()
        >>> record = service.build_record("ArrowUpRight")
        >>> record.category
        <Category.NAVIGATION: 'Navigation'>
    """

    def __init__(
        self,
        rules: RuleTable = DEFAULT_RULES,
        synonyms: SynonymTable = DEFAULT_SYNONYMS,
    ):
        self.rules = rules
        self.synonyms = synonyms

    def build_record(self, identifier: str) -> IconRecord:
        tags = expand_tags(identifier, self.synonyms)
        return IconRecord(
            name=identifier,
            kebab_name=to_kebab_case(identifier),
            display_name=to_display_name(identifier),
            category=classify(identifier, self.rules),
            tags=sorted(tags),
            keywords=render_tags(tags),
            description=describe(identifier),
            base_name=base_name(identifier),
        )

    def build_catalog(self, identifiers: list[str]) -> IconCatalog:
        """Build records for every identifier and group them by category."""
        records = sorted(
            (self.build_record(identifier) for identifier in set(identifiers)),
            key=lambda r: r.name,
        )

        grouped: dict[Category, list[str]] = {}
        for record in records:
            grouped.setdefault(record.category, []).append(record.name)

        groups = [
            CategoryGroup(category=category, icons=names)
            for category, names in sorted(
                grouped.items(), key=lambda item: category_rank(item[0], self.rules)
            )
        ]
        logger.info(f"Built catalog with {len(records)} icons in {len(groups)} categories")
        return IconCatalog(icons=records, groups=groups)

    def build_from_directory(self, directory: str | Path, extension: str = ".svg") -> IconCatalog:
        return self.build_catalog(scan_directory(directory, extension))

    def find_in_directory(
        self, directory: str | Path, name: str, extension: str = ".svg"
    ) -> IconRecord:
        """Record for one icon file, without building the whole catalog.

        Raises:
            IconNotFoundError: If the directory has no icon with this name
        """
        if name not in scan_directory(directory, extension):
            raise IconNotFoundError(name)
        return self.build_record(name)

    def summarize(self, catalog: IconCatalog) -> CatalogSummary:
        """Category statistics and the icons that need attention."""
        counts = [
            CategoryCount(category=group.category, count=len(group.icons))
            for group in catalog.groups
        ]
        # Stable sort keeps rule order between categories of equal size.
        counts.sort(key=lambda c: c.count, reverse=True)

        overlapping = {}
        for record in catalog.icons:
            matches = matching_categories(record.name, self.rules)
            if len(matches) > 1:
                overlapping[record.name] = matches

        return CatalogSummary(
            total=len(catalog.icons),
            categories=counts,
            uncategorized=[r.name for r in catalog.icons if r.category is Category.OTHER],
            all_tagged=all(r.tags for r in catalog.icons),
            overlapping=overlapping,
        )

    def category_info(self) -> list[CategoryInfo]:
        """The taxonomy in evaluation order, ending with the Other fallback."""
        info = [
            CategoryInfo(category=rule.category, rank=rank, keywords=list(rule.keywords))
            for rank, rule in enumerate(self.rules)
        ]
        info.append(CategoryInfo(category=Category.OTHER, rank=len(self.rules), keywords=[]))
        return info


def write_catalog(catalog: IconCatalog, output_path: str | Path) -> Path:
    """Write the catalog as JSON keyed by icon name.

    Each entry holds ``description``, ``category`` and ``tags`` (the
    comma-joined keywords) for the documentation generator.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        record.name: {
            "description": record.description,
            "category": record.category.value,
            "tags": record.keywords,
        }
        for record in catalog.icons
    }
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    logger.info(f"Saved {len(data)} icons to {path}")
    return path
