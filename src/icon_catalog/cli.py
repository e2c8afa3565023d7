"""
Command-line entry point for the icon catalog.

    icon-catalog classify ArrowUpRight TrashCan
    icon-catalog build icons/ --output reference/icon-catalog.json
    icon-catalog check icons/
"""

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from icon_catalog.config import settings
from icon_catalog.core.errors import get_suggestion, get_user_message
from icon_catalog.core.exceptions import IconCatalogError
from icon_catalog.services.catalog import CatalogService, write_catalog
from icon_catalog.services.tables import resolve_tables
from icon_catalog.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="icon-catalog",
        description="Categorize icons and generate search tags from their names.",
    )
    parser.add_argument("--rules", default=settings.rules_file, help="YAML rule table override")
    parser.add_argument("--synonyms", default=settings.synonyms_file, help="YAML synonym table override")
    parser.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--extension", default=settings.icon_extension, help="Icon file extension")

    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify", help="Print records for icon names as JSON")
    classify_parser.add_argument("names", nargs="+", help="Icon identifiers, e.g. ArrowUpRight")

    build_parser = subparsers.add_parser("build", help="Write the catalog JSON for an icon directory")
    build_parser.add_argument("icons_dir", nargs="?", default=settings.icons_dir)
    build_parser.add_argument("--output", "-o", default=settings.output_path, help="Output JSON path")

    check_parser = subparsers.add_parser("check", help="Print category statistics for an icon directory")
    check_parser.add_argument("icons_dir", nargs="?", default=settings.icons_dir)

    return parser


def _classify(service: CatalogService, args: argparse.Namespace) -> int:
    records = [service.build_record(name).model_dump(mode="json") for name in args.names]
    print(json.dumps(records, indent=2, ensure_ascii=False))
    return 0


def _build(service: CatalogService, args: argparse.Namespace) -> int:
    catalog = service.build_from_directory(args.icons_dir, args.extension)
    path = write_catalog(catalog, args.output)
    print(f"Generated catalog for {len(catalog.icons)} icons")
    print(f"   Saved to: {path}")
    return 0


def _check(service: CatalogService, args: argparse.Namespace) -> int:
    catalog = service.build_from_directory(args.icons_dir, args.extension)
    summary = service.summarize(catalog)

    print(f"Total icons: {summary.total}\n")
    print("=== CATEGORY STATISTICS ===")
    for entry in summary.categories:
        print(f"{entry.category.value}: {entry.count} icons")

    print(f'\n=== ICONS IN "Other" ({len(summary.uncategorized)}) ===')
    if summary.uncategorized:
        for name in summary.uncategorized:
            print(f"  - {name}")
    else:
        print("  Every icon has a category!")

    if summary.overlapping:
        print(f"\n=== ICONS MATCHING SEVERAL CATEGORIES ({len(summary.overlapping)}) ===")
        for name, categories in summary.overlapping.items():
            print(f"  - {name}: {', '.join(c.value for c in categories)}")

    print("\n=== SUMMARY ===")
    print(f"Categories: {len(summary.categories)}")
    print(f'Icons in "Other": {len(summary.uncategorized)}')
    print(f"Every icon has tags: {'YES' if summary.all_tagged else 'NO'}")

    # Exit status 1 while any icon is left in Other.
    return 1 if summary.uncategorized else 0


COMMANDS = {
    "classify": _classify,
    "build": _build,
    "check": _check,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level, settings.log_file, settings.log_format)

    try:
        rules, synonyms = resolve_tables(args.rules, args.synonyms)
        service = CatalogService(rules=rules, synonyms=synonyms)
        return COMMANDS[args.command](service, args)
    except IconCatalogError as e:
        logger.debug(f"{e.error_code}: {e.details}")
        print(f"Error [{e.error_code}]: {get_user_message(e.error_code)}", file=sys.stderr)
        print(f"   {get_suggestion(e.error_code)}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
