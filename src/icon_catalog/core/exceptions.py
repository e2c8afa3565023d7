"""Custom exception classes for icon catalog operations.

The classification engine itself never raises. These exceptions cover the
outer layers: scanning icon directories, loading table files and looking up
icons through the API. Each exception maps to an error code in errors.py.
"""

from typing import Any


class IconCatalogError(Exception):
    """Base exception for all icon catalog errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "ICON_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int = 500,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status
        super().__init__(error_code)


class IconDirectoryError(IconCatalogError):
    """Raised when the icon directory is missing (ICON_001) or not a directory (ICON_002)."""

    pass


class TableLoadError(IconCatalogError):
    """Raised when a rule or synonym table file cannot be loaded."""

    pass


class RuleTableError(TableLoadError):
    """Invalid category rule table (ICON_003)."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("ICON_003", details=details, http_status=500)


class SynonymTableError(TableLoadError):
    """Invalid synonym table (ICON_004)."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("ICON_004", details=details, http_status=500)


class IconNotFoundError(IconCatalogError):
    """Raised when an icon is not present in the scanned catalog (ICON_005)."""

    def __init__(self, name: str):
        super().__init__("ICON_005", details={"name": name}, http_status=404)
