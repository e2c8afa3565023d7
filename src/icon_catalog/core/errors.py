"""Error codes and user-friendly messages.

This module defines the error catalog for icon catalog operations.
Each error has:
- error_code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "ICON_001": {
        "code": "ICON_001",
        "message": "Icon directory not found",
        "user_message": "The icon directory does not exist.",
        "suggestion": "Check the ICONS_DIR setting or pass an existing directory.",
        "retry_allowed": False,
    },
    "ICON_002": {
        "code": "ICON_002",
        "message": "Icon path is not a directory",
        "user_message": "The icon path points to a file, not a directory.",
        "suggestion": "Pass the directory that contains the icon files.",
        "retry_allowed": False,
    },
    "ICON_003": {
        "code": "ICON_003",
        "message": "Rule table file could not be loaded",
        "user_message": "The category rule file is missing or invalid.",
        "suggestion": "Each rule needs a known category and at least one keyword.",
        "retry_allowed": False,
    },
    "ICON_004": {
        "code": "ICON_004",
        "message": "Synonym table file could not be loaded",
        "user_message": "The synonym file is missing or invalid.",
        "suggestion": "The file must map each trigger word to a list of tags.",
        "retry_allowed": False,
    },
    "ICON_005": {
        "code": "ICON_005",
        "message": "Icon not found in catalog",
        "user_message": "We couldn't find this icon.",
        "suggestion": "Check the icon name and try again.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request validation failed",
        "user_message": "Invalid input data",
        "suggestion": "Please check your input and try again",
        "retry_allowed": True,
    },
    "SYS_001": {
        "code": "SYS_001",
        "message": "Internal server error",
        "user_message": "An unexpected error occurred",
        "suggestion": "Please try again later",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details; a generic entry for unknown codes
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again. Contact support if the problem persists.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_user_message(error_code: str) -> str:
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    return get_error(error_code)["retry_allowed"]
