"""Error codes and user-friendly messages.

This module defines the error catalog for ingestion and API errors.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

ERROR_CATALOG: dict[str, dict] = {
    "CSV_001": {
        "code": "CSV_001",
        "message": "CSV parse error",
        "user_message": "We couldn't read this file as a CSV.",
        "suggestion": "Export the transactions again as CSV with a header row and try again.",
        "retry_allowed": False,
    },
    "API_001": {
        "code": "API_001",
        "message": "Missing file field 'file'",
        "user_message": "No file was uploaded.",
        "suggestion": "Attach the CSV export in the 'file' form field.",
        "retry_allowed": True,
    },
    "API_002": {
        "code": "API_002",
        "message": "File size exceeds maximum limit",
        "user_message": "The file is too large.",
        "suggestion": "Split the export into smaller date ranges and upload each one.",
        "retry_allowed": False,
    },
    "API_003": {
        "code": "API_003",
        "message": "File is not UTF-8 text",
        "user_message": "This file doesn't look like a text CSV.",
        "suggestion": "Save the export as UTF-8 CSV and try again.",
        "retry_allowed": False,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Request data failed validation",
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

    Unknown codes return a generic definition instead of raising.
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
