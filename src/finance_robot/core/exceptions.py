"""Custom exception classes for transaction ingestion.

This module defines the exceptions raised by the import pipeline and the
API layer. Each exception maps to an error code defined in errors.py.

Per-row problems (unusable rows, malformed amounts) are never raised; the
row is dropped and the import continues. Only document-level failures
surface as exceptions.
"""

from typing import Any


class FinanceRobotError(Exception):
    """Base exception for all ingestion errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "CSV_001")
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


class CSVParseError(FinanceRobotError):
    """Raised when an uploaded document is not valid tabular text.

    Common causes:
    - Missing header row
    - Unbalanced quotes
    - Rows with more or fewer cells than the header
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("CSV_001", details=details, http_status=400)


class UploadError(FinanceRobotError):
    """Raised when an upload cannot be read (missing, too large, not text)."""

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        super().__init__(error_code, details=details, http_status=400)
