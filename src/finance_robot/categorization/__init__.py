"""Transaction categorization utilities.

This module provides deterministic, local categorization of transactions based on
their names. It is intentionally keyword-based (no network calls) to keep
ingestion fast and predictable.
"""

from .rules import CATEGORIES, INCOME, UNCATEGORIZED, categorize

__all__ = ["CATEGORIES", "INCOME", "UNCATEGORIZED", "categorize"]
