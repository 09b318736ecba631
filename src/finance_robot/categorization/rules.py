"""Deterministic transaction categorization.

Most CSV exports don't carry a category column, so we infer one from the
transaction name plus the sign of the amount. Matching is plain
case-insensitive substring search against a fixed, ordered keyword table:

- fast (no external calls)
- explainable (each category maps to a short keyword list)
- stable (same input, same output)

This is not a rule engine. New keywords go into ``_RULES``; the order of the
table is part of the behavior.
"""

from __future__ import annotations

INCOME = "Income"
UNCATEGORIZED = "Uncategorized"

# Ordering matters: earlier matches win. Keyword sets overlap (e.g. "gas" is
# also a utility word), so do not sort or regroup this table.
_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("Housing", ("rent",)),
    ("Groceries", ("grocery", "supermarket", "trader", "whole foods")),
    ("Gas", ("gas", "shell", "exxon", "bp")),
    ("Transport", ("uber", "lyft", "taxi")),
    ("Subscriptions", ("netflix", "spotify", "hulu", "disney")),
    ("Utilities", ("electric", "utility", "water", "coned", "pseg")),
    ("Internet", ("internet", "verizon", "optimum", "comcast")),
    ("Coffee", ("coffee", "starbucks", "dunkin")),
    ("Dining", ("chipotle", "mcdonald", "restaurant", "pizza")),
]

# Public taxonomy: every label ``categorize`` can return.
CATEGORIES: list[str] = [INCOME, *(category for category, _ in _RULES), UNCATEGORIZED]


def categorize(name: str | None, amount: float) -> str:
    """Infer a category from a transaction name and its signed amount.

    Args:
        name: Cleaned transaction name / description.
        amount: Signed amount (positive = money in).

    Returns:
        Category label from ``CATEGORIES``.
    """
    text = (name or "").strip().lower()
    if not text:
        return UNCATEGORIZED

    # Any credit is income, whatever the name says.
    if amount > 0:
        return INCOME

    for category, keywords in _RULES:
        if any(keyword in text for keyword in keywords):
            return category

    return UNCATEGORIZED
