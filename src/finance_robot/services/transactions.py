"""Transaction building and CSV import.

This module turns canonical rows into finalized ``Transaction`` records:
1. Normalize the raw amount ("$1,234.56", "(12.00)")
2. Infer the sign for imported rows (credits vs. debits)
3. Resolve the category (bank category, then keyword heuristic)
4. Clean the name and date, assign a fresh id

Nothing here stores records. Callers persist whatever is returned.
"""

import logging
import math
import re
import uuid
from dataclasses import dataclass, field

from finance_robot.categorization.rules import UNCATEGORIZED, categorize
from finance_robot.parsers.csv_rows import DATE_PREFIX_LENGTH, normalize_row, read_csv_rows
from finance_robot.parsers.formats import DEFAULT_ALIASES, ColumnAliases
from finance_robot.schemas.internal import CanonicalRow
from finance_robot.schemas.transaction import Transaction

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "(No description)"
DEFAULT_SAMPLE_SIZE = 5

_CREDIT_NAME_PATTERN = re.compile(r"payment|credit|refund|returned|return", re.IGNORECASE)
_CREDIT_CATEGORY_KEYWORDS = ("payment", "credit")
_AMOUNT_STRIP_PATTERN = re.compile(r"[,$()]")
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class ImportOutcome:
    """Result of importing one CSV document."""

    imported: int
    sample: list[Transaction] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    skipped: int = 0


def normalize_amount(raw: str) -> float:
    """Parse a bank-formatted amount.

    Commas, dollar signs and parentheses are stripped. A value wrapped in
    parentheses is negative.

    Examples:
        >>> normalize_amount("$1,234.56")
        1234.56
        >>> normalize_amount("(123.45)")
        -123.45

    Raises:
        ValueError: If the cleaned value is not a finite number
    """
    text = str(raw).strip()
    negative = text.startswith("(") and text.endswith(")")
    cleaned = _AMOUNT_STRIP_PATTERN.sub("", text).strip()

    if not _NUMBER_PATTERN.fullmatch(cleaned):
        raise ValueError(f"Could not parse amount: {raw!r}")
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(f"Could not parse amount: {raw!r}")

    return -value if negative else value


def looks_like_credit(name: str, bank_category: str | None) -> bool:
    """Whether an imported row reads as money coming in."""
    if _CREDIT_NAME_PATTERN.search(name):
        return True
    category = (bank_category or "").lower()
    return any(keyword in category for keyword in _CREDIT_CATEGORY_KEYWORDS)


def resolve_category(bank_category: str | None, name: str, amount: float) -> str:
    """Bank category wins; otherwise the keyword heuristic; otherwise Uncategorized."""
    cleaned = (bank_category or "").strip()
    if cleaned:
        return cleaned
    if name:
        return categorize(name, amount)
    return UNCATEGORIZED


def _new_transaction(date: str, name: str, amount: float, category: str) -> Transaction:
    return Transaction(
        id=str(uuid.uuid4()),
        date=str(date)[:DATE_PREFIX_LENGTH],
        name=name or NO_DESCRIPTION,
        amount=amount,
        category=category,
    )


def build_transaction(row: CanonicalRow) -> Transaction:
    """Build a transaction from an imported row.

    Imports carry no reliable sign, so every row is treated as an expense
    unless its name or bank category reads as a credit.

    Raises:
        ValueError: If the row has no usable amount
    """
    if row.raw_amount is None:
        raise ValueError("Row has no amount")

    name = (row.raw_name or "").strip()
    magnitude = abs(normalize_amount(row.raw_amount))
    signed = magnitude if looks_like_credit(name, row.bank_category) else -magnitude
    if signed == 0:
        signed = 0.0  # avoid -0.0

    return _new_transaction(
        date=row.date,
        name=name,
        amount=signed,
        category=resolve_category(row.bank_category, name, signed),
    )


def build_manual_transaction(date: str, name: str | None, amount: float) -> Transaction:
    """Build a manually entered transaction.

    The caller's sign is taken as-is; no credit inference is applied.
    """
    cleaned = (name or "").strip()
    return _new_transaction(
        date=date,
        name=cleaned,
        amount=float(amount),
        category=resolve_category(None, cleaned, amount),
    )


def import_csv(
    text: str,
    aliases: ColumnAliases = DEFAULT_ALIASES,
    sample_size: int = DEFAULT_SAMPLE_SIZE,
) -> ImportOutcome:
    """Import every usable row of a CSV document.

    The document is parsed in full before any record is built, so a
    malformed document produces no records at all. Unusable rows (no date
    and no amount, or an amount that isn't a number) are skipped.

    Args:
        text: Decoded CSV document, first row is the header
        aliases: Column-name aliases for the source formats
        sample_size: How many created records to echo back

    Returns:
        ImportOutcome with count, sample and every created record

    Raises:
        CSVParseError: If the document is not well-formed CSV
    """
    rows = read_csv_rows(text)
    transactions: list[Transaction] = []
    skipped = 0

    for index, raw in enumerate(rows, start=1):
        canonical = normalize_row(raw, aliases)
        if canonical is None:
            skipped += 1
            continue
        try:
            transactions.append(build_transaction(canonical))
        except ValueError:
            # Don't log the value itself; amounts are user financial data.
            logger.warning("Skipping row with malformed amount", extra={"row": index})
            skipped += 1

    logger.info(
        "CSV import finished",
        extra={"rows": len(rows), "imported": len(transactions), "skipped": skipped},
    )
    return ImportOutcome(
        imported=len(transactions),
        sample=transactions[:sample_size],
        transactions=transactions,
        skipped=skipped,
    )
