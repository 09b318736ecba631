"""CSV reading and row normalization.

Two steps, kept separate so callers can feed rows from anywhere:

1. ``read_csv_rows`` turns a decoded CSV document into a list of
   header-keyed dicts, or raises ``CSVParseError`` for the whole document.
2. ``normalize_row`` maps one loosely-named row onto a ``CanonicalRow``
   using ``ColumnAliases``, or returns ``None`` when the row is unusable.
"""

import csv
import io
import logging
from collections.abc import Mapping
from typing import Any

from finance_robot.core.exceptions import CSVParseError
from finance_robot.parsers.formats import DEFAULT_ALIASES, ColumnAliases
from finance_robot.schemas.internal import CanonicalRow

logger = logging.getLogger(__name__)

DATE_PREFIX_LENGTH = 10


def read_csv_rows(text: str) -> list[dict[str, str]]:
    """Parse CSV text (first row is the header) into a list of dicts.

    Cells are trimmed and blank lines skipped. Every data row must have as
    many cells as the header; otherwise the document is rejected as a whole
    and nothing is returned.

    Args:
        text: Decoded CSV document

    Returns:
        One dict per data row, keyed by header names

    Raises:
        CSVParseError: If the document is not well-formed tabular text
    """
    # newline=None accepts \n, \r\n and bare \r line endings.
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff"), newline=None), strict=True)
    header: list[str] | None = None
    rows: list[dict[str, str]] = []

    try:
        for record in reader:
            cells = [cell.strip() for cell in record]
            if not any(cells):
                continue

            if header is None:
                header = cells
                continue

            if len(cells) != len(header):
                raise CSVParseError(
                    details={
                        "reason": "invalid record length",
                        "line": reader.line_num,
                        "expected": len(header),
                        "found": len(cells),
                    }
                )
            rows.append(dict(zip(header, cells)))
    except csv.Error as e:
        raise CSVParseError(details={"reason": str(e), "line": reader.line_num}) from e

    return rows


def resolve_field(row: Mapping[str, Any], candidates: tuple[str, ...]) -> str | None:
    """Return the first present, non-blank value among ``candidates``."""
    for key in candidates:
        value = row.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return None


def normalize_row(
    row: Mapping[str, Any], aliases: ColumnAliases = DEFAULT_ALIASES
) -> CanonicalRow | None:
    """Map one source row onto canonical fields.

    Args:
        row: Column name -> raw value
        aliases: Candidate column names per canonical field

    Returns:
        CanonicalRow, or None when neither a date nor an amount resolves
    """
    date = resolve_field(row, aliases.date)
    amount = resolve_field(row, aliases.amount)

    if date is None and amount is None:
        return None

    return CanonicalRow(
        date=(date or "")[:DATE_PREFIX_LENGTH],
        raw_name=resolve_field(row, aliases.name),
        raw_amount=amount,
        bank_category=resolve_field(row, aliases.category),
    )
