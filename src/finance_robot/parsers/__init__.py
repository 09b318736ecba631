"""CSV parsing module for bank transaction exports.

Bank exports disagree on column names, so parsing is split into:
- read_csv_rows: decoded text -> header-keyed rows
- normalize_row: one row -> CanonicalRow, driven by ColumnAliases data
"""

from finance_robot.parsers.csv_rows import normalize_row, read_csv_rows, resolve_field
from finance_robot.parsers.formats import DEFAULT_ALIASES, SOURCE_FORMATS, ColumnAliases

__all__ = [
    "ColumnAliases",
    "DEFAULT_ALIASES",
    "SOURCE_FORMATS",
    "normalize_row",
    "read_csv_rows",
    "resolve_field",
]
