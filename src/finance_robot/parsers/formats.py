"""Column-name aliases for known CSV export formats.

Bank exports name the same field differently ("Date" vs "Trans. Date",
"Amount" vs "Amount (USD)"). Each source format lists its own column names;
``DEFAULT_ALIASES`` merges them into one priority list per canonical field.

Supporting a new export means adding a ``ColumnAliases`` value here (or
passing a custom one to the importer), not touching the normalizer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColumnAliases:
    """Candidate column names per canonical field, in priority order."""

    date: tuple[str, ...] = ()
    name: tuple[str, ...] = ()
    amount: tuple[str, ...] = ()
    category: tuple[str, ...] = ()

    @classmethod
    def combine(cls, *formats: "ColumnAliases") -> "ColumnAliases":
        """Concatenate formats in order, keeping the first occurrence of each name."""

        def merged(field: str) -> tuple[str, ...]:
            names: list[str] = []
            for fmt in formats:
                for name in getattr(fmt, field):
                    if name not in names:
                        names.append(name)
            return tuple(names)

        return cls(
            date=merged("date"),
            name=merged("name"),
            amount=merged("amount"),
            category=merged("category"),
        )


# Manual/generic exports and the common US bank layouts.
GENERIC = ColumnAliases(
    date=("date", "Date", "TransactionDate", "Transaction Date"),
    name=("name", "Description", "Name", "Merchant", "Merchant Name"),
    amount=("amount", "Amount", "Transaction Amount", "Amount (USD)"),
    category=("Category",),
)

# Discover card export: Trans. Date, Post Date, Description, Amount, Category
DISCOVER = ColumnAliases(
    date=("Trans. Date",),
    name=("Description",),
    amount=("Amount",),
    category=("Category",),
)

SOURCE_FORMATS: dict[str, ColumnAliases] = {
    "generic": GENERIC,
    "discover": DISCOVER,
}

DEFAULT_ALIASES = ColumnAliases.combine(*SOURCE_FORMATS.values())
