"""In-memory transaction store.

Records live for the lifetime of the process only. The store owns the
collection; the ingestion and aggregation services never see it directly,
they receive (or return) plain lists.
"""

import threading
from collections.abc import Iterable

from finance_robot.schemas.transaction import Transaction


class TransactionStore:
    """Append-only collection of transactions with a full reset."""

    def __init__(self, transactions: Iterable[Transaction] | None = None):
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = list(transactions or [])

    def list_all(self) -> list[Transaction]:
        """Snapshot of every stored transaction, in insertion order."""
        with self._lock:
            return list(self._transactions)

    def add(self, transaction: Transaction) -> Transaction:
        with self._lock:
            self._transactions.append(transaction)
        return transaction

    def extend(self, transactions: Iterable[Transaction]) -> int:
        """Append a batch in one step so concurrent imports never interleave."""
        batch = list(transactions)
        with self._lock:
            self._transactions.extend(batch)
        return len(batch)

    def reset(self) -> None:
        with self._lock:
            self._transactions = []

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
