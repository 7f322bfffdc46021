"""In-memory implementation of TransactionRepository."""

import threading
from typing import Dict, List, Optional
from uuid import UUID

from transaction_service.core.metrics import set_stored_transactions
from transaction_service.domain.entities import Transaction
from transaction_service.domain.interfaces import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """
    Dict-backed transaction repository.

    A single re-entrant lock guards the mapping. Critical sections never
    await, so single-key operations are linearizable and scans copy a
    consistent view before releasing the lock.
    """

    def __init__(self):
        self._store: Dict[UUID, Transaction] = {}
        self._lock = threading.RLock()

    async def save(self, transaction: Transaction) -> Transaction:
        """Store a copy of the transaction, replacing any previous version."""
        stored = transaction.copy()
        with self._lock:
            self._store[stored.id] = stored
            size = len(self._store)

        set_stored_transactions(size)
        return stored.copy()

    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        with self._lock:
            transaction = self._store.get(transaction_id)
            return transaction.copy() if transaction is not None else None

    async def find_all(self) -> List[Transaction]:
        return self._snapshot()

    async def find_page(self, page: int, size: int) -> List[Transaction]:
        """Return the page-th window of the newest-first ordering."""
        if page < 0:
            raise ValueError("page must be >= 0")
        if size < 1:
            raise ValueError("size must be >= 1")

        # Stable sorts: id ascending first, then timestamp descending
        ordered = sorted(self._snapshot(), key=lambda t: str(t.id))
        ordered.sort(key=lambda t: t.timestamp, reverse=True)

        start = page * size
        return ordered[start:start + size]

    async def count(self) -> int:
        with self._lock:
            return len(self._store)

    async def delete_by_id(self, transaction_id: UUID) -> None:
        with self._lock:
            self._store.pop(transaction_id, None)
            size = len(self._store)

        set_stored_transactions(size)

    async def exists_by_id(self, transaction_id: UUID) -> bool:
        with self._lock:
            return transaction_id in self._store

    async def is_duplicate_within(
        self,
        candidate: Transaction,
        window_seconds: float,
    ) -> bool:
        """Linear scan over a consistent copy of the store."""
        with self._lock:
            existing = list(self._store.values())

        for transaction in existing:
            if transaction.id == candidate.id:
                continue

            if window_seconds <= 0:
                if transaction.matches_for_duplication(candidate):
                    return True
            elif transaction.is_potential_duplicate(candidate, window_seconds):
                return True

        return False

    def _snapshot(self) -> List[Transaction]:
        with self._lock:
            return [transaction.copy() for transaction in self._store.values()]
