"""Repository interfaces for transaction storage."""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from transaction_service.domain.entities import Transaction


class TransactionRepository(ABC):
    """
    Abstract repository for Transaction storage.

    Every record handed in or out is a snapshot: callers never hold a
    reference to the stored object.
    """

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        """
        Insert or replace the record with ``transaction.id``.

        Args:
            transaction: The transaction to store

        Returns:
            A snapshot of the stored record
        """
        ...

    @abstractmethod
    async def find_by_id(self, transaction_id: UUID) -> Optional[Transaction]:
        """
        Retrieve a transaction by ID.

        Args:
            transaction_id: The transaction's unique identifier

        Returns:
            The transaction if found, None otherwise
        """
        ...

    @abstractmethod
    async def find_all(self) -> List[Transaction]:
        """
        Retrieve every stored transaction.

        Returns:
            List of transactions in no particular order
        """
        ...

    @abstractmethod
    async def find_page(self, page: int, size: int) -> List[Transaction]:
        """
        Retrieve one page of transactions, newest first.

        Args:
            page: Zero-based page index
            size: Number of transactions per page

        Returns:
            At most ``size`` transactions, ordered by timestamp descending
            with ties broken by id

        Raises:
            ValueError: If page is negative or size is less than 1
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored transactions."""
        ...

    @abstractmethod
    async def delete_by_id(self, transaction_id: UUID) -> None:
        """Remove a transaction if present. Deleting twice is a no-op."""
        ...

    @abstractmethod
    async def exists_by_id(self, transaction_id: UUID) -> bool:
        """Check whether a transaction is stored."""
        ...

    @abstractmethod
    async def is_duplicate_within(
        self,
        candidate: Transaction,
        window_seconds: float,
    ) -> bool:
        """
        Check whether another stored record duplicates the candidate.

        Args:
            candidate: The transaction about to be written
            window_seconds: Maximum timestamp distance; zero or negative
                means no time constraint

        Returns:
            True if a different record on the same account has equal
            amount, description and type within the window
        """
        ...

    async def is_duplicate(self, candidate: Transaction) -> bool:
        """Check for an exact-match duplicate regardless of time."""
        return await self.is_duplicate_within(candidate, 0)
