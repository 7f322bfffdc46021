"""Repository implementations."""

from .transaction_repository import InMemoryTransactionRepository

__all__ = [
    "InMemoryTransactionRepository",
]
