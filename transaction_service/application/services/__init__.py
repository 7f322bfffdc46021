"""Application services (use cases)."""

from .transaction_service import TransactionService

__all__ = [
    "TransactionService",
]
