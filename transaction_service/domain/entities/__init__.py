"""Domain Entities - Core business objects."""

from .transaction import Transaction, TransactionStatus, TransactionType

__all__ = [
    "Transaction",
    "TransactionStatus",
    "TransactionType",
]
