"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .transaction import (
    DuplicateTransactionException,
    InvalidTransactionRequestException,
    TransactionNotFoundException,
)

__all__ = [
    "DomainException",
    "DuplicateTransactionException",
    "InvalidTransactionRequestException",
    "TransactionNotFoundException",
]
