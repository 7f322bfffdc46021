"""Data Transfer Objects for application layer."""

from .transaction import (
    PageResponse,
    TransactionCreateRequest,
    TransactionPatch,
    TransactionResponse,
)

__all__ = [
    "PageResponse",
    "TransactionCreateRequest",
    "TransactionPatch",
    "TransactionResponse",
]
