"""Pydantic schemas for API request/response validation."""

from .transaction import (
    TransactionCreateSchema,
    TransactionUpdateSchema,
    TransactionResponseSchema,
    TransactionPageSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "TransactionCreateSchema",
    "TransactionUpdateSchema",
    "TransactionResponseSchema",
    "TransactionPageSchema",
    "ErrorResponseSchema",
]
