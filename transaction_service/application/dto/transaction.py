"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from transaction_service.domain.entities import (
    Transaction,
    TransactionStatus,
    TransactionType,
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class TransactionCreateRequest:
    """Input data for creating a transaction."""

    amount: Decimal
    description: str
    type: TransactionType
    account_number: str

    def validate(self) -> List[str]:
        errors = []

        if self.amount is None:
            errors.append("amount: Amount is required")
        elif self.amount <= 0:
            errors.append("amount: Amount must be positive")

        if _is_blank(self.description):
            errors.append("description: Description is required")

        if self.type is None:
            errors.append("type: Transaction type is required")

        if _is_blank(self.account_number):
            errors.append("accountNumber: Account number is required")

        return errors


@dataclass(frozen=True)
class TransactionPatch:
    """
    Partial update for a transaction.

    A field left as None is not touched by the update.
    """

    amount: Optional[Decimal] = None
    description: Optional[str] = None
    type: Optional[TransactionType] = None
    account_number: Optional[str] = None
    status: Optional[TransactionStatus] = None

    def validate(self) -> List[str]:
        errors = []

        if self.amount is not None and self.amount <= 0:
            errors.append("amount: Amount must be positive")

        if self.description is not None and _is_blank(self.description):
            errors.append("description: Description must not be blank")

        if self.account_number is not None and _is_blank(self.account_number):
            errors.append("accountNumber: Account number must not be blank")

        return errors

    @property
    def is_empty(self) -> bool:
        return all(
            value is None
            for value in (
                self.amount,
                self.description,
                self.type,
                self.account_number,
                self.status,
            )
        )


@dataclass(frozen=True)
class TransactionResponse:
    """Immutable snapshot of a transaction returned to callers."""

    id: UUID
    amount: Decimal
    description: str
    type: TransactionType
    account_number: str
    timestamp: datetime
    status: TransactionStatus

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            amount=transaction.amount,
            description=transaction.description,
            type=transaction.type,
            account_number=transaction.account_number,
            timestamp=transaction.timestamp,
            status=transaction.status,
        )


@dataclass(frozen=True)
class PageResponse:
    """One page of transactions plus paging metadata."""

    content: List[TransactionResponse]
    page_number: int
    page_size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool
