"""Transaction-related domain exceptions."""

from uuid import UUID

from .base import DomainException


class TransactionNotFoundException(DomainException):
    """Raised when a transaction cannot be found."""

    code = "TRANSACTION_NOT_FOUND"

    def __init__(self, transaction_id: UUID | str):
        super().__init__(f"Transaction not found with id: {transaction_id}")
        self.transaction_id = str(transaction_id)


class DuplicateTransactionException(DomainException):
    """Raised when a write matches a recent transaction on the same account."""

    code = "DUPLICATE_TRANSACTION"

    def __init__(self, window_seconds: int | None = None):
        if window_seconds is None:
            message = "A duplicate transaction already exists"
        else:
            message = f"A duplicate transaction was detected within {window_seconds} seconds"

        super().__init__(message)
        self.window_seconds = window_seconds


class InvalidTransactionRequestException(DomainException):
    """Raised when a transaction request violates field constraints."""

    code = "INVALID_TRANSACTION_REQUEST"
