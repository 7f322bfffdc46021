"""Transaction entity representing a banking transaction held in memory."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class TransactionType(str, Enum):
    """Kind of banking event."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"
    TRANSFER = "TRANSFER"
    PAYMENT = "PAYMENT"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class TransactionStatus(str, Enum):
    """Processing status. Any status may follow any other."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"
    PROCESSING = "PROCESSING"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Transaction:
    """
    A single banking transaction.

    The id and timestamp are assigned once at creation; the remaining
    fields change only through the service's update path.

    Attributes:
        amount: Strictly positive monetary amount
        description: Free-form, non-empty description
        type: Kind of banking event
        account_number: Opaque account handle
        id: Globally unique identifier
        timestamp: Creation instant (UTC)
        status: Processing status, PENDING on creation
    """

    amount: Decimal
    description: str
    type: TransactionType
    account_number: str
    id: UUID = field(default_factory=uuid4)
    timestamp: datetime = field(default_factory=utc_now)
    status: TransactionStatus = TransactionStatus.PENDING

    def copy(self) -> "Transaction":
        """Return a detached snapshot of this record."""
        return replace(self)

    def matches_for_duplication(self, other: "Transaction | None") -> bool:
        """Check whether the duplicate-relevant fields are all equal."""
        if other is None:
            return False
        if other is self:
            return True

        return (
            self.amount == other.amount
            and self.description == other.description
            and self.type == other.type
            and self.account_number == other.account_number
        )

    def is_potential_duplicate(
        self,
        other: "Transaction | None",
        window_seconds: float,
    ) -> bool:
        """
        Check whether another transaction looks like the same event.

        Both must be on the same account with equal amount, description
        and type, and their timestamps at most ``window_seconds`` apart.
        """
        if other is None:
            return False
        if other is self:
            return True

        if not self.matches_for_duplication(other):
            return False

        seconds_between = abs((self.timestamp - other.timestamp).total_seconds())
        return seconds_between <= window_seconds
