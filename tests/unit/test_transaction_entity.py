"""
Unit Tests for the Transaction entity.

These tests verify:
1. Defaults assigned at creation (id, timestamp, PENDING status)
2. Snapshot copies are detached from the original
3. Exact-match duplicate comparison
4. Time-windowed duplicate comparison
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from transaction_service.domain.entities import (
    Transaction,
    TransactionStatus,
    TransactionType,
)


BASE_TIME = datetime(2025, 9, 17, 12, 0, 0, tzinfo=timezone.utc)


def make_transaction(
    amount: str = "100.00",
    description: str = "Groceries",
    txn_type: TransactionType = TransactionType.PAYMENT,
    account_number: str = "ACC-1",
    seconds_offset: float = 0,
) -> Transaction:
    """Helper to create transactions relative to BASE_TIME."""
    return Transaction(
        amount=Decimal(amount),
        description=description,
        type=txn_type,
        account_number=account_number,
        timestamp=BASE_TIME + timedelta(seconds=seconds_offset),
    )


class TestTransactionDefaults:

    def test_new_transaction_is_pending_with_id_and_timestamp(self):
        before = datetime.now(timezone.utc)
        transaction = Transaction(
            amount=Decimal("10"),
            description="Coffee",
            type=TransactionType.DEBIT,
            account_number="ACC-1",
        )

        assert transaction.id is not None
        assert transaction.status == TransactionStatus.PENDING
        assert transaction.timestamp >= before
        assert transaction.timestamp.tzinfo is not None

    def test_ids_are_unique(self):
        first = make_transaction()
        second = make_transaction()

        assert first.id != second.id

    def test_copy_is_detached(self):
        original = make_transaction()
        snapshot = original.copy()

        snapshot.description = "Changed"
        snapshot.status = TransactionStatus.COMPLETED

        assert original.description == "Groceries"
        assert original.status == TransactionStatus.PENDING
        assert snapshot.id == original.id


class TestMatchesForDuplication:

    def test_identical_fields_match(self):
        assert make_transaction().matches_for_duplication(make_transaction())

    def test_amount_equality_is_numeric(self):
        assert make_transaction(amount="100").matches_for_duplication(
            make_transaction(amount="100.00")
        )

    @pytest.mark.parametrize(
        "other",
        [
            make_transaction(amount="100.01"),
            make_transaction(description="Rent"),
            make_transaction(txn_type=TransactionType.TRANSFER),
            make_transaction(account_number="ACC-2"),
        ],
    )
    def test_any_differing_field_does_not_match(self, other):
        assert not make_transaction().matches_for_duplication(other)

    def test_none_does_not_match(self):
        assert not make_transaction().matches_for_duplication(None)

    def test_time_is_ignored(self):
        assert make_transaction().matches_for_duplication(
            make_transaction(seconds_offset=3600)
        )


class TestIsPotentialDuplicate:

    def test_within_window_is_duplicate(self):
        assert make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=5), 10
        )

    def test_exactly_at_window_boundary_is_duplicate(self):
        assert make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=10), 10
        )

    def test_outside_window_is_not_duplicate(self):
        assert not make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=11), 10
        )

    def test_window_is_symmetric(self):
        assert make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=-9), 10
        )
        assert not make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=-11), 10
        )

    def test_different_account_is_never_duplicate(self):
        assert not make_transaction().is_potential_duplicate(
            make_transaction(account_number="ACC-2"), 10
        )

    def test_different_description_is_not_duplicate(self):
        assert not make_transaction().is_potential_duplicate(
            make_transaction(description="Rent", seconds_offset=1), 10
        )

    def test_none_is_not_duplicate(self):
        assert not make_transaction().is_potential_duplicate(None, 10)

    def test_fractional_gap_past_window_is_not_duplicate(self):
        assert not make_transaction().is_potential_duplicate(
            make_transaction(seconds_offset=10.4), 10
        )
