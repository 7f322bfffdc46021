"""Transaction service - orchestrates storage, duplicate policy and caching."""

import math
from dataclasses import replace
from datetime import datetime
from typing import Callable, List
from uuid import UUID

import structlog

from transaction_service.application.dto import (
    PageResponse,
    TransactionCreateRequest,
    TransactionPatch,
    TransactionResponse,
)
from transaction_service.core.metrics import (
    record_duplicate_rejection,
    record_operation,
    track_operation_latency,
)
from transaction_service.domain.entities import Transaction, TransactionStatus
from transaction_service.domain.entities.transaction import utc_now
from transaction_service.domain.exceptions import (
    DuplicateTransactionException,
    InvalidTransactionRequestException,
    TransactionNotFoundException,
)
from transaction_service.domain.interfaces import TransactionRepository
from transaction_service.infrastructure.cache import (
    ALL_TRANSACTIONS_KEY,
    TRANSACTION_CACHE,
    TRANSACTIONS_CACHE,
    CacheManager,
)
from transaction_service.infrastructure.locks import AccountLockRegistry

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.

    Reads are cache-aside. Writes check for duplicates and save while
    holding the account's lock, then update the caches before releasing
    it:

    - create: put the new snapshot, clear the collection cache
    - update: put the new snapshot, clear the collection cache
    - delete: evict the snapshot, clear the collection cache

    Paged reads always go to the repository.
    """

    DUPLICATE_WINDOW_SECONDS = 10

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        cache_manager: CacheManager,
        account_locks: AccountLockRegistry,
        duplicate_window_seconds: int = DUPLICATE_WINDOW_SECONDS,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._repo = transaction_repository
        self._transaction_cache = cache_manager.get_cache(TRANSACTION_CACHE)
        self._transactions_cache = cache_manager.get_cache(TRANSACTIONS_CACHE)
        self._account_locks = account_locks
        self._window = duplicate_window_seconds
        self._clock = clock

    async def create_transaction(
        self,
        request: TransactionCreateRequest,
    ) -> TransactionResponse:
        """
        Create a new PENDING transaction.

        Args:
            request: Amount, description, type and account number

        Returns:
            Snapshot of the stored transaction

        Raises:
            InvalidTransactionRequestException: If request validation fails
            DuplicateTransactionException: If an identical transaction was
                recorded on the same account within the duplicate window
        """
        self._raise_if_invalid("create", request.validate())

        transaction = Transaction(
            amount=request.amount,
            description=request.description,
            type=request.type,
            account_number=request.account_number,
            timestamp=self._clock(),
            status=TransactionStatus.PENDING,
        )

        log = logger.bind(
            transaction_id=str(transaction.id),
            account_number=transaction.account_number,
        )
        log.info("transaction_create_requested", type=transaction.type.value)

        with track_operation_latency("create"):
            async with self._account_locks.hold(transaction.account_number):
                await self._raise_if_duplicate("create", transaction)

                saved = await self._repo.save(transaction)
                response = TransactionResponse.from_entity(saved)

                self._transaction_cache.put(saved.id, response)
                self._transactions_cache.clear()

        record_operation("create", "success")
        log.info("transaction_created")

        return response

    async def get_transaction_by_id(self, transaction_id: UUID) -> TransactionResponse:
        """
        Get a transaction by ID, serving from the cache when possible.

        Raises:
            TransactionNotFoundException: If transaction not found
        """
        with track_operation_latency("get_by_id"):
            cached = self._transaction_cache.get(transaction_id)
            if cached is not None:
                record_operation("get_by_id", "success")
                return cached

            transaction = await self._repo.find_by_id(transaction_id)
            if transaction is None:
                self._raise_not_found("get_by_id", transaction_id)

            response = TransactionResponse.from_entity(transaction)
            self._transaction_cache.put(transaction_id, response)

        record_operation("get_by_id", "success")
        return response

    async def get_all_transactions(self) -> List[TransactionResponse]:
        """Get every transaction, serving from the collection cache when possible."""
        with track_operation_latency("get_all"):
            cached = self._transactions_cache.get(ALL_TRANSACTIONS_KEY)
            if cached is not None:
                record_operation("get_all", "success")
                return list(cached)

            transactions = await self._repo.find_all()
            snapshot = tuple(TransactionResponse.from_entity(t) for t in transactions)
            self._transactions_cache.put(ALL_TRANSACTIONS_KEY, snapshot)

        logger.info("transactions_listed", count=len(snapshot))
        record_operation("get_all", "success")

        return list(snapshot)

    async def get_transactions_page(self, page: int, size: int) -> PageResponse:
        """
        Get one page of transactions, newest first. Never cached.

        Args:
            page: Zero-based page index
            size: Page size, at least 1

        Raises:
            InvalidTransactionRequestException: If page < 0 or size < 1
        """
        errors = []
        if page < 0:
            errors.append("page: must be greater than or equal to 0")
        if size < 1:
            errors.append("size: must be greater than or equal to 1")
        self._raise_if_invalid("get_page", errors)

        with track_operation_latency("get_page"):
            transactions = await self._repo.find_page(page, size)
            total_elements = await self._repo.count()

        total_pages = math.ceil(total_elements / size)

        logger.info(
            "transactions_page_listed",
            page=page,
            size=size,
            returned=len(transactions),
            total_elements=total_elements,
        )
        record_operation("get_page", "success")

        return PageResponse(
            content=[TransactionResponse.from_entity(t) for t in transactions],
            page_number=page,
            page_size=size,
            total_elements=total_elements,
            total_pages=total_pages,
            first=page == 0,
            last=page == total_pages - 1 or total_pages == 0,
        )

    async def update_transaction(
        self,
        transaction_id: UUID,
        patch: TransactionPatch,
    ) -> TransactionResponse:
        """
        Apply a partial update to a transaction.

        Only the fields set on the patch change; id and timestamp never
        do. The patched record must not duplicate another transaction.

        Raises:
            InvalidTransactionRequestException: If patch validation fails
            TransactionNotFoundException: If transaction not found
            DuplicateTransactionException: If the patched record duplicates
                another transaction within the window
        """
        self._raise_if_invalid("update", patch.validate())

        log = logger.bind(transaction_id=str(transaction_id))
        log.info("transaction_update_requested", empty_patch=patch.is_empty)

        with track_operation_latency("update"):
            transaction = await self._repo.find_by_id(transaction_id)
            if transaction is None:
                self._raise_not_found("update", transaction_id)

            patched = self._apply_patch(transaction, patch)

            async with self._account_locks.hold(patched.account_number):
                # May have been deleted while waiting for the lock
                if not await self._repo.exists_by_id(transaction_id):
                    self._raise_not_found("update", transaction_id)

                await self._raise_if_duplicate("update", patched)

                saved = await self._repo.save(patched)
                response = TransactionResponse.from_entity(saved)

                self._transaction_cache.put(transaction_id, response)
                self._transactions_cache.clear()

        record_operation("update", "success")
        log.info("transaction_updated", status=saved.status.value)

        return response

    async def delete_transaction(self, transaction_id: UUID) -> None:
        """
        Delete a transaction.

        Raises:
            TransactionNotFoundException: If transaction not found
        """
        with track_operation_latency("delete"):
            if not await self._repo.exists_by_id(transaction_id):
                self._raise_not_found("delete", transaction_id)

            await self._repo.delete_by_id(transaction_id)

            self._transaction_cache.evict(transaction_id)
            self._transactions_cache.clear()

        record_operation("delete", "success")
        logger.info("transaction_deleted", transaction_id=str(transaction_id))

    def _apply_patch(self, transaction: Transaction, patch: TransactionPatch) -> Transaction:
        """Return a copy of the transaction with the patch's set fields applied."""
        changes = {
            "amount": patch.amount,
            "description": patch.description,
            "type": patch.type,
            "account_number": patch.account_number,
            "status": patch.status,
        }
        return replace(
            transaction,
            **{name: value for name, value in changes.items() if value is not None},
        )

    async def _raise_if_duplicate(self, operation: str, transaction: Transaction) -> None:
        if await self._repo.is_duplicate_within(transaction, self._window):
            logger.warning(
                "duplicate_transaction_rejected",
                operation=operation,
                transaction_id=str(transaction.id),
                account_number=transaction.account_number,
                window_seconds=self._window,
            )
            record_duplicate_rejection(operation)
            record_operation(operation, "duplicate")
            raise DuplicateTransactionException(self._window)

    def _raise_if_invalid(self, operation: str, errors: List[str]) -> None:
        if errors:
            record_operation(operation, "invalid")
            raise InvalidTransactionRequestException(
                "Validation failed: " + "; ".join(errors)
            )

    def _raise_not_found(self, operation: str, transaction_id: UUID) -> None:
        logger.warning(
            "transaction_not_found",
            operation=operation,
            transaction_id=str(transaction_id),
        )
        record_operation(operation, "not_found")
        raise TransactionNotFoundException(transaction_id)
