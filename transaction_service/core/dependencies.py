"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends

from transaction_service.application.services import TransactionService
from transaction_service.core.config import settings
from transaction_service.infrastructure.cache import CacheManager
from transaction_service.infrastructure.locks import AccountLockRegistry
from transaction_service.infrastructure.repositories import InMemoryTransactionRepository

# Process-wide state shared by every request
transaction_repository = InMemoryTransactionRepository()
cache_manager = CacheManager(
    max_size=settings.cache_max_size,
    ttl_seconds=settings.cache_ttl_seconds,
)
account_locks = AccountLockRegistry()


# Shared state dependencies
def get_transaction_repository() -> InMemoryTransactionRepository:
    """Get the shared TransactionRepository instance."""
    return transaction_repository


def get_cache_manager() -> CacheManager:
    """Get the shared CacheManager instance."""
    return cache_manager


def get_account_locks() -> AccountLockRegistry:
    """Get the shared AccountLockRegistry instance."""
    return account_locks


# Service dependencies
async def get_transaction_service(
    repository: Annotated[InMemoryTransactionRepository, Depends(get_transaction_repository)],
    caches: Annotated[CacheManager, Depends(get_cache_manager)],
    locks: Annotated[AccountLockRegistry, Depends(get_account_locks)],
) -> TransactionService:
    """Get a TransactionService bound to the shared state."""
    return TransactionService(
        transaction_repository=repository,
        cache_manager=caches,
        account_locks=locks,
        duplicate_window_seconds=settings.duplicate_window_seconds,
    )
