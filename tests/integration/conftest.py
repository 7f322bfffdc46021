"""
Fixtures for integration tests.

Provides:
- Test client for the FastAPI app
- Fresh in-memory repository, caches and account locks per test
- A controllable clock for exercising the duplicate window
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from transaction_service.main import app
from transaction_service.application.services import TransactionService
from transaction_service.core.dependencies import (
    get_cache_manager,
    get_transaction_repository,
    get_transaction_service,
)
from transaction_service.infrastructure.cache import CacheManager
from transaction_service.infrastructure.locks import AccountLockRegistry
from transaction_service.infrastructure.repositories import InMemoryTransactionRepository


BASE_PATH = "/api/v1/transactions"


# =============================================================================
# Test Doubles
# =============================================================================

class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 9, 17, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def cache_manager() -> CacheManager:
    return CacheManager()


@pytest.fixture
def account_locks() -> AccountLockRegistry:
    return AccountLockRegistry()


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    repository: InMemoryTransactionRepository,
    cache_manager: CacheManager,
    account_locks: AccountLockRegistry,
    clock: FakeClock,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with isolated state.

    Each test gets its own store, caches and locks, and a service whose
    clock only advances through the ``clock`` fixture.
    """
    async def override_get_transaction_service():
        return TransactionService(
            transaction_repository=repository,
            cache_manager=cache_manager,
            account_locks=account_locks,
            clock=clock,
        )

    app.dependency_overrides[get_transaction_service] = override_get_transaction_service
    app.dependency_overrides[get_transaction_repository] = lambda: repository
    app.dependency_overrides[get_cache_manager] = lambda: cache_manager

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def rent_request() -> dict:
    """Request body for a rent payment."""
    return {
        "amount": 150.75,
        "description": "Rent",
        "type": "PAYMENT",
        "accountNumber": "ACC-1",
    }
