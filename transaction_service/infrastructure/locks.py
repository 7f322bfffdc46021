"""Per-key asyncio locks for serializing writes on the same account."""

import asyncio
import weakref
from contextlib import asynccontextmanager
from typing import AsyncIterator


class AccountLockRegistry:
    """
    Hands out one asyncio.Lock per account number.

    Locks are held weakly, so an account's lock disappears once no
    coroutine holds or waits on it.
    """

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def get_lock(self, account_number: str) -> asyncio.Lock:
        lock = self._locks.get(account_number)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[account_number] = lock
        return lock

    @asynccontextmanager
    async def hold(self, account_number: str) -> AsyncIterator[None]:
        """Serialize the enclosed block with other holders of the same account."""
        lock = self.get_lock(account_number)
        async with lock:
            yield

    def __len__(self) -> int:
        return len(self._locks)
