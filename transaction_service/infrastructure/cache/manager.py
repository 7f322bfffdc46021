"""Registry of the named transaction caches."""

import time
from typing import Callable, Dict, List

from .ttl_cache import CacheStats, TTLCache

# Single-item cache keyed by transaction id
TRANSACTION_CACHE = "transactionCache"
# Collection cache holding the full listing under ALL_TRANSACTIONS_KEY
TRANSACTIONS_CACHE = "transactionsCache"

ALL_TRANSACTIONS_KEY = "all"


class CacheManager:
    """Creates and resolves the service's caches, all sharing one policy."""

    CACHE_NAMES = (TRANSACTION_CACHE, TRANSACTIONS_CACHE)

    def __init__(
        self,
        max_size: int = 1000,
        ttl_seconds: float = 1800.0,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._caches: Dict[str, TTLCache] = {
            name: TTLCache(
                name=name,
                max_size=max_size,
                ttl_seconds=ttl_seconds,
                timer=timer,
            )
            for name in self.CACHE_NAMES
        }

    def get_cache(self, name: str) -> TTLCache:
        """
        Resolve a cache by name.

        Raises:
            KeyError: If no cache with that name is configured
        """
        try:
            return self._caches[name]
        except KeyError:
            raise KeyError(f"Unknown cache: {name}") from None

    def clear_all(self) -> None:
        for cache in self._caches.values():
            cache.clear()

    def stats(self) -> List[CacheStats]:
        return [cache.stats() for cache in self._caches.values()]
