"""Thread-safe LRU cache with expire-after-write semantics."""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from transaction_service.core.metrics import (
    record_cache_eviction,
    record_cache_hit,
    record_cache_miss,
)


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time counters for a single cache."""

    name: str
    size: int
    max_size: int
    hits: int
    misses: int
    evictions: int

    @property
    def requests(self) -> int:
        return self.hits + self.misses

    @property
    def hit_rate(self) -> float:
        return self.hits / self.requests if self.requests else 0.0


@dataclass
class _Entry:
    value: Any
    expires_at: float


class TTLCache:
    """
    Named cache bounded by entry count and age.

    Entries expire ``ttl_seconds`` after they were written, regardless of
    how often they are read. When a put would exceed ``max_size`` the
    least recently used entry is dropped.
    """

    def __init__(
        self,
        name: str,
        max_size: int = 1000,
        ttl_seconds: float = 1800.0,
        timer: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be >= 1")
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self.name = name
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._timer = timer
        self._entries: "OrderedDict[Hashable, _Entry]" = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        with self._lock:
            entry = self._entries.get(key)

            if entry is not None and entry.expires_at <= self._timer():
                del self._entries[key]
                self._evictions += 1
                record_cache_eviction(self.name, "expired")
                entry = None

            if entry is None:
                self._misses += 1
                record_cache_miss(self.name)
                return None

            self._entries.move_to_end(key)
            self._hits += 1

        record_cache_hit(self.name)
        return entry.value

    def put(self, key: Hashable, value: Any) -> None:
        """Insert or replace an entry and restart its expiry timer."""
        with self._lock:
            now = self._timer()
            self._entries[key] = _Entry(value=value, expires_at=now + self.ttl_seconds)
            self._entries.move_to_end(key)

            expired = self._purge_expired_locked(now)
            overflow = 0
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
                overflow += 1
            self._evictions += expired + overflow

        record_cache_eviction(self.name, "expired", expired)
        record_cache_eviction(self.name, "size", overflow)

    def evict(self, key: Hashable) -> None:
        """Remove a single entry if present."""
        with self._lock:
            removed = self._entries.pop(key, None) is not None

        if removed:
            record_cache_eviction(self.name, "explicit")

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()

        record_cache_eviction(self.name, "explicit", removed)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                size=len(self._entries),
                max_size=self.max_size,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and entry.expires_at > self._timer()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_expired_locked(self, now: float) -> int:
        """Drop expired entries. Caller holds the lock."""
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)
