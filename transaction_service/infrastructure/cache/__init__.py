"""Bounded, time-expiring caches for transaction reads."""

from .manager import (
    ALL_TRANSACTIONS_KEY,
    TRANSACTION_CACHE,
    TRANSACTIONS_CACHE,
    CacheManager,
)
from .ttl_cache import CacheStats, TTLCache

__all__ = [
    "ALL_TRANSACTIONS_KEY",
    "TRANSACTION_CACHE",
    "TRANSACTIONS_CACHE",
    "CacheManager",
    "CacheStats",
    "TTLCache",
]
