"""Prometheus metrics for the transaction service.

Business Metrics:
- txn_operations_total: Service operations by operation and outcome
- txn_duplicate_rejections_total: Writes rejected as duplicates
- txn_stored_transactions: Records currently held in the store

Cache Metrics:
- txn_cache_requests_total: Cache lookups by cache and result (hit/miss)
- txn_cache_evictions_total: Cache removals by cache and reason

Technical Metrics:
- txn_operation_latency_seconds: Service operation latency
- txn_http_requests_total: HTTP requests by endpoint/status
- txn_http_request_latency_seconds: HTTP request latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

operations_total = Counter(
    "txn_operations_total",
    "Total number of transaction service operations",
    ["operation", "outcome"],  # outcome: success, not_found, duplicate, invalid
)

duplicate_rejections = Counter(
    "txn_duplicate_rejections_total",
    "Total number of writes rejected as duplicates",
    ["operation"],  # create, update
)

stored_transactions = Gauge(
    "txn_stored_transactions",
    "Number of transactions currently held in memory",
)


# =============================================================================
# Cache Metrics
# =============================================================================

cache_requests = Counter(
    "txn_cache_requests_total",
    "Total number of cache lookups",
    ["cache", "result"],  # hit, miss
)

cache_evictions = Counter(
    "txn_cache_evictions_total",
    "Total number of entries removed from a cache",
    ["cache", "reason"],  # expired, size, explicit
)


# =============================================================================
# Technical Metrics
# =============================================================================

operation_latency = Histogram(
    "txn_operation_latency_seconds",
    "Transaction service operation latency in seconds",
    ["operation"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)

http_requests_total = Counter(
    "txn_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "txn_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_operation(operation: str, outcome: str) -> None:
    """Record the outcome of a service operation."""
    operations_total.labels(operation=operation, outcome=outcome).inc()


def record_duplicate_rejection(operation: str) -> None:
    """Record a write rejected by duplicate detection."""
    duplicate_rejections.labels(operation=operation).inc()


def set_stored_transactions(count: int) -> None:
    """Update the stored-transactions gauge."""
    stored_transactions.set(count)


def record_cache_hit(cache_name: str) -> None:
    cache_requests.labels(cache=cache_name, result="hit").inc()


def record_cache_miss(cache_name: str) -> None:
    cache_requests.labels(cache=cache_name, result="miss").inc()


def record_cache_eviction(cache_name: str, reason: str, count: int = 1) -> None:
    """Record entries leaving a cache."""
    if count > 0:
        cache_evictions.labels(cache=cache_name, reason=reason).inc(count)


@contextmanager
def track_operation_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track service operation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        operation_latency.labels(operation=operation).observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
