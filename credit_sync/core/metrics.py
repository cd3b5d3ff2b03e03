"""Prometheus metrics for the Credit Sync service.

Business Metrics:
- credit_sync_credit_decision_total: Credit decisions by outcome
- credit_sync_credit_limit: Distribution of approved limits
- credit_sync_order_process_total: Single-order processing outcomes

Technical Metrics:
- credit_sync_sync_run_total: Sync passes by outcome
- credit_sync_orders_synced_total: Fetched orders by sync result
- credit_sync_order_fetch_latency_seconds: Order source latency
- credit_sync_order_fetch_failures_total: Order source failures
- credit_sync_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credit_decision_total = Counter(
    "credit_sync_credit_decision_total",
    "Total number of credit decisions made",
    ["outcome", "tier"],  # approved, rejected
)

credit_limit_histogram = Histogram(
    "credit_sync_credit_limit",
    "Approved credit limits",
    buckets=[100, 250, 500, 1000, 2500, 5000, 10000, 25000],
)

order_process_total = Counter(
    "credit_sync_order_process_total",
    "Single-order processing outcomes",
    ["outcome"],  # processing, pending_approval, skipped, error
)


# =============================================================================
# Technical Metrics
# =============================================================================

sync_run_total = Counter(
    "credit_sync_sync_run_total",
    "Total number of order sync passes",
    ["outcome"],  # completed, aborted
)

orders_synced_total = Counter(
    "credit_sync_orders_synced_total",
    "Orders seen by sync passes",
    ["result"],  # persisted, skipped, failed
)

order_fetch_latency = Histogram(
    "credit_sync_order_fetch_latency_seconds",
    "Order source fetch latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

order_fetch_failures = Counter(
    "credit_sync_order_fetch_failures_total",
    "Total number of order source failures",
    ["error_type"],  # timeout, error, malformed
)

http_requests_total = Counter(
    "credit_sync_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_sync_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_decision(approved: bool, tier: str, limit: float) -> None:
    """Record a credit decision in metrics."""
    outcome = "approved" if approved else "rejected"
    credit_decision_total.labels(outcome=outcome, tier=tier).inc()
    if approved:
        credit_limit_histogram.observe(limit)


def record_order_processed(outcome: str) -> None:
    """Record the outcome of a single-order processing call."""
    order_process_total.labels(outcome=outcome).inc()


def record_sync_run(aborted: bool, persisted: int, skipped: int, failed: int) -> None:
    """Record a completed or aborted sync pass."""
    sync_run_total.labels(outcome="aborted" if aborted else "completed").inc()
    if persisted:
        orders_synced_total.labels(result="persisted").inc(persisted)
    if skipped:
        orders_synced_total.labels(result="skipped").inc(skipped)
    if failed:
        orders_synced_total.labels(result="failed").inc(failed)


@contextmanager
def track_order_fetch_latency() -> Generator[None, None, None]:
    """Context manager to track order source latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        order_fetch_latency.observe(duration)


def record_order_fetch_failure(error_type: str) -> None:
    """Record an order source failure."""
    order_fetch_failures.labels(error_type=error_type).inc()


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
