"""Prometheus metrics for the credit application service.

Business Metrics:
- credit_app_credit_requests_total: Credit requests by outcome
- credit_app_credit_value_bucket: Created credits by value bucket
- credit_app_credit_lookups_total: Credit lookups by outcome
- credit_app_customers_registered_total: Registered customers

Technical Metrics:
- credit_app_credit_latency_seconds: Credit service latency by operation
- credit_app_http_requests_total: HTTP requests by endpoint/status
- credit_app_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

credit_requests_total = Counter(
    "credit_app_credit_requests_total",
    "Total number of credit requests",
    ["outcome"],  # created, invalid_date, customer_not_found
)

credit_value_bucket = Counter(
    "credit_app_credit_value_bucket",
    "Created credits by requested value bucket",
    ["bucket"],
)

credit_lookups_total = Counter(
    "credit_app_credit_lookups_total",
    "Total number of credit lookups",
    ["operation", "outcome"],  # found, not_found, denied
)

customers_registered_total = Counter(
    "credit_app_customers_registered_total",
    "Total number of registered customers",
)


# =============================================================================
# Technical Metrics
# =============================================================================

credit_latency = Histogram(
    "credit_app_credit_latency_seconds",
    "Credit service latency in seconds",
    ["operation"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "credit_app_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "credit_app_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_credit_request(outcome: str, credit_value: Decimal | None = None) -> None:
    """Record a credit request in metrics."""
    credit_requests_total.labels(outcome=outcome).inc()

    if outcome == "created" and credit_value is not None:
        credit_value_bucket.labels(bucket=_get_credit_value_bucket(credit_value)).inc()


def _get_credit_value_bucket(credit_value: Decimal) -> str:
    """Map a credit value to a bucket label."""
    if credit_value <= 1000:
        return "1k"
    elif credit_value <= 10000:
        return "1k-10k"
    elif credit_value <= 100000:
        return "10k-100k"
    elif credit_value <= 1000000:
        return "100k-1m"
    else:
        return "1m+"


def record_credit_lookup(operation: str, outcome: str) -> None:
    """Record a credit lookup in metrics."""
    credit_lookups_total.labels(operation=operation, outcome=outcome).inc()


def record_customer_registered() -> None:
    """Record a newly registered customer."""
    customers_registered_total.inc()


@contextmanager
def track_credit_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track credit service latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        credit_latency.labels(operation=operation).observe(duration)


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
