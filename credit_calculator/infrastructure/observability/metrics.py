"""Prometheus metrics for monitoring quote volume, rejections and credit rates"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Calculation metrics
request_counter = Counter(
    "calculator_requests_total",
    "Total pricing requests handled",
    ["operation", "outcome"],  # offers | credit ; priced | rejected | error
)

validation_failure_counter = Counter(
    "calculator_validation_failures_total",
    "Requests rejected by a lending rule",
    ["rule"],
)

credit_rate_histogram = Histogram(
    "calculator_credit_rate",
    "Final annual rate of priced credits (percent)",
    buckets=[0, 5, 8, 10, 12, 14, 16, 18, 20, 25, 30],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_offers() -> None:
    request_counter.labels(operation="offers", outcome="priced").inc()


def record_credit(rate: Decimal) -> None:
    """Record a priced credit and its final rate"""
    request_counter.labels(operation="credit", outcome="priced").inc()
    credit_rate_histogram.observe(float(rate))


def record_rejection(operation: str, rule: str) -> None:
    """Record a request rejected by a lending rule"""
    request_counter.labels(operation=operation, outcome="rejected").inc()
    validation_failure_counter.labels(rule=rule).inc()


def record_error(operation: str) -> None:
    request_counter.labels(operation=operation, outcome="error").inc()
