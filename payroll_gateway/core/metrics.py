"""Prometheus metrics for the Payroll Gateway service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- payroll_loan_decision_total: Loan decisions by outcome
- payroll_loan_simulation_total: Simulations by outcome
- payroll_loan_amount_bucket: Requested loan amounts by bucket

Technical Metrics (for Engineering/SRE):
- payroll_score_fetch_total: Score lookups by source (external, fallback)
- payroll_score_fetch_latency_seconds: Score API latency
- payroll_payment_confirmation_total: Payment confirmations by result
- payroll_payment_latency_seconds: Payment API latency
- payroll_installment_schedule_failures_total: Partial schedule writes
- payroll_rate_limited_total: Requests rejected by the rate limiter
- payroll_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from decimal import Decimal
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

loan_decision_total = Counter(
    "payroll_loan_decision_total",
    "Total number of loan decisions made",
    ["outcome"],  # approved, rejected
)

loan_simulation_total = Counter(
    "payroll_loan_simulation_total",
    "Total number of loan simulations",
    ["outcome"],  # accepted, margin_exceeded
)

loan_amount_bucket = Counter(
    "payroll_loan_amount_bucket",
    "Requested loan amounts by bucket",
    ["bucket", "outcome"],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

score_fetch_total = Counter(
    "payroll_score_fetch_total",
    "Total number of credit score lookups",
    ["source"],  # external, fallback
)

score_fetch_latency = Histogram(
    "payroll_score_fetch_latency_seconds",
    "Credit score API latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

payment_confirmation_total = Counter(
    "payroll_payment_confirmation_total",
    "Total number of payment confirmations",
    ["result"],  # approved, rejected, unavailable
)

payment_latency = Histogram(
    "payroll_payment_latency_seconds",
    "Payment simulator API latency in seconds",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

installment_schedule_failures = Counter(
    "payroll_installment_schedule_failures_total",
    "Total number of installment schedules that failed part way",
)

rate_limited_total = Counter(
    "payroll_rate_limited_total",
    "Total number of requests rejected by the rate limiter",
)

http_requests_total = Counter(
    "payroll_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "payroll_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_loan_decision(approved: bool, amount: Decimal) -> None:
    """Record a loan decision in metrics."""
    outcome = "approved" if approved else "rejected"
    loan_decision_total.labels(outcome=outcome).inc()
    loan_amount_bucket.labels(bucket=_get_amount_bucket(amount), outcome=outcome).inc()


def record_simulation(accepted: bool) -> None:
    """Record a loan simulation in metrics."""
    outcome = "accepted" if accepted else "margin_exceeded"
    loan_simulation_total.labels(outcome=outcome).inc()


def _get_amount_bucket(amount: Decimal) -> str:
    """Map a requested amount to a bucket label."""
    if amount <= 500:
        return "100-500"
    elif amount <= 1000:
        return "500-1000"
    elif amount <= 2500:
        return "1000-2500"
    elif amount <= 5000:
        return "2500-5000"
    else:
        return "5000+"


@contextmanager
def track_score_fetch_latency() -> Generator[None, None, None]:
    """Context manager to track score API latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        score_fetch_latency.observe(time.perf_counter() - start)


@contextmanager
def track_payment_latency() -> Generator[None, None, None]:
    """Context manager to track payment API latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        payment_latency.observe(time.perf_counter() - start)


def record_score_source(source: str) -> None:
    """Record where the score used for a decision came from."""
    score_fetch_total.labels(source=source).inc()


def record_payment_confirmation(result: str) -> None:
    """Record the outcome of a payment confirmation."""
    payment_confirmation_total.labels(result=result).inc()


def record_schedule_failure() -> None:
    """Record an installment schedule that failed part way."""
    installment_schedule_failures.inc()


def record_rate_limited() -> None:
    """Record a request rejected by the rate limiter."""
    rate_limited_total.inc()


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
