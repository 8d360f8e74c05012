"""Prometheus metrics for the Loan API service.

Metrics are organized into two categories:

Business Metrics (for Product/Risk):
- loan_applications_created_total: Applications opened
- loan_data_saves_total: Data submissions by resulting status
- loan_decisions_total: Final decisions by outcome
- loan_disbursements_total: Simulated disbursements by result
- loan_credit_score: Distribution of simulated credit scores

Technical Metrics (for Engineering/SRE):
- loan_decision_latency_seconds: Decision request latency
- loan_http_requests_total: HTTP requests by endpoint/status
- loan_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product/Risk dashboards)
# =============================================================================

applications_created_total = Counter(
    "loan_applications_created_total",
    "Total number of loan applications created",
)

data_saves_total = Counter(
    "loan_data_saves_total",
    "Total number of loan data submissions by resulting status",
    ["status"],  # pending, on_progress, completed
)

decisions_total = Counter(
    "loan_decisions_total",
    "Total number of final loan decisions",
    ["outcome"],  # approved, rejected
)

disbursements_total = Counter(
    "loan_disbursements_total",
    "Total number of simulated disbursements",
    ["result"],  # success, failure
)

credit_score_histogram = Histogram(
    "loan_credit_score",
    "Simulated credit scores assigned to applications",
    buckets=[350, 400, 450, 500, 550, 600, 650, 700, 750, 800, 850],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

decision_latency = Histogram(
    "loan_decision_latency_seconds",
    "Decision request latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

http_requests_total = Counter(
    "loan_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_application_created() -> None:
    """Record a new loan application."""
    applications_created_total.inc()


def record_data_saved(status: str) -> None:
    """Record a data submission and the status it produced."""
    data_saves_total.labels(status=status).inc()


def record_credit_score(score: int) -> None:
    """Record a simulated credit score."""
    credit_score_histogram.observe(score)


def record_decision(outcome: str) -> None:
    """Record a final decision in metrics."""
    decisions_total.labels(outcome=outcome).inc()


def record_disbursement(success: bool) -> None:
    """Record the result of a simulated disbursement."""
    disbursements_total.labels(result="success" if success else "failure").inc()


@contextmanager
def track_decision_latency() -> Generator[None, None, None]:
    """Context manager to track decision latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        decision_latency.observe(duration)


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
