"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Seat ledger metrics
seat_lock_attempts = Counter(
    'seat_lock_attempts_total',
    'Total seat lock attempts',
    ['result']  # locked, not_found, already_locked, already_booked
)

seat_confirm_attempts = Counter(
    'seat_confirm_attempts_total',
    'Total seat confirm attempts',
    ['result']  # booked, not_found, lock_expired, not_locked
)

seat_lock_expirations = Counter(
    'seat_lock_expirations_total',
    'Locks released lazily after their timeout elapsed'
)

seats_by_status = Gauge(
    'seats_by_status',
    'Seats per status as of the last full sweep',
    ['status']
)

# HTTP metrics
http_request_latency = Histogram(
    'http_request_latency_seconds',
    'HTTP request latency',
    ['method', 'status_code'],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_lock_attempt(result: str):
    """Record lock attempt. Result: locked or an error code."""
    seat_lock_attempts.labels(result=result).inc()


def record_confirm_attempt(result: str):
    """Record confirm attempt. Result: booked or an error code."""
    seat_confirm_attempts.labels(result=result).inc()


def record_lock_expiration():
    seat_lock_expirations.inc()


def record_status_counts(counts: dict):
    """Publish per-status seat counts. Keys are SeatStatus values."""
    for status, count in counts.items():
        seats_by_status.labels(status=str(getattr(status, "value", status))).set(count)


def record_request_latency(method: str, status_code: int, seconds: float):
    http_request_latency.labels(method=method, status_code=str(status_code)).observe(seconds)
