"""Prometheus metrics for gateway calls and inbound webhooks"""

from prometheus_client import Counter, Histogram

from temboplus.domain.catalog import StatusCode

request_counter = Counter(
    "temboplus_requests_total",
    "Gateway calls by operation and outcome",
    ["operation", "outcome"],  # success | validation | transport | api | business | decode | cancelled | error
)

request_latency_histogram = Histogram(
    "temboplus_request_latency_seconds",
    "Gateway round-trip time",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

webhook_counter = Counter(
    "temboplus_webhooks_total",
    "Inbound webhook callbacks by outcome",
    ["outcome"],  # accepted | rejected | pending | invalid | unknown
)

_WEBHOOK_OUTCOMES = {
    StatusCode.PAYMENT_ACCEPTED.value: "accepted",
    StatusCode.PAYMENT_REJECTED.value: "rejected",
    StatusCode.GENERIC_ERROR.value: "rejected",
    StatusCode.PENDING_ACK.value: "pending",
}


def record_request(operation: str, outcome: str) -> None:
    request_counter.labels(operation=operation, outcome=outcome).inc()


def record_webhook(status_code: str) -> None:
    """Record a callback outcome; pass ``"invalid"`` for bodies that failed validation"""
    if status_code == "invalid":
        outcome = "invalid"
    else:
        outcome = _WEBHOOK_OUTCOMES.get(status_code, "unknown")
    webhook_counter.labels(outcome=outcome).inc()
