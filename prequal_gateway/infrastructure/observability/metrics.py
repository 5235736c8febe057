"""Prometheus metrics for monitoring qualification rates and offer mix"""

from typing import Sequence
from prometheus_client import Counter, Histogram

from prequal_gateway.domain.models import LoanOffer

# Decision metrics
decision_counter = Counter(
    "prequal_decision_total",
    "Total pre-qualification decisions made",
    ["outcome"],  # qualified | declined | no_viable_offer
)

offer_counter = Counter(
    "prequal_offer_total",
    "Loan offers generated by tier",
    ["tier"],  # full | moderate | conservative
)

validation_failure_counter = Counter(
    "prequal_validation_failures_total",
    "Rejected pre-qualification submissions by invalid field",
    ["field"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_decision(outcome: str, offers: Sequence[LoanOffer]) -> None:
    """Record decision outcome and which tiers were offered"""
    decision_counter.labels(outcome=outcome).inc()

    for offer in offers:
        offer_counter.labels(tier=offer.tier.value).inc()


def record_validation_failure(field: str) -> None:
    validation_failure_counter.labels(field=field).inc()
