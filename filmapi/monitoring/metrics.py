"""Prometheus metrics for catalog operations."""

from prometheus_client import Counter, Histogram

ASSOCIATION_SYNC_TOTAL = Counter(
    "filmapi_association_sync_total",
    "Association replacement requests",
    ["relationship", "outcome"],
)

ASSOCIATION_SET_SIZE = Histogram(
    "filmapi_association_set_size",
    "Number of distinct related ids persisted per association replacement",
    ["relationship"],
    buckets=[0, 1, 2, 3, 5, 10, 25, 50, 100],
)
