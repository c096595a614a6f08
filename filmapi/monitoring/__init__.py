"""Prometheus instrumentation for the Film API."""

from filmapi.monitoring.metrics import ASSOCIATION_SET_SIZE, ASSOCIATION_SYNC_TOTAL
from filmapi.monitoring.middleware import (
    HTTP_REQUEST_DURATION,
    HTTP_REQUESTS_TOTAL,
    PrometheusMiddleware,
    mount_metrics,
)

__all__ = [
    "ASSOCIATION_SYNC_TOTAL",
    "ASSOCIATION_SET_SIZE",
    "HTTP_REQUESTS_TOTAL",
    "HTTP_REQUEST_DURATION",
    "PrometheusMiddleware",
    "mount_metrics",
]
