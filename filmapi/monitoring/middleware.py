"""Prometheus metrics middleware for FastAPI.

Exposes HTTP request metrics and a /metrics endpoint for Prometheus
scraping. Requests are labelled with the route template
(``/api/v1/characters/{character_id}``) so ids do not multiply series.
"""

import time

from fastapi import FastAPI
from prometheus_client import Counter, Histogram, make_asgi_app
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# =============================================================================
# HTTP METRICS
# =============================================================================

HTTP_REQUESTS_TOTAL = Counter(
    "filmapi_http_requests_total",
    "Total HTTP requests",
    ["method", "path", "status"],
)

HTTP_REQUEST_DURATION = Histogram(
    "filmapi_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "path"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


def _route_path(request: Request) -> str:
    """Return the full template of the matched route, or the raw path.

    The route template may omit the prefixes of the routers it was included
    through. Those are taken back from the leading segments of the request
    path, since every template parameter matches exactly one segment.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if template is None:
        return request.url.path

    template_parts = [part for part in template.split("/") if part]
    path_parts = [part for part in request.url.path.split("/") if part]
    if len(template_parts) > len(path_parts):
        return template

    prefix = path_parts[: len(path_parts) - len(template_parts)]
    return "/" + "/".join(prefix + template_parts)


# =============================================================================
# MIDDLEWARE
# =============================================================================


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Records HTTP request metrics for Prometheus.

    Skips recording for the /metrics endpoint itself.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        """Process request and record metrics.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware/handler in the chain.

        Returns:
            HTTP response from downstream handler.
        """
        if request.url.path.startswith("/metrics"):
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start

        path = _route_path(request)
        HTTP_REQUESTS_TOTAL.labels(
            method=request.method, path=path, status=str(response.status_code)
        ).inc()
        HTTP_REQUEST_DURATION.labels(method=request.method, path=path).observe(duration)

        return response


# =============================================================================
# MOUNT HELPER
# =============================================================================


def mount_metrics(app: FastAPI) -> None:
    """Mount the /metrics Prometheus endpoint on a FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.mount("/metrics", make_asgi_app())
