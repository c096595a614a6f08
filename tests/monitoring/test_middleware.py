"""Tests for Prometheus metrics middleware."""

from types import SimpleNamespace

import pytest
from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.testclient import TestClient
from prometheus_client import Counter, Histogram

from filmapi.monitoring.middleware import (
    HTTP_REQUEST_DURATION,
    HTTP_REQUESTS_TOTAL,
    PrometheusMiddleware,
    _route_path,
    mount_metrics,
)


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with Prometheus middleware."""
    test_app = FastAPI()
    test_app.add_middleware(PrometheusMiddleware)
    mount_metrics(test_app)

    @test_app.get("/api/v1/ping")
    def ping():
        return {"status": "ok"}

    @test_app.get("/api/v1/things/{thing_id}")
    def thing(thing_id: int):
        return {"id": thing_id}

    @test_app.get("/api/v1/error")
    def error():
        raise HTTPException(status_code=500, detail="test error")

    widgets = APIRouter(prefix="/widgets")

    @widgets.get("/{widget_id}/parts")
    def widget_parts(widget_id: int):
        return []

    test_app.include_router(widgets, prefix="/api/v1")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """TestClient for the middleware test app."""
    return TestClient(app)


class TestMetricsEndpoint:
    """Tests for the /metrics Prometheus endpoint."""

    @staticmethod
    def test_metrics_returns_text(client: TestClient) -> None:
        response = client.get("/metrics")
        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    @staticmethod
    def test_metrics_contains_http_series(client: TestClient) -> None:
        client.get("/api/v1/ping")
        body = client.get("/metrics").text
        assert "filmapi_http_requests_total" in body
        assert "filmapi_http_request_duration_seconds_count" in body


class TestPrometheusMiddleware:
    """Tests for HTTP request metrics recording."""

    @staticmethod
    def test_successful_request_recorded(client: TestClient) -> None:
        client.get("/api/v1/ping")
        body = client.get("/metrics").text
        assert 'method="GET"' in body
        assert 'path="/api/v1/ping"' in body
        assert 'status="200"' in body

    @staticmethod
    def test_path_label_uses_route_template(client: TestClient) -> None:
        client.get("/api/v1/things/41")
        client.get("/api/v1/things/42")
        body = client.get("/metrics").text
        assert 'path="/api/v1/things/{thing_id}"' in body
        assert 'path="/api/v1/things/41"' not in body

    @staticmethod
    def test_error_request_recorded(client: TestClient) -> None:
        client.get("/api/v1/error")
        assert 'status="500"' in client.get("/metrics").text

    @staticmethod
    def test_metrics_endpoint_not_recorded(client: TestClient) -> None:
        client.get("/metrics")
        lines = [
            line
            for line in client.get("/metrics").text.splitlines()
            if line.startswith("filmapi_http_requests_total{")
        ]
        for line in lines:
            assert 'path="/metrics' not in line


class TestMetricDefinitions:
    """Tests for metric object types and naming."""

    @staticmethod
    def test_types() -> None:
        assert isinstance(HTTP_REQUESTS_TOTAL, Counter)
        assert isinstance(HTTP_REQUEST_DURATION, Histogram)

    @staticmethod
    def test_filmapi_prefix() -> None:
        assert HTTP_REQUESTS_TOTAL._name.startswith("filmapi_")
        assert HTTP_REQUEST_DURATION._name.startswith("filmapi_")


def _request(path: str, template: str | None) -> SimpleNamespace:
    """Stand-in request carrying a matched route template."""
    route = SimpleNamespace(path=template) if template is not None else None
    return SimpleNamespace(scope={"route": route}, url=SimpleNamespace(path=path))


class TestRoutePath:
    """Tests for the path label of a request."""

    @staticmethod
    def test_included_router_label(client: TestClient) -> None:
        client.get("/api/v1/widgets/7/parts")
        body = client.get("/metrics").text
        assert 'path="/api/v1/widgets/{widget_id}/parts"' in body

    @staticmethod
    def test_template_without_router_prefixes() -> None:
        request = _request("/api/v1/characters/2/movies", "/characters/{character_id}/movies")
        assert _route_path(request) == "/api/v1/characters/{character_id}/movies"

    @staticmethod
    def test_template_with_prefixes() -> None:
        request = _request("/api/v1/characters/2", "/api/v1/characters/{character_id}")
        assert _route_path(request) == "/api/v1/characters/{character_id}"

    @staticmethod
    def test_unmatched_uses_raw_path() -> None:
        assert _route_path(_request("/nowhere/3", None)) == "/nowhere/3"
