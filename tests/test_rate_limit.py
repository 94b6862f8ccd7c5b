"""Tests for the per-client rate limiting middleware."""

from pathlib import Path

# Add project root to path
import sys
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fastapi import FastAPI
from fastapi.testclient import TestClient

from middleware.rate_limit import RateLimitConfig, RateLimitMiddleware, RequestWindow
from services.engine_config import EngineSettings


def _client(config: RateLimitConfig) -> TestClient:
    app = FastAPI()
    app.add_middleware(RateLimitMiddleware, config=config)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    return TestClient(app)


class TestRequestWindow:
    """Sliding one-minute window."""

    def test_prune_and_count(self):
        window = RequestWindow()
        for t in (100.0, 130.0, 159.5, 160.0):
            window.record(t)

        window.prune(165.0)
        assert len(window) == 3
        assert window.oldest() == 130.0
        assert window.count_since(159.0) == 2

    def test_empty(self):
        window = RequestWindow()
        window.prune(0.0)
        assert len(window) == 0
        assert window.oldest() is None


class TestRateLimitMiddleware:
    """429 responses once a client is over its allowance."""

    def test_minute_limit(self):
        client = _client(RateLimitConfig(requests_per_minute=3, burst_limit=0))
        for remaining in (2, 1, 0):
            response = client.get("/ping")
            assert response.status_code == 200
            assert response.headers["X-RateLimit-Remaining"] == str(remaining)

        response = client.get("/ping")
        assert response.status_code == 429
        assert "3 requests per minute" in response.json()["detail"]
        assert int(response.headers["Retry-After"]) >= 1

    def test_burst_limit(self):
        client = _client(RateLimitConfig(requests_per_minute=0, burst_limit=2))
        statuses = [client.get("/ping").status_code for _ in range(3)]
        assert statuses[:2] == [200, 200]
        assert statuses[2] == 429

    def test_clients_are_tracked_separately(self):
        client = _client(RateLimitConfig(requests_per_minute=1, burst_limit=0))
        assert client.get("/ping", headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 200
        assert client.get("/ping", headers={"X-Forwarded-For": "10.0.0.1"}).status_code == 429
        assert client.get("/ping", headers={"X-Forwarded-For": "10.0.0.2, 10.0.0.1"}).status_code == 200

    def test_idle_clients_are_forgotten(self):
        limiter = RateLimitMiddleware(FastAPI(), RateLimitConfig())
        limiter.windows["10.0.0.1"].record(100.0)
        limiter.windows["10.0.0.2"].record(150.0)

        limiter.sweep(170.0)
        assert list(limiter.windows) == ["10.0.0.2"]

        limiter.sweep(300.0)
        assert len(limiter.windows) == 0

    def test_config_from_settings(self):
        settings = EngineSettings(rate_limit_per_minute=30, rate_limit_burst=5)
        config = RateLimitConfig.from_settings(settings)
        assert config.requests_per_minute == 30
        assert config.burst_limit == 5
