"""Per-client request throttling for the format API."""
from __future__ import annotations

import logging
import time
from collections import defaultdict, deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from services.engine_config import EngineSettings

logger = logging.getLogger(__name__)


@dataclass
class RateLimitConfig:
    """Request allowance per client. A limit of 0 means unlimited."""
    requests_per_minute: int = 120
    burst_limit: int = 20  # Max requests in 1 second

    @classmethod
    def from_settings(cls, settings: EngineSettings) -> "RateLimitConfig":
        return cls(
            requests_per_minute=settings.rate_limit_per_minute,
            burst_limit=settings.rate_limit_burst,
        )


class RequestWindow:
    """Timestamps of one client's requests within the last minute."""

    def __init__(self):
        self._stamps: Deque[float] = deque()

    def prune(self, now: float) -> None:
        while self._stamps and self._stamps[0] <= now - 60:
            self._stamps.popleft()

    def record(self, now: float) -> None:
        self._stamps.append(now)

    def count_since(self, since: float) -> int:
        return sum(1 for t in self._stamps if t > since)

    def __len__(self) -> int:
        return len(self._stamps)

    def oldest(self) -> Optional[float]:
        return self._stamps[0] if self._stamps else None


def _too_many_requests(detail: str, retry_after: int) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"detail": detail, "retry_after": retry_after},
        headers={"Retry-After": str(retry_after)},
    )


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients over their per-second or per-minute allowance with 429."""

    def __init__(self, app, config: RateLimitConfig = None):
        super().__init__(app)
        self.config = config or RateLimitConfig()
        self.windows: Dict[str, RequestWindow] = defaultdict(RequestWindow)
        self._last_sweep = 0.0

    def sweep(self, now: float) -> None:
        """Forget clients without a request in the last minute."""
        for client_id in list(self.windows):
            window = self.windows[client_id]
            window.prune(now)
            if len(window) == 0:
                del self.windows[client_id]
        self._last_sweep = now

    def _client_id(self, request: Request) -> str:
        # Behind a proxy the first X-Forwarded-For entry is the client
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_id = self._client_id(request)
        now = time.time()
        if now - self._last_sweep >= 60:
            self.sweep(now)
        window = self.windows[client_id]
        window.prune(now)

        burst_limit = self.config.burst_limit
        if burst_limit and window.count_since(now - 1) >= burst_limit:
            logger.warning(f"Burst limit hit by {client_id} on {request.url.path}")
            return _too_many_requests("Rate limit exceeded: too many requests per second", 1)

        minute_limit = self.config.requests_per_minute
        if minute_limit and len(window) >= minute_limit:
            retry_after = max(1, int(60 - (now - window.oldest())))
            logger.warning(f"Minute limit hit by {client_id} on {request.url.path}")
            return _too_many_requests(f"Rate limit exceeded: {minute_limit} requests per minute", retry_after)

        window.record(now)

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(minute_limit)
        response.headers["X-RateLimit-Remaining"] = str(max(0, minute_limit - len(window)))
        return response
