"""Per-IP rate limiting for the distance endpoints."""
from __future__ import annotations

import time
from collections import deque
from collections.abc import Callable
from http import HTTPStatus

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from distance_api.config import Settings


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window limit per client IP, sized from Settings.

    Hits per IP are kept oldest first. Once per window the whole map is
    swept and IPs with no hit inside the window are dropped, so a warm
    instance only holds clients seen in the last window.
    """

    def __init__(self, app, settings: Settings, clock: Callable[[], float] = time.monotonic):
        super().__init__(app)
        self.max_requests = settings.rate_limit_requests
        self.window_seconds = settings.rate_limit_window
        self.clock = clock
        self.requests: dict[str, deque[float]] = {}
        self._last_sweep = clock()

    def _sweep(self, now: float) -> None:
        cutoff = now - self.window_seconds
        self.requests = {
            ip: hits for ip, hits in self.requests.items()
            if hits and hits[-1] > cutoff
        }
        self._last_sweep = now

    def _hits(self, client_ip: str, now: float) -> deque[float]:
        """Hits for client_ip still inside the window."""
        hits = self.requests.setdefault(client_ip, deque())
        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()
        return hits

    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        now = self.clock()

        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)

        hits = self._hits(client_ip, now)
        if len(hits) >= self.max_requests:
            return Response(
                content=HTTPStatus.TOO_MANY_REQUESTS.phrase,
                status_code=HTTPStatus.TOO_MANY_REQUESTS.value,
                headers={"Retry-After": str(self.window_seconds)},
                media_type="text/plain",
            )

        hits.append(now)
        return await call_next(request)
