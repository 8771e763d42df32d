"""
Rate limiting middleware.

In-memory sliding window per client IP. With several worker processes each
worker keeps its own window.
"""
import threading
import time
import logging
from collections import defaultdict
from typing import Callable, Dict, List, Optional, Tuple

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from medfinder.core.config import settings
from medfinder.core.exceptions import BusinessError

logger = logging.getLogger(__name__)

EXEMPT_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


class RateLimiter:
    """In-memory rate limiter with sliding window."""

    def __init__(
        self,
        requests: int = 100,
        window: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            requests: Maximum requests allowed in window
            window: Time window in seconds
            clock: Time source, swappable in tests
        """
        self.requests = requests
        self.window = window
        self._clock = clock
        self._lock = threading.Lock()
        self.clients: Dict[str, List[float]] = defaultdict(list)
        self.last_cleanup = clock()

    def is_allowed(self, client_id: str) -> Tuple[bool, int]:
        """
        Record a request for `client_id` if it fits in the window.

        Returns:
            (allowed, remaining)
        """
        with self._lock:
            now = self._clock()

            if now - self.last_cleanup > 5 * self.window:
                self._cleanup(now)
                self.last_cleanup = now

            cutoff = now - self.window
            timestamps = [ts for ts in self.clients[client_id] if ts > cutoff]
            self.clients[client_id] = timestamps

            if len(timestamps) >= self.requests:
                return False, 0
            timestamps.append(now)
            return True, self.requests - len(timestamps)

    def _cleanup(self, now: float):
        cutoff = now - self.window
        for client_id in list(self.clients.keys()):
            timestamps = [ts for ts in self.clients[client_id] if ts > cutoff]
            if timestamps:
                self.clients[client_id] = timestamps
            else:
                del self.clients[client_id]

        logger.debug(f"Rate limiter cleanup: {len(self.clients)} active clients")


rate_limiter = RateLimiter(
    requests=settings.RATE_LIMIT_REQUESTS,
    window=settings.RATE_LIMIT_WINDOW_SECONDS,
)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Applies a `RateLimiter` to every non-exempt request."""

    def __init__(self, app, limiter: Optional[RateLimiter] = None):
        super().__init__(app)
        self.limiter = limiter or rate_limiter

    async def dispatch(self, request: Request, call_next):
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        client_id = f"ip:{client_ip}"

        allowed, remaining = self.limiter.is_allowed(client_id)
        if not allowed:
            exc = BusinessError.rate_limit_exceeded(
                f"Rate limit exceeded for {client_id} on {request.method} {request.url.path}",
                retry_after=self.limiter.window,
                limit=self.limiter.requests,
            )
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": f"Rate limit exceeded. Try again in {self.limiter.window} seconds."},
                headers=exc.headers,
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.requests)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Window"] = str(self.limiter.window)
        return response
