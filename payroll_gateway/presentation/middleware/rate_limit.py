"""Per-client rate limiting middleware."""

from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from payroll_gateway.core.metrics import record_rate_limited
from payroll_gateway.core.rate_limit import RateLimitStore

from .request_context import get_request_id

logger = structlog.get_logger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rejects clients that exceed ``max_requests`` within ``window_seconds``.

    Clients are identified by their address. Counters live in the injected
    store, so a shared store can replace the in-memory one when running
    more than one instance.
    """

    EXEMPT_PATHS = frozenset({"/v1/health", "/metrics"})

    def __init__(
        self,
        app: ASGIApp,
        store: RateLimitStore,
        max_requests: int,
        window_seconds: float,
    ):
        super().__init__(app)
        self._store = store
        self._max_requests = max_requests
        self._window_seconds = window_seconds

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        client_key = request.client.host if request.client else "unknown"
        count = self._store.hit(client_key, self._window_seconds)

        if count > self._max_requests:
            record_rate_limited()
            logger.warning(
                "rate_limit_exceeded",
                client=client_key,
                count=count,
                max_requests=self._max_requests,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "RATE_LIMIT_EXCEEDED",
                    "message": "Too many requests. Please try again later.",
                    "request_id": get_request_id(),
                },
                headers={"Retry-After": str(int(self._window_seconds))},
            )

        return await call_next(request)
