"""
Request logging middleware for FastAPI application.

Logs one line per request and one per response, tagged with a correlation id.
"""

import logging
import time
import uuid
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl, urlencode

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Query parameters never written to the logs
REDACTED_PARAMS = frozenset({"apiKey", "api_key"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    HTTP middleware for request/response logging.

    Adds ``X-Correlation-ID`` and ``X-Response-Time-Ms`` to every response.
    """

    # High-frequency paths logged at DEBUG only
    QUIET_PATHS: tuple[str, ...] = (
        "/health",
        "/favicon.ico",
    )

    def _describe(self, request: Request) -> str:
        path = request.url.path
        if not request.url.query:
            return f"{request.method} {path}"
        params = [
            (key, "***" if key in REDACTED_PARAMS else value)
            for key, value in parse_qsl(request.url.query, keep_blank_values=True)
        ]
        return f"{request.method} {path}?{urlencode(params)}"

    def _client_ip(self, request: Request) -> str:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # First hop is the original client
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        quiet = request.url.path.startswith(self.QUIET_PATHS)
        description = self._describe(request)
        start_time = time.perf_counter()

        logger.log(
            logging.DEBUG if quiet else logging.INFO,
            f"[{correlation_id}] --> {description} from {self._client_ip(request)}",
        )

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"[{correlation_id}] <-- {description} ERROR in {duration_ms:.2f}ms: {e}")
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        if quiet:
            log_level = logging.DEBUG
        elif response.status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO
        logger.log(
            log_level,
            f"[{correlation_id}] <-- {description} {response.status_code} in {duration_ms:.2f}ms",
        )

        response.headers["X-Correlation-ID"] = correlation_id
        response.headers["X-Response-Time-Ms"] = f"{duration_ms:.2f}"
        return response
