"""
Request Logging Middleware for FastAPI.

Logs one line per request with method, path, status code and duration, and
exposes the duration to clients in the ``X-Process-Time`` header.
"""

import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from nts.core.logging_config import get_logger

logger = get_logger(__name__)

SLOW_REQUEST_MS = 1000


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware logging every API request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process the request and log its outcome.

        Args:
            request: The incoming HTTP request
            call_next: The next middleware/handler

        Returns:
            The HTTP response
        """
        start_time = time.perf_counter()
        request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        request.state.request_id = request_id
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "API request failed: %s %s (%.2fms) request_id=%s",
                method,
                path,
                duration_ms,
                request_id,
                exc_info=True,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"
        response.headers["X-Request-Id"] = request_id

        if duration_ms > SLOW_REQUEST_MS:
            logger.warning("Slow API request: %s %s took %.2fms", method, path, duration_ms)
        logger.info(
            "%s %s -> %s (%.2fms) request_id=%s",
            method,
            path,
            response.status_code,
            duration_ms,
            request_id,
        )
        return response
