"""
Request timing middleware.

Logs one line per request with the method, path (and query string) and
the time spent handling it.
"""

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


def request_label(request: Request) -> str:
    """Build the '[METHOD] /path?query' label used in timing logs."""
    label = f"[{request.method.upper()}] {request.url.path}"
    if request.url.query:
        label += f"?{request.url.query}"
    return label


class RequestTimingMiddleware(BaseHTTPMiddleware):
    """Log how long each request took, in milliseconds."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        label = request_label(request)
        start_time = time.perf_counter()

        response = await call_next(request)

        process_time = (time.perf_counter() - start_time) * 1000  # Convert to ms
        logger.info(f"{label}: {process_time:.3f}ms")
        return response
