"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request: method, path, status, duration.

    Redirects also log their target; unmatched routes log at WARNING.
    """

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("shorturl.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start) * 1000
        line = (
            f"{client_ip} {request.method} {request.url.path} -> "
            f"{response.status_code} ({duration_ms:.2f}ms)"
        )
        location = response.headers.get("location")
        if location:
            line += f" Location: {location}"

        level = logging.WARNING if response.status_code == 404 else logging.INFO
        self.logger.log(level, line)

        return response
