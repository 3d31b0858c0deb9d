"""Request Logging Middleware: one structured log line per HTTP request.

Invariants:
    - Every response carries X-Request-Duration-ms
    - Log line fields: method, path, status_code, duration_ms
    - Exceptions are logged as status 500 and re-raised to the error handlers
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Measure request duration and log it."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        try:
            response = await call_next(request)
        except Exception:
            _log_request(method, path, 500, start)
            raise

        duration_ms = _log_request(method, path, response.status_code, start)
        response.headers["X-Request-Duration-ms"] = str(duration_ms)
        return response


def _log_request(method: str, path: str, status_code: int, start: float) -> int:
    duration_ms = int((time.perf_counter() - start) * 1000)
    logger.info(
        f"{method} {path} {status_code} {duration_ms}ms",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )
    return duration_ms
