"""
Storefront Backend - Request Logging Middleware
================================================

What:  One access-log line per HTTP request: method, path, status, duration,
       request ID and client address.
How:   Measures from middleware entry to response return; the log level
       follows the status class (5xx ERROR, 4xx WARNING, else INFO).
When:  Inside RequestIDMiddleware, outside FaultTranslationMiddleware, so
       translated faults are logged with their final 500 status.

Not logged: /health probes and /static asset requests.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from storefront.middleware.request_id import request_id_var

logger = logging.getLogger("storefront.access")

SKIPPED_PREFIXES = ("/health", "/static/")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client may be None in testing
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path.startswith(SKIPPED_PREFIXES):
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
