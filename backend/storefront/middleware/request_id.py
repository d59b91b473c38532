"""
Storefront Backend - Request ID Middleware
===========================================

What:  Assigns a short unique ID to each incoming request and returns it in
       the X-Request-ID response header.
How:   Honors a client-provided X-Request-ID, otherwise generates one; stores
       it in a ContextVar so loggers and the fault translator can read it.
When:  Outermost custom middleware (runs before all other processing).
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local storage for the current request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware that assigns a unique ID to each request for tracing.

    Behavior:
        1. Use the client's X-Request-ID header when present
        2. Otherwise (header absent or empty) generate the first 8 characters of a UUID4
        3. Store it in request_id_var
        4. Echo it back in the response headers
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]

        request_id_var.set(rid)

        response = await call_next(request)

        response.headers["X-Request-ID"] = rid

        return response
