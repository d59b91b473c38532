"""
Storefront Backend - Fault Translation Middleware
==================================================

What:  Turns any exception escaping the routing pipeline into exactly one
       500 response.
How:   FaultTranslationMiddleware wraps call_next in a single try/except and
       hands the exception to translate_fault(), a plain function mapping
       (request, exception) → Response. No retry; the fault ends that request
       only, the process keeps serving.
When:  Only after a handler raised. Normal responses, including the 404s
       produced by the controllers, pass through untouched.

Response shape is decided by the request path:
    /api...      → JSON {"error": "Internal Server Error", "message": str(exc),
                         "stack": <traceback in development, else null>,
                         "request_id": ...}
    anything else → error.html rendered with a fixed title and message plus
                    the exception's message
"""

import html
import logging
import traceback
from typing import Optional

from fastapi.responses import HTMLResponse, JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from storefront.config import settings
from storefront.exceptions import StorefrontError, TemplateRenderError
from storefront.middleware.request_id import request_id_var
from storefront.schemas.product import FaultResponse
from storefront.templating import render

logger = logging.getLogger(__name__)

API_PREFIX = "/api"
API_ERROR_LABEL = "Internal Server Error"
ERROR_PAGE_TITLE = "Something went wrong"
ERROR_PAGE_MESSAGE = "An unexpected error occurred while processing your request."

# Served when error.html itself cannot be rendered
_FALLBACK_ERROR_PAGE = (
    "<!DOCTYPE html><html><head><title>{title}</title></head>"
    "<body><h1>{title}</h1><p>{message}</p><pre>{error}</pre></body></html>"
)


def _fault_message(exc: Exception) -> str:
    if isinstance(exc, StorefrontError):
        return exc.message
    return str(exc)


def _format_stack(exc: Exception) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def translate_fault(request: Request, exc: Exception) -> Response:
    """
    Map an unhandled exception to the response for this request.

    Args:
        request: The request whose handler raised
        exc:     The exception that escaped the handler

    Returns:
        A 500 JSONResponse for /api paths, a 500 HTML page otherwise
    """
    rid = request_id_var.get("")
    path = request.url.path
    message = _fault_message(exc)
    context = exc.context if isinstance(exc, StorefrontError) else {}

    logger.error(
        "[%s] Unhandled error on %s %s: %s | Context: %s",
        rid,
        request.method,
        path,
        message,
        context,
        exc_info=exc,
    )

    if path.startswith(API_PREFIX):
        stack: Optional[str] = _format_stack(exc) if settings.is_development else None
        body = FaultResponse(
            error=API_ERROR_LABEL,
            message=message,
            stack=stack,
            request_id=rid or None,
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    try:
        return render(
            request,
            "error.html",
            {
                "title": ERROR_PAGE_TITLE,
                "message": ERROR_PAGE_MESSAGE,
                "error": message,
                "request_id": rid,
            },
            status_code=500,
        )
    except TemplateRenderError as render_exc:
        logger.error("[%s] Error page unavailable: %s", rid, render_exc.message)
        return HTMLResponse(
            status_code=500,
            content=_FALLBACK_ERROR_PAGE.format(
                title=ERROR_PAGE_TITLE,
                message=ERROR_PAGE_MESSAGE,
                error=html.escape(message),
            ),
        )


class FaultTranslationMiddleware(BaseHTTPMiddleware):
    """
    Wraps the whole routing pipeline; the single place fault responses are shaped.

    Registered innermost of the custom middleware (see create_app), so the
    request ID is already set and the access log records the translated 500.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return translate_fault(request, exc)
