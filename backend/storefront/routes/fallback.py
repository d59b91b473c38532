"""
Storefront Backend - Catch-All Route
=====================================

What:  Renders not_found.html with 404 for any path/method nothing else matched.
How:   A single route accepting every method on "/{path:path}". It must be the
       last route registered (see create_app) since routes match in order.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from starlette.requests import Request
from starlette.responses import Response

from storefront.templating import render

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter(include_in_schema=False)


@router.api_route("/{path:path}", methods=ALL_METHODS, response_class=HTMLResponse)
async def render_not_found(path: str, request: Request) -> Response:
    return render(request, "not_found.html", status_code=404)
