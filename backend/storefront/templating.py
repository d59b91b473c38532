"""
Storefront Backend - Template Rendering
========================================

What:  Jinja2 environment for the server-rendered pages plus a render helper.
How:   Starlette's Jinja2Templates loads templates from storefront/templates/.
       render() turns any jinja2.TemplateError into a TemplateRenderError so
       template faults reach the fault translation middleware as a typed
       application error.
Who:   Used by the view routes, the not-found fallback and the fault translator.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError
from starlette.requests import Request
from starlette.responses import Response

from storefront.exceptions import TemplateRenderError


PACKAGE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """
    Render `name` with `context` into an HTML response.

    Raises:
        TemplateRenderError: The template is missing or failed while rendering
    """
    try:
        return templates.TemplateResponse(
            request,
            name,
            context or {},
            status_code=status_code,
        )
    except TemplateError as exc:
        raise TemplateRenderError(template=name, reason=str(exc)) from exc
