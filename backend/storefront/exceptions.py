"""
Storefront Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the failures the storefront can hit.
How:   Each exception class carries a message and optional context dict.
       None of them are caught by route handlers: they propagate to the
       fault translation middleware (middleware/errors.py), which is the only
       place that decides the shape of a fault response.
Who:   Raised by services and the template helper.

Exception Hierarchy:
    StorefrontError (base)
    ├── CatalogError         → raised at startup, catalog breaks its invariants
    └── TemplateRenderError  → 500, a Jinja2 template failed to render

A missing product is deliberately absent from this hierarchy. Looking up an
unknown id is an expected outcome (ProductService.get_by_id returns None) and
each controller answers it with a 404 on its own.
"""

from typing import Any, Dict, Optional


class StorefrontError(Exception):
    """
    Base exception for all Storefront application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged with the fault)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class CatalogError(StorefrontError):
    """
    Raised when a product catalog cannot be served as-is.

    When:    ProductService is constructed with two products sharing an id.
    Effect:  App creation fails; a catalog with ambiguous ids never goes live.
    """

    def __init__(
        self,
        message: str = "Product catalog is invalid",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class TemplateRenderError(StorefrontError):
    """
    Raised when a Jinja2 template fails to load or render.

    What:    Wraps jinja2.TemplateError with the name of the failing template.
    When:    Missing template file, undefined filter, syntax error, ...
    HTTP:    500 (HTML error page or JSON, depending on the request path)
    """

    def __init__(
        self,
        template: str,
        reason: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"Failed to render template '{template}'"
        if reason:
            message = f"{message}: {reason}"
        ctx = context or {}
        ctx["template"] = template
        super().__init__(message=message, context=ctx)
        self.template = template
