"""
Storefront Backend - Pydantic Models and Response Schemas
==========================================================

What:  The Product record plus the JSON shapes returned by the API.
How:   FastAPI uses these models to serialize responses and generate the
       OpenAPI documentation. Templates receive the same Product objects.
Who:   Built by the fake data generator, held by ProductService, returned by
       the API controller and rendered by the view controller.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Model
# ══════════════════════════════════════════════════════════════════════════


class Product(BaseModel):
    """
    What:  A synthetic catalog item.
    When:  Generated once at startup; immutable for the rest of the process.

    frozen=True makes instances hashable and rejects attribute assignment,
    so references handed out by ProductService cannot alter the catalog.
    """
    id: str = Field(description="Unique product identifier (UUID string)")
    name: str = Field(description="Display name")
    price: float = Field(ge=0, description="Unit price, two decimal places")
    description: str = Field(description="Marketing description")
    category: str = Field(description="Department the product is listed under")
    image: str = Field(description="URL of the product image")

    model_config = {"frozen": True}


# ══════════════════════════════════════════════════════════════════════════
# Error / Status Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Body of a JSON 404 returned by the API controller.

    Example:
        {
            "error": "not_found",
            "message": "product with ID 'abc' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class FaultResponse(BaseModel):
    """
    What:  Body of a JSON 500 produced by the fault translation middleware.

    `stack` is populated only in development mode and is null otherwise.
    """
    error: str = Field(description="Fixed error label")
    message: str = Field(description="Message of the exception that was raised")
    stack: Optional[str] = Field(default=None, description="Formatted traceback (development only)")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response for probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    environment: str = Field(description="Configured runtime environment")
    product_count: int = Field(description="Number of products in the catalog")
    uptime_seconds: float = Field(description="Seconds since service started")
