"""
Storefront Backend - Products JSON API
=======================================

What:  GET /api/products (list) and GET /api/products/{id} (detail).
How:   Reads from ProductService and returns JSON. An unknown id is answered
       here with a 404 ErrorResponse; every other failure propagates to the
       fault translation middleware.
Who:   Called by API clients and the "API" link in the site header.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.requests import Request

from storefront.middleware.request_id import request_id_var
from storefront.routes.dependencies import get_product_service
from storefront.schemas.product import ErrorResponse, FaultResponse, Product
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api/products", tags=["Products API"])


@router.get(
    "",
    response_model=List[Product],
    responses={
        200: {"description": "Every product in the catalog"},
        500: {"description": "Server error", "model": FaultResponse},
    },
    summary="List all products",
)
@router.get("/", response_model=List[Product], include_in_schema=False)
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[Product]:
    """Return the whole catalog as a JSON array, in generation order."""
    return list(service.list_products())


@router.get(
    "/{product_id}",
    response_model=Product,
    responses={
        200: {"description": "Product details", "model": Product},
        404: {"description": "Product not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": FaultResponse},
    },
    summary="Get a single product by ID",
)
@router.get("/{product_id}/", response_model=Product, include_in_schema=False)
async def get_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
):
    """
    Return one product as JSON.

    Not found:
        404 with {"error": "not_found", "message": ..., "request_id": ...}.
        The lookup returns None rather than raising, so this is handled
        locally and never reaches the fault translator.
    """
    product = service.get_by_id(product_id)
    if product is None:
        logger.info("API lookup for unknown product id %s", product_id)
        body = ErrorResponse(
            error="not_found",
            message=f"product with ID '{product_id}' was not found",
            request_id=request_id_var.get("") or None,
        )
        return JSONResponse(status_code=404, content=body.model_dump())

    return product
