"""
Storefront Backend - Server-Rendered Views
===========================================

What:  HTML pages: home (/), product list (/products), product detail
       (/products/{id}).
How:   Same ProductService calls as the JSON API, rendered through Jinja2
       templates instead of serialized. Unknown ids render not_found.html
       with 404; template failures surface as TemplateRenderError.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse
from starlette.requests import Request
from starlette.responses import Response

from storefront.routes.dependencies import get_product_service
from storefront.services.product_service import ProductService
from storefront.templating import render

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Views"], include_in_schema=False)


@router.get("/products", response_class=HTMLResponse)
@router.get("/products/", response_class=HTMLResponse)
async def render_products_list(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Product grid page."""
    return render(request, "products.html", {"products": service.list_products()})


@router.get("/products/{product_id}", response_class=HTMLResponse)
@router.get("/products/{product_id}/", response_class=HTMLResponse)
async def render_product_page(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> Response:
    """Product detail page, or the not-found page with 404."""
    product = service.get_by_id(product_id)
    if product is None:
        logger.info("Product page requested for unknown id %s", product_id)
        return render(
            request,
            "not_found.html",
            {"message": f"We couldn't find a product with ID '{product_id}'."},
            status_code=404,
        )

    return render(request, "product.html", {"product": product})


# Registered after the JSON API router (see create_app)
home_router = APIRouter(tags=["Views"], include_in_schema=False)


@home_router.get("/", response_class=HTMLResponse)
async def render_home(request: Request) -> Response:
    return render(request, "index.html")
