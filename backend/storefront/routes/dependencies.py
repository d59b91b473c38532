"""
Storefront Backend - Route Dependencies
========================================

What:  FastAPI dependencies shared by the route modules.
How:   create_app() stores the single ProductService on app.state; handlers
       receive it through Depends(get_product_service) instead of importing
       a module-level instance. Tests swap it via app.dependency_overrides.
"""

from starlette.requests import Request

from storefront.services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """Return the ProductService attached to the running application."""
    return request.app.state.product_service
