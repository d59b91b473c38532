# Routes package init
"""
Storefront Backend - Routes Package
====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory (registration order, first match wins):
    - views.py:         GET /products            (product list page)
                        GET /products/{id}       (product detail page)
    - products_api.py:  GET /api/products        (JSON list)
                        GET /api/products/{id}   (JSON detail)
    - views.py:         GET /                    (home page, home_router)
    - health.py:        GET /health              (service health check)
    - fallback.py:      ANY /{path}              (not-found page)

List and detail routes also answer with a trailing slash (/products/, /api/products/).

Routes stay thin: pull the ProductService from dependencies.py, call it,
format the result. Faults are never caught here.
"""
