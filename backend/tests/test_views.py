"""
Storefront Backend - Server-Rendered View Tests
================================================

What we test:
    ✅ Home, list and detail pages render with 200
    ✅ Unknown product ids render the not-found page with 404
    ✅ Unmatched paths and methods fall back to the not-found page
    ✅ Static assets are served
"""

import pytest


class TestPages:
    """Successful page renders."""

    @pytest.mark.asyncio
    async def test_home_page(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Welcome to the Storefront" in response.text

    @pytest.mark.asyncio
    async def test_products_list_page_shows_every_product(self, test_client, products):
        response = await test_client.get("/products")

        assert response.status_code == 200
        for product in products:
            assert f"/products/{product.id}" in response.text

    @pytest.mark.asyncio
    async def test_products_list_page_with_trailing_slash(self, test_client, products):
        response = await test_client.get("/products/")

        assert response.status_code == 200
        assert f"/products/{products[0].id}" in response.text

    @pytest.mark.asyncio
    async def test_product_detail_page_with_trailing_slash(self, test_client, products):
        response = await test_client.get(f"/products/{products[2].id}/")

        assert response.status_code == 200
        assert products[2].name in response.text

    @pytest.mark.asyncio
    async def test_product_detail_page(self, test_client, products):
        target = products[0]

        response = await test_client.get(f"/products/{target.id}")

        assert response.status_code == 200
        assert target.name in response.text
        assert f'data-product-id="{target.id}"' in response.text
        assert f"${target.price:.2f}" in response.text


class TestNotFound:
    """Missing products and unmatched routes."""

    @pytest.mark.asyncio
    async def test_unknown_product_renders_not_found(self, test_client):
        response = await test_client.get("/products/unknown-id")

        assert response.status_code == 404
        assert "Page not found" in response.text
        assert "unknown-id" in response.text

    @pytest.mark.asyncio
    async def test_undefined_path_renders_not_found(self, test_client):
        response = await test_client.get("/definitely/not/here")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")
        assert "Page not found" in response.text

    @pytest.mark.asyncio
    async def test_unmatched_method_renders_not_found(self, test_client):
        response = await test_client.post("/products")

        assert response.status_code == 404
        assert "Page not found" in response.text

    @pytest.mark.asyncio
    async def test_unmatched_api_path_renders_not_found(self, test_client):
        response = await test_client.get("/api/products/some-id/reviews")

        assert response.status_code == 404
        assert "Page not found" in response.text


class TestStaticFiles:

    @pytest.mark.asyncio
    async def test_stylesheet_is_served(self, test_client):
        response = await test_client.get("/static/css/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")


class TestRouteOrder:
    """Routes are registered in priority order."""

    def test_api_router_precedes_home_and_fallback(self, app):
        paths = [getattr(route, "path", None) for route in app.routes]

        assert paths.index("/products") < paths.index("/products/{product_id}")
        assert paths.index("/products/{product_id}") < paths.index("/api/products")
        assert paths.index("/api/products") < paths.index("/")
        assert paths.index("/") < paths.index("/{path:path}")
        assert paths[-1] == "/{path:path}"
