"""
Storefront Backend - FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() builds the catalog, wires middleware and
       routes in a fixed order, and returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn storefront.main:app) or the `storefront`
       console script (run()).
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────────────────────┐ │
    │  │ Req ID   │→│ Logging  │→│  Fault Translation   │ │
    │  └──────────┘ └──────────┘ └──────────────────────┘ │
    │                                                     │
    │  Routes (first match wins):                         │
    │  /static → /products → /products/{id}               │
    │  → /api/products[/{id}] → / → /health → catch-all   │
    │                                                     │
    │  app.state.product_service: the one catalog          │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles

from storefront import __version__
from storefront.config import settings
from storefront.middleware.errors import FaultTranslationMiddleware
from storefront.middleware.logging import RequestLoggingMiddleware
from storefront.middleware.request_id import RequestIDMiddleware
from storefront.routes import fallback, health, products_api, views
from storefront.services.fake_data import generate_fake_products
from storefront.services.product_service import ProductService
from storefront.templating import STATIC_DIR

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Structured Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,  # Override any existing logging config
    )

    # Our own access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what is being served.
    Shutdown: nothing to release; the catalog lives in memory only.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Storefront %s starting up (environment=%s)", __version__, settings.environment)
    logger.info("Catalog ready with %d products", len(app.state.product_service))
    logger.info("Server running at => http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Storefront shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(product_service: Optional[ProductService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        product_service: Catalog to serve. When omitted, a fresh one is
                         generated from settings.product_count / product_seed.

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    if product_service is None:
        product_service = ProductService(
            generate_fake_products(settings.product_count, seed=settings.product_seed)
        )

    app = FastAPI(
        title="Storefront API",
        description="Demo storefront serving a generated product catalog as HTML and JSON.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.product_service = product_service

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = outermost):
    # RequestID → Logging → FaultTranslation → GZip → CORS → router
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(FaultTranslationMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Routes ───────────────────────────────────────────────────
    # Order is significant: the fallback router matches every path
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(views.router)
    app.include_router(products_api.router)
    app.include_router(views.home_router)
    app.include_router(health.router)
    app.include_router(fallback.router)

    return app


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    uvicorn.run(
        "storefront.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# ── Application Instance ─────────────────────────────────────────────────
# uvicorn expects `storefront.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    run()
