"""
Storefront Backend - Health Check Route
========================================

What:  Liveness endpoint for monitoring and container probes.
How:   Reports version, environment, catalog size and uptime. The catalog
       lives in memory, so the service is healthy whenever it can answer.
"""

import time

from fastapi import APIRouter, Depends

from storefront import __version__
from storefront.config import settings
from storefront.routes.dependencies import get_product_service
from storefront.schemas.product import HealthResponse
from storefront.services.product_service import ProductService


router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    service: ProductService = Depends(get_product_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        product_count=len(service),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
