"""Router combining all route modules."""

from fastapi import APIRouter

from catalog_api.api import health, products

api_router = APIRouter()

# Health checks
api_router.include_router(health.router)

# Catalog filtering (public, no auth)
api_router.include_router(products.router, tags=["products"])
