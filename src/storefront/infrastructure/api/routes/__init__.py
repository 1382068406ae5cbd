"""API Routes for Storefront."""

from storefront.infrastructure.api.routes.customers_router import router as customers_router
from storefront.infrastructure.api.routes.products_router import router as products_router

__all__ = [
    "customers_router",
    "products_router",
]
