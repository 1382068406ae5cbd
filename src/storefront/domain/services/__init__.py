"""Domain services for Storefront."""

from storefront.domain.services.customer_service import CustomerService
from storefront.domain.services.product_service import ProductService

__all__ = [
    "CustomerService",
    "ProductService",
]
