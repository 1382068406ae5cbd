"""Persistence repositories for database operations."""

from storefront.infrastructure.persistence.repositories.customer_repository import (
    CustomerRepository,
)
from storefront.infrastructure.persistence.repositories.product_repository import (
    ProductRepository,
)

__all__ = [
    "CustomerRepository",
    "ProductRepository",
]
