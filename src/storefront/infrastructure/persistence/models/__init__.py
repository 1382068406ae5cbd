"""SQLAlchemy models for the Storefront tables."""

from storefront.infrastructure.persistence.models.customer import CustomerModel
from storefront.infrastructure.persistence.models.product import ProductModel

__all__ = [
    "CustomerModel",
    "ProductModel",
]
