"""API Schemas for request/response validation."""

from storefront.infrastructure.api.schemas.customer_schemas import (
    CustomerResponse,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)
from storefront.infrastructure.api.schemas.product_schemas import (
    ProductInput,
    ProductOwner,
    ProductResponse,
    UpdateProductInput,
)

__all__ = [
    "CustomerResponse",
    "LoginRequest",
    "LoginResponse",
    "ProductInput",
    "ProductOwner",
    "ProductResponse",
    "SignupRequest",
    "UpdateProductInput",
]
