"""Product API routes.

Provides endpoints for product management and the visibility query
(a customer's own products, or every other customer's products).
All endpoints require a valid bearer token.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.services import ProductService
from storefront.infrastructure.api.dependencies import AuthenticatedCustomer
from storefront.infrastructure.api.schemas import (
    ProductInput,
    ProductResponse,
    UpdateProductInput,
)
from storefront.infrastructure.persistence.database import get_db_session

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ProductResponse,
    responses={
        404: {"description": "Customer not found"},
        409: {"description": "Seller already has a product with this name"},
    },
)
async def create_product(
    request: ProductInput,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    """Link a new product to a customer."""
    product_service = ProductService(session)
    product = await product_service.create_product(
        name=request.name,
        price=request.price,
        description=request.description,
        customer_id=request.customer_id,
    )
    return ProductResponse.model_validate(product)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> list[ProductResponse]:
    """List every product."""
    product_service = ProductService(session)
    products = await product_service.get_all_products()
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/name/{name}",
    response_model=list[ProductResponse],
    responses={404: {"description": "No product has this name"}},
)
async def get_products_by_name(
    name: str,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> list[ProductResponse]:
    """Get all products with the given name."""
    product_service = ProductService(session)
    products = await product_service.get_products_by_name(name)
    return [ProductResponse.model_validate(p) for p in products]


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"description": "Product not found"}},
)
async def get_product(
    product_id: int,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    """Get a product by ID."""
    product_service = ProductService(session)
    product = await product_service.get_product_by_id(product_id)
    return ProductResponse.model_validate(product)


@router.get("/{customer_id}/{only_mine}", response_model=list[ProductResponse])
async def list_visible_products(
    customer_id: int,
    only_mine: bool,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> list[ProductResponse]:
    """List a customer's own products, or the products of every other customer.

    An empty list is a valid response.
    """
    product_service = ProductService(session)
    products = await product_service.list_visible_products(customer_id, only_mine)
    return [ProductResponse.model_validate(p) for p in products]


@router.put(
    "",
    response_model=ProductResponse,
    responses={
        404: {"description": "Product not found"},
        409: {"description": "Seller already has a product with this name"},
    },
)
async def update_product(
    request: UpdateProductInput,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    """Update a product's name, price and description."""
    product_service = ProductService(session)
    product = await product_service.update_product(
        product_id=request.id,
        name=request.name,
        price=request.price,
        description=request.description,
    )
    return ProductResponse.model_validate(product)


@router.delete(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"description": "Product not found"}},
)
async def delete_product(
    product_id: int,
    current_customer: AuthenticatedCustomer,
    session: AsyncSession = Depends(get_db_session),
) -> ProductResponse:
    """Delete a product by ID and return it."""
    product_service = ProductService(session)
    product = await product_service.delete_product(product_id)
    return ProductResponse.model_validate(product)
