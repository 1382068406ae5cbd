"""Customer API routes.

Provides endpoints for customer registration, login and lookup.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.services import CustomerService
from storefront.infrastructure.api.dependencies import AuthenticatedCustomer, TokenService
from storefront.infrastructure.api.schemas import (
    CustomerResponse,
    LoginRequest,
    LoginResponse,
    SignupRequest,
)
from storefront.infrastructure.persistence.database import get_db_session

router = APIRouter()


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=CustomerResponse,
    responses={
        400: {"description": "Validation error"},
        409: {"description": "Customer already exists"},
    },
)
async def signup(
    request: SignupRequest,
    token_service: TokenService,
    session: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    """Register a new customer."""
    customer_service = CustomerService(session, token_service)
    customer = await customer_service.register(
        username=request.username,
        password=request.password,
        firstname=request.firstname,
        lastname=request.lastname,
    )
    return CustomerResponse.model_validate(customer)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={
        401: {"description": "Incorrect password"},
        404: {"description": "Customer not found"},
    },
)
async def login(
    request: LoginRequest,
    token_service: TokenService,
    session: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    """Authenticate a customer and return a signed token."""
    customer_service = CustomerService(session, token_service)
    token = await customer_service.authenticate(request.username, request.password)
    return LoginResponse(
        token=token,
        username=request.username,
        expires_in=token_service.get_expires_in(),
    )


@router.get(
    "/username/{username}",
    response_model=CustomerResponse,
    responses={404: {"description": "Customer not found"}},
)
async def get_customer_by_username(
    username: str,
    current_customer: AuthenticatedCustomer,
    token_service: TokenService,
    session: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    """Get a customer by username."""
    customer_service = CustomerService(session, token_service)
    customer = await customer_service.get_customer_by_username(username)
    return CustomerResponse.model_validate(customer)


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"description": "Customer not found"}},
)
async def get_customer(
    customer_id: int,
    current_customer: AuthenticatedCustomer,
    token_service: TokenService,
    session: AsyncSession = Depends(get_db_session),
) -> CustomerResponse:
    """Get a customer by ID."""
    customer_service = CustomerService(session, token_service)
    customer = await customer_service.get_customer_by_id(customer_id)
    return CustomerResponse.model_validate(customer)
