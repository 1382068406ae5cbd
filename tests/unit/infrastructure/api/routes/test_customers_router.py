"""Unit tests for Customers Router."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi import status
from httpx import ASGITransport, AsyncClient

from storefront.domain.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from storefront.infrastructure.api.app import app
from storefront.infrastructure.auth import JWTService, get_jwt_service
from storefront.infrastructure.persistence.database import get_db_session
from storefront.infrastructure.persistence.models import CustomerModel


@pytest.fixture
def mock_customer_service():
    """Mock CustomerService."""
    with patch(
        "storefront.infrastructure.api.routes.customers_router.CustomerService"
    ) as mock:
        mock_instance = AsyncMock()
        mock.return_value = mock_instance
        yield mock_instance


@pytest_asyncio.fixture
async def async_client():
    """Create a custom AsyncClient for testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def overrides(token_service):
    """Use a fixed token service and stub out the database session."""

    async def session_override():
        yield AsyncMock()

    app.dependency_overrides[get_jwt_service] = lambda: token_service
    app.dependency_overrides[get_db_session] = session_override
    yield
    app.dependency_overrides = {}


def make_customer(customer_id: int = 1, username: str = "alice") -> CustomerModel:
    return CustomerModel(
        id=customer_id,
        username=username,
        password_hash="$argon2id$not-a-real-hash",
        firstname="Alice",
        lastname="Liddell",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def auth_header(token_service: JWTService, username: str = "alice") -> dict[str, str]:
    return {"Authorization": f"Bearer {token_service.create_token(username)}"}


@pytest.mark.asyncio
async def test_signup_success(async_client, mock_customer_service):
    mock_customer_service.register = AsyncMock(return_value=make_customer())

    response = await async_client.post(
        "/api/v1/customers/signup",
        json={
            "username": "alice",
            "password": "wonderland",
            "firstname": "Alice",
            "lastname": "Liddell",
        },
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["username"] == "alice"
    assert "password" not in data
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_signup_existing_username(async_client, mock_customer_service):
    mock_customer_service.register = AsyncMock(
        side_effect=AlreadyExistsError("Customer already exists")
    )

    response = await async_client.post(
        "/api/v1/customers/signup",
        json={"username": "alice", "password": "wonderland"},
    )

    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json() == {
        "error": "already_exists",
        "message": "Customer already exists",
    }


@pytest.mark.asyncio
async def test_signup_blank_username(async_client, mock_customer_service):
    mock_customer_service.register = AsyncMock(
        side_effect=ValidationError("Username is required")
    )

    response = await async_client.post(
        "/api/v1/customers/signup",
        json={"username": "   ", "password": "wonderland"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "validation_error"


@pytest.mark.asyncio
async def test_login_returns_token(async_client, mock_customer_service, token_service):
    token = token_service.create_token("alice")
    mock_customer_service.authenticate = AsyncMock(return_value=token)

    response = await async_client.post(
        "/api/v1/customers/login",
        json={"username": "alice", "password": "wonderland"},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["token"] == token
    assert data["username"] == "alice"
    assert data["expires_in"] == 3600
    mock_customer_service.authenticate.assert_called_once_with("alice", "wonderland")


@pytest.mark.asyncio
async def test_login_wrong_password(async_client, mock_customer_service):
    mock_customer_service.authenticate = AsyncMock(
        side_effect=InvalidCredentialsError("Incorrect password")
    )

    response = await async_client.post(
        "/api/v1/customers/login",
        json={"username": "alice", "password": "nope"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["message"] == "Incorrect password"


@pytest.mark.asyncio
async def test_login_unknown_customer(async_client, mock_customer_service):
    mock_customer_service.authenticate = AsyncMock(
        side_effect=NotFoundError("Customer couldn't be found")
    )

    response = await async_client.post(
        "/api/v1/customers/login",
        json={"username": "nobody", "password": "wonderland"},
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_get_customer_with_token(async_client, mock_customer_service, token_service):
    mock_customer_service.get_customer_by_id = AsyncMock(return_value=make_customer(7))

    response = await async_client.get(
        "/api/v1/customers/7", headers=auth_header(token_service)
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == 7
    mock_customer_service.get_customer_by_id.assert_called_once_with(7)


@pytest.mark.asyncio
async def test_get_customer_by_username(async_client, mock_customer_service, token_service):
    mock_customer_service.get_customer_by_username = AsyncMock(
        return_value=make_customer(3, "bob")
    )

    response = await async_client.get(
        "/api/v1/customers/username/bob", headers=auth_header(token_service)
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["username"] == "bob"


@pytest.mark.asyncio
async def test_get_customer_without_token(async_client, mock_customer_service):
    response = await async_client.get("/api/v1/customers/7")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    mock_customer_service.get_customer_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_get_customer_with_foreign_token(async_client, mock_customer_service):
    foreign = JWTService("some-other-secret-key", 1)

    response = await async_client.get(
        "/api/v1/customers/7", headers=auth_header(foreign)
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.asyncio
async def test_get_customer_malformed_header(async_client, mock_customer_service):
    response = await async_client.get(
        "/api/v1/customers/7", headers={"Authorization": "Token abc"}
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
