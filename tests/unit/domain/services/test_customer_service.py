"""Unit tests for CustomerService."""

from unittest.mock import AsyncMock

import pytest
from argon2 import PasswordHasher
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from storefront.domain.services.customer_service import CustomerService
from storefront.infrastructure.auth import needs_rehash, verify_password
from storefront.infrastructure.persistence.models import CustomerModel


@pytest.fixture
def customer_service(db_session: AsyncSession, token_service) -> CustomerService:
    return CustomerService(db_session, token_service)


class TestRegister:
    """Tests for CustomerService.register."""

    @pytest.mark.asyncio
    async def test_register_stores_hash_not_plaintext(self, customer_service):
        customer = await customer_service.register(
            username="alice",
            password="S3cret!",
            firstname="Alice",
            lastname="Liddell",
        )

        assert customer.id is not None
        assert customer.username == "alice"
        assert customer.firstname == "Alice"
        assert customer.password_hash != "S3cret!"
        assert verify_password("S3cret!", customer.password_hash) is True

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, customer_service):
        await customer_service.register(username="alice", password="first")

        with pytest.raises(AlreadyExistsError):
            await customer_service.register(username="alice", password="second")

    @pytest.mark.asyncio
    async def test_register_unique_violation_translated(self, customer_service):
        """A username inserted between the check and the insert still maps to AlreadyExistsError."""
        await customer_service.register(username="alice", password="first")
        customer_service.customer_repo.username_exists = AsyncMock(return_value=False)

        with pytest.raises(AlreadyExistsError) as exc_info:
            await customer_service.register(username="alice", password="second")

        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("username", "password"),
        [("", "secret"), ("   ", "secret"), ("alice", "")],
    )
    async def test_register_blank_fields(self, customer_service, username, password):
        with pytest.raises(ValidationError):
            await customer_service.register(username=username, password=password)


class TestAuthenticate:
    """Tests for CustomerService.authenticate."""

    @pytest.mark.asyncio
    async def test_authenticate_returns_token_for_username(self, customer_service, token_service):
        await customer_service.register(username="alice", password="S3cret!")

        token = await customer_service.authenticate("alice", "S3cret!")

        payload = token_service.decode_token(token)
        assert payload["username"] == "alice"

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password(self, customer_service):
        await customer_service.register(username="alice", password="S3cret!")

        with pytest.raises(InvalidCredentialsError):
            await customer_service.authenticate("alice", "wrong")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_username(self, customer_service):
        with pytest.raises(NotFoundError):
            await customer_service.authenticate("nobody", "whatever")

    @pytest.mark.asyncio
    async def test_authenticate_upgrades_outdated_hash(self, db_session, customer_service):
        old_hash = PasswordHasher(time_cost=2, memory_cost=8192).hash("S3cret!")
        db_session.add(
            CustomerModel(
                username="alice",
                password_hash=old_hash,
                firstname="Alice",
                lastname="Liddell",
            )
        )
        await db_session.commit()

        await customer_service.authenticate("alice", "S3cret!")

        customer = await customer_service.get_customer_by_username("alice")
        assert customer.password_hash != old_hash
        assert needs_rehash(customer.password_hash) is False
        assert verify_password("S3cret!", customer.password_hash) is True

    @pytest.mark.asyncio
    async def test_authenticate_keeps_current_hash(self, customer_service):
        created = await customer_service.register(username="alice", password="S3cret!")
        original_hash = created.password_hash

        await customer_service.authenticate("alice", "S3cret!")

        assert created.password_hash == original_hash


class TestLookups:
    """Tests for customer lookups."""

    @pytest.mark.asyncio
    async def test_get_customer_by_id(self, customer_service):
        created = await customer_service.register(username="alice", password="pw")

        found = await customer_service.get_customer_by_id(created.id)

        assert found.username == "alice"

    @pytest.mark.asyncio
    async def test_get_customer_by_id_missing(self, customer_service):
        with pytest.raises(NotFoundError):
            await customer_service.get_customer_by_id(999)

    @pytest.mark.asyncio
    async def test_get_customer_by_username(self, customer_service):
        created = await customer_service.register(username="alice", password="pw")

        found = await customer_service.get_customer_by_username("alice")

        assert found.id == created.id

    @pytest.mark.asyncio
    async def test_get_customer_by_username_missing(self, customer_service):
        with pytest.raises(NotFoundError):
            await customer_service.get_customer_by_username("nobody")


def _locked() -> OperationalError:
    return OperationalError("SELECT", {}, Exception("database is locked"))


class TestStoreFailures:
    """Database failures on reads surface as StoreError."""

    @pytest.mark.asyncio
    async def test_authenticate_read_failure(self, customer_service):
        customer_service.customer_repo.get_by_username = AsyncMock(side_effect=_locked())

        with pytest.raises(StoreError) as exc_info:
            await customer_service.authenticate("alice", "pw")

        assert "database is locked" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_register_existence_check_failure(self, customer_service):
        customer_service.customer_repo.username_exists = AsyncMock(side_effect=_locked())

        with pytest.raises(StoreError) as exc_info:
            await customer_service.register(username="alice", password="pw")

        assert isinstance(exc_info.value.__cause__, OperationalError)

    @pytest.mark.asyncio
    async def test_lookup_failures(self, customer_service):
        customer_service.customer_repo.get_by_id = AsyncMock(side_effect=_locked())
        customer_service.customer_repo.get_by_username = AsyncMock(side_effect=_locked())

        with pytest.raises(StoreError):
            await customer_service.get_customer_by_id(1)
        with pytest.raises(StoreError):
            await customer_service.get_customer_by_username("alice")
