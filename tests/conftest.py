"""Pytest configuration for all tests."""

import os

# Cheap Argon2 parameters; must be set before settings are first loaded
os.environ.setdefault("STOREFRONT_PASSWORD_TIME_COST", "1")
os.environ.setdefault("STOREFRONT_PASSWORD_MEMORY_COST", "8192")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from storefront.infrastructure.auth import JWTService  # noqa: E402
from storefront.infrastructure.persistence.database import (  # noqa: E402
    Base,
    enable_sqlite_foreign_keys,
)
from storefront.infrastructure.persistence.models import (  # noqa: E402
    CustomerModel,
    ProductModel,
)

TEST_SECRET_KEY = "test-secret-key-for-storefront-tests"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database with foreign keys enforced.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def token_service() -> JWTService:
    """JWT service with a fixed test secret."""
    return JWTService(secret_key=TEST_SECRET_KEY, expires_hours=1)


async def add_customer(session: AsyncSession, username: str) -> int:
    """Insert a customer directly and return its ID."""
    customer = CustomerModel(
        username=username,
        password_hash="not-a-real-hash",
        firstname=username.capitalize(),
        lastname="Tester",
    )
    session.add(customer)
    await session.commit()
    return customer.id


async def add_product(
    session: AsyncSession, customer_id: int, name: str, price: float = 10.0
) -> int:
    """Insert a product directly and return its ID."""
    product = ProductModel(
        name=name,
        price=price,
        description=f"{name} description",
        customer_id=customer_id,
    )
    session.add(product)
    await session.commit()
    return product.id


@pytest_asyncio.fixture
async def seller_id(db_session: AsyncSession) -> int:
    """ID of a customer who sells products."""
    return await add_customer(db_session, "seller")


@pytest_asyncio.fixture
async def buyer_id(db_session: AsyncSession) -> int:
    """ID of a second customer."""
    return await add_customer(db_session, "buyer")
