"""Customer repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.persistence.models import CustomerModel


class CustomerRepository:
    """Repository for customer database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, customer: CustomerModel) -> CustomerModel:
        """Create a new customer.

        Args:
            customer: Customer model to create.

        Returns:
            Created customer model with its generated ID.
        """
        self.session.add(customer)
        await self.session.flush()
        return customer

    async def get_by_id(self, customer_id: int) -> CustomerModel | None:
        """Get a customer by ID.

        Args:
            customer_id: Customer ID.

        Returns:
            Customer model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.id == customer_id)
        )
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> CustomerModel | None:
        """Get a customer by username.

        Args:
            username: Customer's username.

        Returns:
            Customer model if found, None otherwise.
        """
        result = await self.session.execute(
            select(CustomerModel).where(CustomerModel.username == username)
        )
        return result.scalar_one_or_none()

    async def username_exists(self, username: str) -> bool:
        """Check if a username is already taken."""
        result = await self.session.execute(
            select(CustomerModel.id).where(CustomerModel.username == username).limit(1)
        )
        return result.scalar_one_or_none() is not None
