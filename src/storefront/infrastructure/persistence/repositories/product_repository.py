"""Product repository for database operations."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.infrastructure.persistence.models import ProductModel


class ProductRepository:
    """Repository for product database operations.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, product: ProductModel) -> ProductModel:
        """Create a new product.

        Args:
            product: Product model to create.

        Returns:
            Created product model with its generated ID.

        Raises:
            IntegrityError: If the (customer_id, name) pair already exists
                or the customer does not exist.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(self, product_id: int) -> ProductModel | None:
        """Get a product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product model if found, None otherwise.
        """
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.id == product_id)
        )
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> list[ProductModel]:
        """Get every product with exactly the given name, across customers."""
        result = await self.session.execute(
            select(ProductModel).where(ProductModel.name == name).order_by(ProductModel.id)
        )
        return list(result.scalars().all())

    async def get_all(self) -> list[ProductModel]:
        """Get all products ordered by ID."""
        result = await self.session.execute(select(ProductModel).order_by(ProductModel.id))
        return list(result.scalars().all())

    async def get_by_ownership(self, customer_id: int, mine: bool) -> list[ProductModel]:
        """Get products by owner.

        Args:
            customer_id: Customer whose ownership is tested.
            mine: If True, return the customer's own products. If False,
                return every product owned by any other customer.

        Returns:
            List of matching products ordered by ID, possibly empty.
        """
        if mine:
            condition = ProductModel.customer_id == customer_id
        else:
            condition = ProductModel.customer_id != customer_id

        result = await self.session.execute(
            select(ProductModel).where(condition).order_by(ProductModel.id)
        )
        return list(result.scalars().all())

    async def update(self, product: ProductModel) -> ProductModel:
        """Persist changes made to a product.

        Args:
            product: Product model with modified attributes.

        Returns:
            Updated product model.
        """
        self.session.add(product)
        await self.session.flush()
        await self.session.refresh(product)
        return product

    async def delete(self, product: ProductModel) -> None:
        """Delete a product.

        Args:
            product: Product model to delete.
        """
        await self.session.delete(product)
        await self.session.flush()
