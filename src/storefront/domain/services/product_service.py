"""Product service for business logic.

Provides product creation, lookup, update and deletion, and the visibility
query that lists either a customer's own products or everyone else's.
Integrity errors from the database are translated into domain errors.
"""

from collections.abc import Awaitable, Callable

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.logging import get_logger
from storefront.domain.exceptions import (
    DuplicateNameError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from storefront.infrastructure.persistence.errors import (
    is_foreign_key_violation,
    is_unique_violation,
    translate_store_errors,
)
from storefront.infrastructure.persistence.models import ProductModel
from storefront.infrastructure.persistence.repositories import (
    CustomerRepository,
    ProductRepository,
)

logger = get_logger(__name__)


class ProductService:
    """Service for product management business logic."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the product service.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session
        self.product_repo = ProductRepository(session)
        self.customer_repo = CustomerRepository(session)

    @staticmethod
    def _validate(name: str, price: float) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price < 0:
            raise ValidationError("Product price must not be negative")

    async def _persist(
        self,
        write: Callable[[], Awaitable[ProductModel]],
        name: str,
        customer_id: int,
    ) -> None:
        """Run a repository write and commit, translating store failures.

        Raises:
            DuplicateNameError: If the customer already has a product with this name.
            NotFoundError: If the owning customer vanished before the write.
            StoreError: For any other database failure.
        """
        try:
            await write()
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if is_unique_violation(e):
                logger.info(
                    "Product write rejected: duplicate name",
                    name=name,
                    customer_id=customer_id,
                )
                raise DuplicateNameError(
                    f"Seller has already a product with name {{{name}}}"
                ) from e
            if is_foreign_key_violation(e):
                raise NotFoundError(
                    f"Customer with id {{{customer_id}}} couldn't be found"
                ) from e
            logger.error("Product write failed", name=name, error=str(e.orig))
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Product write failed", name=name, error=str(e))
            raise StoreError(str(e)) from e

    async def create_product(
        self,
        name: str,
        price: float,
        description: str,
        customer_id: int,
    ) -> ProductModel:
        """Create a product owned by a customer.

        Args:
            name: Product name, unique among the customer's products.
            price: Product price.
            description: Product description.
            customer_id: Owning customer.

        Returns:
            Created product model.

        Raises:
            ValidationError: If the name is blank or the price negative.
            NotFoundError: If the customer does not exist.
            DuplicateNameError: If the customer already sells a product with this name.
        """
        self._validate(name, price)

        with translate_store_errors("create_product"):
            customer = await self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer with id {{{customer_id}}} couldn't be found")

        product = ProductModel(
            name=name,
            price=price,
            description=description,
            customer_id=customer_id,
            customer=customer,
        )
        await self._persist(lambda: self.product_repo.create(product), name, customer_id)

        logger.info(
            "Product created",
            product_id=product.id,
            name=name,
            customer_id=customer_id,
        )
        return product

    async def get_product_by_id(self, product_id: int) -> ProductModel:
        """Get a product by ID.

        Raises:
            NotFoundError: If the product does not exist.
        """
        with translate_store_errors("get_product_by_id"):
            product = await self.product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with id {{{product_id}}} couldn't be found")
        return product

    async def get_products_by_name(self, name: str) -> list[ProductModel]:
        """Get every product with the given name.

        An empty result is reported as not found rather than an empty list.

        Raises:
            NotFoundError: If no product has this name.
        """
        with translate_store_errors("get_products_by_name"):
            products = await self.product_repo.get_by_name(name)
        if not products:
            raise NotFoundError(f"Couldn't find name that contain {{{name}}}")
        return products

    async def get_all_products(self) -> list[ProductModel]:
        """Get all products."""
        with translate_store_errors("get_all_products"):
            return await self.product_repo.get_all()

    async def list_visible_products(
        self, customer_id: int, only_mine: bool
    ) -> list[ProductModel]:
        """List the products a customer sees.

        Args:
            customer_id: The browsing customer.
            only_mine: True for the customer's own inventory, False for the
                products of every other customer.

        Returns:
            Matching products; an empty list is a valid result.
        """
        with translate_store_errors("list_visible_products"):
            return await self.product_repo.get_by_ownership(customer_id, mine=only_mine)

    async def update_product(
        self,
        product_id: int,
        name: str,
        price: float,
        description: str,
    ) -> ProductModel:
        """Update a product's name, price and description.

        Ownership never changes.

        Raises:
            ValidationError: If the name is blank or the price negative.
            NotFoundError: If the product does not exist.
            DuplicateNameError: If the owner already sells another product with this name.
        """
        self._validate(name, price)

        product = await self.get_product_by_id(product_id)
        product.name = name
        product.price = price
        product.description = description

        await self._persist(
            lambda: self.product_repo.update(product), name, product.customer_id
        )

        logger.info("Product updated", product_id=product_id, name=name)
        return product

    async def delete_product(self, product_id: int) -> ProductModel:
        """Delete a product after checking that it exists.

        The lookup and the delete are separate statements; a concurrent
        delete in between surfaces as a store error.

        Returns:
            The deleted product.

        Raises:
            NotFoundError: If the product does not exist.
            StoreError: If the delete itself fails.
        """
        product = await self.get_product_by_id(product_id)

        try:
            await self.product_repo.delete(product)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Product delete failed", product_id=product_id, error=str(e))
            raise StoreError(str(e)) from e

        logger.info("Product deleted", product_id=product_id)
        return product
