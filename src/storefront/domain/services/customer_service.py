"""Customer service for registration and authentication.

Registration hashes the password before anything is stored. Authentication
looks the customer up, verifies the password against the stored hash and
issues a signed token binding the username. No session state is persisted.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.logging import get_logger
from storefront.domain.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from storefront.infrastructure.auth import (
    JWTService,
    hash_password,
    needs_rehash,
    verify_password,
)
from storefront.infrastructure.persistence.errors import (
    is_unique_violation,
    translate_store_errors,
)
from storefront.infrastructure.persistence.models import CustomerModel
from storefront.infrastructure.persistence.repositories import CustomerRepository

logger = get_logger(__name__)


class CustomerService:
    """Service for customer registration, login and lookup."""

    def __init__(self, session: AsyncSession, token_service: JWTService) -> None:
        """Initialize the customer service.

        Args:
            session: SQLAlchemy async session.
            token_service: Issuer for login tokens.
        """
        self.session = session
        self.token_service = token_service
        self.customer_repo = CustomerRepository(session)

    async def register(
        self,
        username: str,
        password: str,
        firstname: str = "",
        lastname: str = "",
    ) -> CustomerModel:
        """Register a new customer.

        Args:
            username: Unique login name.
            password: Plaintext password; only its hash is stored.
            firstname: Customer's first name.
            lastname: Customer's last name.

        Returns:
            Created customer model.

        Raises:
            ValidationError: If username or password is blank.
            AlreadyExistsError: If the username is already taken.
            StoreError: If the database fails for any other reason.
        """
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")

        with translate_store_errors("register"):
            exists = await self.customer_repo.username_exists(username)
        if exists:
            logger.info("Registration failed: username exists", username=username)
            raise AlreadyExistsError("Customer already exists")

        customer = CustomerModel(
            username=username,
            password_hash=hash_password(password),
            firstname=firstname,
            lastname=lastname,
        )

        try:
            await self.customer_repo.create(customer)
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if is_unique_violation(e):
                logger.info("Registration failed: username exists", username=username)
                raise AlreadyExistsError("Customer already exists") from e
            logger.error("Registration failed", username=username, error=str(e.orig))
            raise StoreError(str(e.orig)) from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Registration failed", username=username, error=str(e))
            raise StoreError(str(e)) from e

        logger.info("Customer registered", customer_id=customer.id, username=username)
        return customer

    async def authenticate(self, username: str, password: str) -> str:
        """Verify credentials and issue a token.

        Args:
            username: Login name.
            password: Plaintext password to verify.

        Returns:
            Signed token binding the username.

        Raises:
            NotFoundError: If no customer has this username.
            InvalidCredentialsError: If the password does not match.
            StoreError: If the database fails.
        """
        with translate_store_errors("authenticate"):
            customer = await self.customer_repo.get_by_username(username)
        if customer is None:
            logger.info("Login failed: unknown username", username=username)
            raise NotFoundError("Customer couldn't be found")

        if not verify_password(password, customer.password_hash):
            logger.info("Login failed: incorrect password", username=username)
            raise InvalidCredentialsError("Incorrect password")

        if needs_rehash(customer.password_hash):
            await self._rehash(customer, password)

        logger.info("Customer logged in", customer_id=customer.id, username=username)
        return self.token_service.create_token(username)

    async def get_customer_by_id(self, customer_id: int) -> CustomerModel:
        """Get a customer by ID.

        Raises:
            NotFoundError: If the customer does not exist.
        """
        with translate_store_errors("get_customer_by_id"):
            customer = await self.customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer with id {{{customer_id}}} couldn't be found")
        return customer

    async def get_customer_by_username(self, username: str) -> CustomerModel:
        """Get a customer by username.

        Raises:
            NotFoundError: If the customer does not exist.
        """
        with translate_store_errors("get_customer_by_username"):
            customer = await self.customer_repo.get_by_username(username)
        if customer is None:
            raise NotFoundError(f"Customer with username {{{username}}} couldn't be found")
        return customer

    async def _rehash(self, customer: CustomerModel, password: str) -> None:
        """Replace a hash made with an outdated work factor."""
        customer_id = customer.id
        customer.password_hash = hash_password(password)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error("Password rehash failed", customer_id=customer_id, error=str(e))
            raise StoreError(str(e)) from e
        logger.info("Password rehashed", customer_id=customer_id)
