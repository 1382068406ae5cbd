"""SQLAlchemy model for the customers table.

Customers are uniquely identified by username and own the products they sell.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.infrastructure.persistence.database import Base, utc_now


class CustomerModel(Base):
    """SQLAlchemy model for the customers table.

    Attributes:
        id: Auto-incrementing primary key.
        username: Unique login name.
        password_hash: Argon2 hash of the password (never plaintext).
        firstname: Customer's first name.
        lastname: Customer's last name.
        created_at: Timestamp when the customer registered.
        updated_at: Timestamp when the customer was last updated.
    """

    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    username: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        unique=True,
        index=True,
        comment="Login name, unique across customers",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Hashed password (argon2)",
    )
    firstname: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )
    lastname: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )

    # Relationships
    products: Mapped[list["ProductModel"]] = relationship(  # noqa: F821
        "ProductModel",
        back_populates="customer",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, username={self.username})>"
