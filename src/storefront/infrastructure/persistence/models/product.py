"""SQLAlchemy model for the products table.

Each product belongs to exactly one customer; a customer cannot sell two
products with the same name.
"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.infrastructure.persistence.database import Base, utc_now


class ProductModel(Base):
    """SQLAlchemy model for the products table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Product name (unique per customer).
        price: Product price.
        description: Free-form description.
        customer_id: Foreign key to the owning customer.
        created_at: Timestamp when the product was created.
        updated_at: Timestamp when the product was last updated.
    """

    __tablename__ = "products"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )
    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to customers table",
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
    customer: Mapped["CustomerModel"] = relationship(  # noqa: F821
        "CustomerModel",
        back_populates="products",
        lazy="selectin",
    )

    __table_args__ = (
        UniqueConstraint("customer_id", "name", name="uq_products_customer_name"),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name={self.name}, customer_id={self.customer_id})>"
