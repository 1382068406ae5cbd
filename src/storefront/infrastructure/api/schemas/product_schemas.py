"""Pydantic schemas for product endpoints."""

from pydantic import BaseModel, Field


class ProductInput(BaseModel):
    """Request body for creating a product."""

    name: str = Field(..., min_length=1, max_length=255, description="Product's name")
    price: float = Field(..., ge=0, description="Product's price")
    description: str = Field("", description="Product's description")
    customer_id: int = Field(..., description="ID of the customer selling the product")


class UpdateProductInput(BaseModel):
    """Request body for updating a product. Ownership cannot change."""

    id: int = Field(..., description="Product's id")
    name: str = Field(..., min_length=1, max_length=255, description="Product's name")
    price: float = Field(..., ge=0, description="Product's price")
    description: str = Field("", description="Product's description")


class ProductOwner(BaseModel):
    """Summary of the customer selling a product."""

    id: int = Field(..., description="Customer ID")
    username: str = Field(..., description="Login name")
    firstname: str = Field(..., description="Customer's first name")
    lastname: str = Field(..., description="Customer's last name")

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    """Product information, including its owner."""

    id: int = Field(..., description="Product's id")
    name: str = Field(..., description="Product's name")
    price: float = Field(..., description="Product's price")
    description: str = Field(..., description="Product's description")
    customer_id: int = Field(..., description="ID of the owning customer")
    customer: ProductOwner = Field(..., description="The owning customer")

    model_config = {"from_attributes": True}
