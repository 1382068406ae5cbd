"""Pydantic schemas for customer endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """Request body for customer registration."""

    username: str = Field(..., min_length=1, max_length=150, description="Unique login name")
    password: str = Field(..., min_length=1, description="Customer's password")
    firstname: str = Field("", max_length=100, description="Customer's first name")
    lastname: str = Field("", max_length=100, description="Customer's last name")


class LoginRequest(BaseModel):
    """Request body for customer login."""

    username: str = Field(..., min_length=1, description="Login name")
    password: str = Field(..., min_length=1, description="Customer's password")


class CustomerResponse(BaseModel):
    """Customer information. The password hash is never exposed."""

    id: int = Field(..., description="Customer ID")
    username: str = Field(..., description="Login name")
    firstname: str = Field(..., description="Customer's first name")
    lastname: str = Field(..., description="Customer's last name")
    created_at: datetime = Field(..., description="When the customer registered")

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    """Response for a successful login."""

    token: str = Field(..., description="Signed JWT identifying the customer")
    username: str = Field(..., description="Login name bound in the token")
    expires_in: int = Field(..., description="Token lifetime in seconds")
