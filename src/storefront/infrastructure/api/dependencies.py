"""FastAPI dependencies for authentication.

Provides dependencies for extracting and validating JWT tokens from requests.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from storefront.core.logging import get_logger
from storefront.infrastructure.auth import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
    get_jwt_service,
)

logger = get_logger(__name__)


@dataclass
class CurrentCustomer:
    """The authenticated customer, as extracted from a valid token."""

    username: str


TokenService = Annotated[JWTService, Depends(get_jwt_service)]


async def get_current_customer(
    token_service: TokenService,
    authorization: Annotated[str | None, Header()] = None,
) -> CurrentCustomer:
    """Extract and validate the current customer from the Authorization header.

    Args:
        token_service: Service used to verify the token.
        authorization: The Authorization header value (e.g., "Bearer <token>").

    Returns:
        CurrentCustomer: The authenticated customer's context.

    Raises:
        HTTPException: 401 if token is missing, invalid, or expired.
    """
    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing Authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = token_service.decode_token(parts[1])
    except TokenExpiredError:
        logger.info("Authentication failed: token expired")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidTokenError as e:
        logger.info("Authentication failed: invalid token", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token: {str(e)}",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return CurrentCustomer(username=payload["username"])


AuthenticatedCustomer = Annotated[CurrentCustomer, Depends(get_current_customer)]
