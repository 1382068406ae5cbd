"""JWT token service.

Issues and validates the signed, time-limited identity tokens handed to
customers after a successful login. The signing secret, expiry and issuer
are supplied at construction; ``get_jwt_service`` builds the process-wide
instance from settings.
"""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any

import jwt

from storefront.core.config import get_settings


class JWTError(Exception):
    """Base exception for JWT-related errors."""

    pass


class TokenExpiredError(JWTError):
    """Raised when a token has expired."""

    pass


class InvalidTokenError(JWTError):
    """Raised when a token is invalid."""

    pass


class JWTService:
    """Service for creating and validating customer identity tokens."""

    ALGORITHM = "HS256"
    ISSUER = "Ecommerce"

    def __init__(
        self,
        secret_key: str,
        expires_hours: int,
        issuer: str = ISSUER,
    ) -> None:
        """Initialize the JWT service.

        Args:
            secret_key: Secret key for signing tokens.
            expires_hours: Lifetime of issued tokens, in hours.
            issuer: Value of the ``iss`` claim.
        """
        if not secret_key:
            raise ValueError("JWT secret key is required")
        if expires_hours <= 0:
            raise ValueError("JWT expiry must be a positive number of hours")
        self._secret_key = secret_key
        self.expires_delta = timedelta(hours=expires_hours)
        self.issuer = issuer

    def create_token(self, username: str, expires_delta: timedelta | None = None) -> str:
        """Create a token binding the given username.

        Args:
            username: The customer's username.
            expires_delta: Custom expiration time. Defaults to the configured hours.

        Returns:
            Encoded JWT.
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self.expires_delta)

        payload = {
            "iss": self.issuer,
            "sub": username,
            "iat": now,
            "exp": expire,
            "username": username,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and validate a JWT token.

        Args:
            token: The encoded JWT token.

        Returns:
            Decoded token payload.

        Raises:
            TokenExpiredError: If the token has expired.
            InvalidTokenError: If the token is invalid.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.issuer,
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError("Invalid token") from e

        if not payload.get("username"):
            raise InvalidTokenError("Token has no username claim")
        return payload

    def get_expires_in(self) -> int:
        """Get the configured token lifetime in seconds."""
        return int(self.expires_delta.total_seconds())


@lru_cache
def get_jwt_service() -> JWTService:
    """Get the process-wide JWT service built from settings."""
    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        expires_hours=settings.jwt_expires_hours,
        issuer=settings.jwt_issuer,
    )
