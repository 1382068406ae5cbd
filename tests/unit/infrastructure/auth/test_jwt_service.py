"""Unit tests for the JWT token service."""

from datetime import datetime, timedelta, timezone

import jwt  # PyJWT
import pytest

from storefront.infrastructure.auth.jwt_service import (
    InvalidTokenError,
    JWTService,
    TokenExpiredError,
)

SECRET_KEY = "unit-test-secret"


@pytest.fixture
def jwt_service():
    return JWTService(secret_key=SECRET_KEY, expires_hours=2)


class TestJWTService:

    def test_create_token_claims(self, jwt_service):
        """Test creating a token with the username bound."""
        token = jwt_service.create_token("alice")

        decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"], issuer="Ecommerce")

        assert decoded["username"] == "alice"
        assert decoded["sub"] == "alice"
        assert decoded["iss"] == "Ecommerce"
        assert "iat" in decoded
        assert "exp" in decoded

    def test_create_token_expiration_uses_configured_hours(self, jwt_service):
        """Test that the expiry is the configured number of hours after issue."""
        start_time = datetime.now(timezone.utc)
        token = jwt_service.create_token("alice")
        decoded = jwt.decode(token, SECRET_KEY, algorithms=["HS256"], issuer="Ecommerce")

        exp_dt = datetime.fromtimestamp(decoded["exp"], tz=timezone.utc)
        expected = start_time + timedelta(hours=2)

        # Allow small window for execution time
        assert expected - timedelta(seconds=2) <= exp_dt <= expected + timedelta(seconds=2)

    def test_decode_token_valid(self, jwt_service):
        """Test decoding a valid token."""
        token = jwt_service.create_token("alice")

        payload = jwt_service.decode_token(token)

        assert payload["username"] == "alice"

    def test_decode_token_invalid(self, jwt_service):
        """Test decoding garbage raises InvalidTokenError."""
        with pytest.raises(InvalidTokenError):
            jwt_service.decode_token("invalid_token")

    def test_decode_token_wrong_secret(self, jwt_service):
        """Test that a token signed with another secret is rejected."""
        other = JWTService(secret_key="another-secret", expires_hours=2)
        token = other.create_token("alice")

        with pytest.raises(InvalidTokenError):
            jwt_service.decode_token(token)

    def test_decode_token_wrong_issuer(self, jwt_service):
        """Test that a token from another issuer is rejected."""
        other = JWTService(secret_key=SECRET_KEY, expires_hours=2, issuer="someone-else")
        token = other.create_token("alice")

        with pytest.raises(InvalidTokenError):
            jwt_service.decode_token(token)

    def test_decode_token_expired(self, jwt_service):
        """Test that an expired token raises TokenExpiredError."""
        token = jwt_service.create_token("alice", expires_delta=timedelta(seconds=-1))

        with pytest.raises(TokenExpiredError):
            jwt_service.decode_token(token)

    def test_get_expires_in(self, jwt_service):
        """Test the configured lifetime in seconds."""
        assert jwt_service.get_expires_in() == 7200

    def test_requires_secret(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="", expires_hours=1)

    def test_requires_positive_expiry(self):
        with pytest.raises(ValueError):
            JWTService(secret_key=SECRET_KEY, expires_hours=0)
