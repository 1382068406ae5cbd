"""Password hashing utility using Argon2.

Provides salted one-way hashing and verification using the Argon2id
algorithm. The work factor (iterations and memory) comes from settings.
"""

from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from storefront.core.config import get_settings


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide hasher configured with the settings work factor."""
    settings = get_settings()
    return PasswordHasher(
        time_cost=settings.password_time_cost,
        memory_cost=settings.password_memory_cost,
    )


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Args:
        password: The plaintext password to hash.

    Returns:
        The hashed password string.

    Example:
        >>> hashed = hash_password("SecureP@ss123!")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return get_password_hasher().hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    Uses constant-time comparison to prevent timing attacks.

    Args:
        password: The plaintext password to verify.
        hashed: The hashed password to verify against.

    Returns:
        True if the password matches, False otherwise.
    """
    try:
        get_password_hasher().verify(hashed, password)
        return True
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


def needs_rehash(hashed: str) -> bool:
    """Check if a password hash was produced with an outdated work factor.

    Args:
        hashed: The hashed password to check.

    Returns:
        True if the hash should be updated, False otherwise.
    """
    return get_password_hasher().check_needs_rehash(hashed)
