"""Domain error taxonomy.

Every error raised by the domain services derives from ``StorefrontError``
and carries a ``code`` that callers (and the HTTP layer) use to tell the
kinds apart. Errors translated from the persistence layer keep the original
exception as ``__cause__``.
"""


class StorefrontError(Exception):
    """Base class for all domain errors."""

    code = "storefront_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StorefrontError):
    """Raised when a requested customer or product does not exist."""

    code = "not_found"


class AlreadyExistsError(StorefrontError):
    """Raised when creating a record that collides with an existing one."""

    code = "already_exists"


class DuplicateNameError(AlreadyExistsError):
    """Raised when a customer already sells a product with the same name."""

    code = "duplicate_name"


class InvalidCredentialsError(StorefrontError):
    """Raised when a password does not match the stored hash."""

    code = "invalid_credentials"


class ValidationError(StorefrontError):
    """Raised for malformed input that reached the domain layer."""

    code = "validation_error"


class StoreError(StorefrontError):
    """Raised for persistence failures that have no domain meaning."""

    code = "store_error"
