"""Classification and translation of errors raised by the database drivers.

PostgreSQL drivers expose an SQLSTATE code; SQLite only provides a message.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.core.logging import get_logger
from storefront.domain.exceptions import StoreError

logger = get_logger(__name__)

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(exc: IntegrityError) -> str | None:
    orig = exc.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(exc: IntegrityError) -> bool:
    """Return True if the error was caused by a unique constraint."""
    sqlstate = _sqlstate(exc)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    return "unique constraint" in str(exc.orig).lower()


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """Return True if the error was caused by a foreign key constraint."""
    sqlstate = _sqlstate(exc)
    if sqlstate:
        return sqlstate == FOREIGN_KEY_VIOLATION
    return "foreign key constraint" in str(exc.orig).lower()


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise any SQLAlchemy error from the wrapped block as StoreError.

    Intended for reads, which need no rollback. The original exception is
    chained as the cause.

    Args:
        operation: Short name of the operation, used in the error log.

    Raises:
        StoreError: If the wrapped block raised a SQLAlchemyError.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database read failed", operation=operation, error=str(e))
        raise StoreError(str(e)) from e
