"""Database abstraction layer using SQLAlchemy 2.0 async.

This module provides the database session management and engine configuration
for SQLAlchemy with async support. It supports both SQLite (aiosqlite) and
PostgreSQL (asyncpg) drivers.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from storefront.core.config import get_settings
from storefront.core.logging import get_logger

logger = get_logger(__name__)


def utc_now() -> datetime:
    """Timestamp default for created_at/updated_at columns."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):  # noqa: ARG001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class DatabaseManager:
    """Database connection and session manager.

    Owns the async engine and the session factory. Both are created lazily
    on first use.
    """

    def __init__(self) -> None:
        """Initialize the database manager."""
        self.settings = get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine."""
        if self._engine is None:
            is_sqlite = self.settings.database_url.startswith("sqlite")
            self._engine = create_async_engine(
                self.settings.database_url,
                echo=self.settings.db_echo,
                pool_size=self.settings.db_pool_size,
                max_overflow=self.settings.db_max_overflow,
                pool_timeout=self.settings.db_pool_timeout,
                pool_recycle=self.settings.db_pool_recycle,
                connect_args={"check_same_thread": False} if is_sqlite else {},
            )
            if is_sqlite:
                enable_sqlite_foreign_keys(self._engine)

            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
                pool_size=self.settings.db_pool_size,
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.debug("Database session factory created")
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all database tables.

        Used on startup in development. In production, use migrations instead.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created")

    async def disconnect(self) -> None:
        """Close the database engine and all connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional scope for database operations.

        The session is rolled back if the body raises and always closed.

        Yields:
            AsyncSession: SQLAlchemy async session.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False


_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one database session per request.

    Example:
        @router.get("/products")
        async def list_products(session: AsyncSession = Depends(get_db_session)):
            ...
    """
    db = get_db_manager()
    async with db.session() as session:
        yield session


async def init_database() -> None:
    """Initialize the database on application startup.

    Creates the SQLite directory if needed, checks connectivity and, in
    development, creates the tables.
    """
    # Register models with Base.metadata before create_all
    from storefront.infrastructure.persistence.models import (  # noqa: F401
        CustomerModel,
        ProductModel,
    )

    db = get_db_manager()
    settings = get_settings()

    if settings.database_url.startswith("sqlite") and ":memory:" not in settings.database_url:
        db_dir = Path(settings.database_url.split(":///")[-1]).parent
        db_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Database directory created", path=str(db_dir))

    if not await db.check_connection():
        logger.error("Database connection failed")
        raise RuntimeError("Failed to connect to database")

    if settings.is_development:
        logger.info("Development mode: Creating database tables")
        await db.create_tables()
    else:
        logger.info("Skipping auto-create, use migrations")


async def close_database() -> None:
    """Close the database connection on application shutdown."""
    db = get_db_manager()
    await db.disconnect()
