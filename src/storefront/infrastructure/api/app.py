"""FastAPI application factory and configuration.

This module provides the application factory function for creating
and configuring the FastAPI application with all middleware, routes,
and lifecycle handlers.
"""

import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.core.config import get_settings
from storefront.core.logging import (
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)
from storefront.domain.exceptions import (
    AlreadyExistsError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    StorefrontError,
    ValidationError,
)
from storefront.infrastructure.persistence.database import (
    close_database,
    get_db_manager,
    init_database,
)

logger = get_logger(__name__)

# Most specific first; DuplicateNameError is covered by AlreadyExistsError.
ERROR_STATUS_CODES: list[tuple[type[StorefrontError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_code_for(exc: StorefrontError) -> int:
    """Map a domain error to its HTTP status code."""
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown events for the application.

    Args:
        app: FastAPI application instance.

    Yields:
        None: Control is yielded to the application during its lifetime.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting Storefront",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    try:
        await init_database()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        raise

    yield

    logger.info("Shutting down Storefront")
    await close_database()
    logger.info("Database connection closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="E-commerce backend for customers and their products",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register health check endpoints.

    Args:
        app: FastAPI application instance.
    """

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint.

        Returns 200 if the service is running. Does not check
        database connectivity.
        """
        return {
            "status": "healthy",
            "service": "Storefront",
            "version": get_settings().app_version,
        }

    @app.get("/ready", tags=["health"])
    async def readiness_check():
        """Readiness check endpoint, including database connectivity."""
        db = get_db_manager()
        if await db.check_connection():
            return {
                "status": "ready",
                "service": "Storefront",
                "version": get_settings().app_version,
                "database": "connected",
            }
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "service": "Storefront",
                "database": "disconnected",
            },
        )


def register_routes(app: FastAPI) -> None:
    """Register API routes.

    Args:
        app: FastAPI application instance.
    """
    from storefront.infrastructure.api.routes import customers_router, products_router

    settings = get_settings()

    app.include_router(
        customers_router, prefix=f"{settings.api_prefix}/customers", tags=["customers"]
    )
    app.include_router(
        products_router, prefix=f"{settings.api_prefix}/products", tags=["products"]
    )

    @app.get(settings.api_prefix, tags=["root"])
    async def api_root():
        """API root endpoint."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "api_version": "v1",
        }


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(StorefrontError)
    async def storefront_error_handler(request: Request, exc: StorefrontError):
        """Translate domain errors into JSON error responses."""
        status_code = status_code_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "Request failed",
            path=str(request.url.path),
            method=request.method,
            error_code=exc.code,
            error=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ is not None else None,
        )
        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "message": exc.message},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle uncaught exceptions."""
        logger.error(
            "Unhandled exception",
            path=str(request.url),
            method=request.method,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "detail": str(exc) if get_settings().debug else "An unexpected error occurred",
            },
        )


def register_middleware(app: FastAPI) -> None:
    """Register custom middleware.

    Args:
        app: FastAPI application instance.
    """

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Log each request and bind a correlation ID for its duration."""
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)

        logger.info(
            "Request started",
            method=request.method,
            path=str(request.url.path),
        )
        try:
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            return response
        finally:
            clear_context()


app = create_app()
