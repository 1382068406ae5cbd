"""Command-line interface for Storefront.

This module provides the CLI commands for running and managing
the Storefront application.
"""

import asyncio

import click

from storefront import __version__
from storefront.core.config import get_settings
from storefront.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version=__version__, prog_name="Storefront")
def cli() -> None:
    """Storefront - e-commerce backend for customers and their products.

    Settings are read from STOREFRONT_* environment variables and .env.
    """


@cli.command()
@click.option(
    "--host",
    type=str,
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Enable auto-reload (defaults to on in development)",
)
def serve(host: str | None, port: int | None, workers: int | None, reload: bool | None) -> None:
    """Start the Storefront server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    if reload is None:
        reload = settings.is_development

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Storefront server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "storefront.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option(
    "--force",
    is_flag=True,
    help="Skip confirmation prompt",
)
def init_db(force: bool) -> None:
    """Create all database tables.

    Use this only in development. In production, run the Alembic migrations.
    """
    from storefront.infrastructure.persistence.database import get_db_manager
    from storefront.infrastructure.persistence.models import (  # noqa: F401
        CustomerModel,
        ProductModel,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await db.create_tables()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
def info() -> None:
    """Display Storefront configuration."""
    settings = get_settings()

    click.echo(f"""
Storefront v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Pool Size:    {settings.db_pool_size}
  Echo:         {settings.db_echo}

Security:
  Token Expire: {settings.jwt_expires_hours} hours
  Issuer:       {settings.jwt_issuer}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
