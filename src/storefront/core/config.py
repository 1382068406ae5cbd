"""Configuration management for Storefront.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "change-me-in-production-use-openssl-rand-hex-32"


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables prefixed with
    ``STOREFRONT_`` and from a local .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Storefront"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1

    # Database Settings
    database_url: str = "sqlite+aiosqlite:///./data/storefront.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Security Settings
    secret_key: str = Field(
        default=DEFAULT_SECRET_KEY,
        description="Secret key for JWT token signing",
    )
    jwt_expires_hours: int = Field(default=8, ge=1)
    jwt_issuer: str = "Ecommerce"
    password_time_cost: int = Field(
        default=3,
        ge=1,
        description="Argon2 iteration count (work factor)",
    )
    password_memory_cost: int = Field(
        default=65536,
        ge=8,
        description="Argon2 memory cost in KiB",
    )

    # CORS Settings
    cors_origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:8000"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @model_validator(mode="after")
    def validate_production_secret(self) -> "Settings":
        """Refuse to run in production with the placeholder secret key."""
        if self.is_production and self.secret_key == DEFAULT_SECRET_KEY:
            raise ValueError(
                "STOREFRONT_SECRET_KEY must be set to a real secret in production"
            )
        return self

    @model_validator(mode="after")
    def validate_sqlite_workers(self) -> "Settings":
        """Validate that SQLite is not used with multiple workers."""
        if self.workers > 1 and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite does not support multiple worker processes. "
                f"Requested {self.workers} workers, but SQLite requires workers=1. "
                "Either use --workers 1 or switch to PostgreSQL."
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once at startup and reused for the lifetime
    of the process.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
