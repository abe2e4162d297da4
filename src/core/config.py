"""Application configuration module.

This module provides centralized configuration management using pydantic-settings.
Settings are loaded from environment variables and .env file.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field
from pydantic import SecretStr
from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from src.utilities.enums import Environment


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    ``DATABASE_URL`` and ``JWT_SECRET`` have no defaults: a process started
    without them fails while loading settings and never serves a request.

    Attributes:
        environment: Current runtime environment. Defaults to development.
        database_dsn: SQLAlchemy async connection DSN.
        jwt_secret: Key used to sign session tokens.
        jwt_algorithm: JWT signing algorithm.
        customer_token_ttl: Lifetime of customer session tokens.
        employee_token_ttl: Lifetime of employee session tokens.
        allowed_cors_origins: Comma-separated CORS origins or '*'.
        log_level: Root log level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Project Global Configuration
    environment: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    allowed_cors_origins: str = Field(default="*", alias="allowed_origins")

    # Database Configuration
    database_dsn: str = Field(alias="database_url", min_length=1)

    # Token Configuration
    jwt_secret: SecretStr
    jwt_algorithm: str = "HS256"
    customer_token_ttl: timedelta = timedelta(days=7)
    employee_token_ttl: timedelta = timedelta(hours=8)

    @field_validator("jwt_secret")
    @classmethod
    def require_secret(cls, value: SecretStr) -> SecretStr:
        """Reject blank signing secrets; there is no fallback key."""
        if not value.get_secret_value().strip():
            raise ValueError("JWT_SECRET must not be empty")
        return value

    @property
    def debug(self) -> bool:
        """Check if application is running in debug mode.

        Returns:
            True if environment is development, testing, or staging.
        """
        return self.environment in (
            Environment.DEVELOPMENT,
            Environment.TESTING,
            Environment.STAGING,
        )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get CORS allowed origins as a list.

        Supports comma-separated values or '*' for all origins.

        Returns:
            List of allowed origin URLs.
        """
        return [origin.strip() for origin in self.allowed_cors_origins.split(",") if origin.strip()]

    @property
    def database_url(self) -> str:
        """Get database URL as string for SQLAlchemy."""
        return self.database_dsn

    @property
    def jwt_secret_configured(self) -> bool:
        """Whether a non-blank signing secret is present."""
        return bool(self.jwt_secret.get_secret_value().strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings instance.

    Uses lru_cache to ensure settings are loaded only once.

    Returns:
        Singleton Settings instance.
    """
    return Settings()
