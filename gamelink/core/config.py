"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables (and
an optional `.env` file).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Timing defaults mirror `gamelink.core.constants`

Usage:
    from gamelink.core.config import get_settings

    settings = get_settings()
    client = LinkingAPIClient(base_url=settings.api_base_url)
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gamelink.core.constants import (
    AUTHORIZATION_TIMEOUT,
    BACKEND_TIMEOUT_DEFAULT,
    POLL_INTERVAL_SECONDS,
)
from gamelink.core.enums import Environment


class Settings(BaseSettings):
    """
    Linking workflow settings (flat structure).

    Configuration precedence:
        1. Environment variables (prefixed GAMELINK_)
        2. `.env` file in the working directory
        3. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Backend API
    api_base_url: str = Field(
        default="http://localhost:4000",
        description="Linking backend base URL",
    )
    graphql_path: str = Field(
        default="/graphql/",
        description="Path of the GraphQL endpoint serving catalog and connections",
    )
    initiate_path_template: str = Field(
        default="/api/auth/gaming/{slug}/initiate",
        description="REST path template for authorization initiation",
    )
    auth_token: SecretStr | None = Field(
        default=None,
        description="Bearer token identifying the current user",
    )
    http_timeout_seconds: float = Field(
        default=BACKEND_TIMEOUT_DEFAULT,
        description="Timeout for backend HTTP calls in seconds",
    )

    # Link workflow timing
    poll_interval_seconds: float = Field(
        default=POLL_INTERVAL_SECONDS,
        description="Seconds between connection registry refreshes while polling",
    )
    authorization_timeout_minutes: float = Field(
        default=AUTHORIZATION_TIMEOUT.total_seconds() / 60,
        description="Minutes to keep polling after the authorization surface opens",
    )
    open_authorization_surface: bool = Field(
        default=True,
        description="Open the authorization URL in a browser tab",
    )

    model_config = SettingsConfigDict(
        env_prefix="GAMELINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """
        Remove trailing slashes from URLs.

        Args:
            v: URL string.

        Returns:
            str: URL without trailing slash.
        """
        return v.rstrip("/")

    @field_validator("initiate_path_template")
    @classmethod
    def validate_initiate_path(cls, v: str) -> str:
        """
        Require the `{slug}` placeholder in the initiate path.

        Raises:
            ValueError: If the placeholder is missing.
        """
        if "{slug}" not in v:
            raise ValueError("initiate_path_template must contain '{slug}'")
        return v

    @field_validator("poll_interval_seconds", "authorization_timeout_minutes")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """
        Reject zero or negative timing values.

        Raises:
            ValueError: If the value is not positive.
        """
        if v <= 0:
            raise ValueError("timing values must be positive")
        return v

    @property
    def authorization_timeout(self) -> timedelta:
        """Authorization deadline window as a timedelta."""
        return timedelta(minutes=self.authorization_timeout_minutes)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; call `get_settings.cache_clear()`
    in tests after patching the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
