# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration from environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN_PASSWORD = "admin123"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./rbac.db",
        description="SQLAlchemy database URL",
    )

    # Tokens
    secret_key: str = Field(
        default="change-me-in-production",
        description="Secret used to sign access tokens",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(
        default=24 * 60, description="Access token lifetime in minutes"
    )

    # Bootstrap admin
    admin_username: str = Field(default="admin", description="Seeded admin username")
    admin_email: str = Field(
        default="admin@example.com", description="Seeded admin email"
    )
    admin_password: str = Field(
        default=DEFAULT_ADMIN_PASSWORD, description="Seeded admin password"
    )
    seed_on_startup: bool = Field(
        default=True, description="Seed the store during application startup"
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Debug mode")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
