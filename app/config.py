"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./database.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=480,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    admin_password: str = Field(
        default="admin123",
        description="Password guarding the administration panel",
        min_length=1,
    )
    default_user_password: str = Field(
        default="Euro2025!",
        description="Password assigned to users created without an explicit one",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Europe/Stockholm",
        description="IANA timezone used for timestamps stored by the application",
    )
    seed_default_users: bool = Field(
        default=True,
        description="Create the default warehouse accounts on startup when missing",
    )
    realtime_max_pending: int = Field(
        default=100,
        description="Maximum number of undelivered realtime messages kept per connection",
        gt=0,
    )
    realtime_overflow_policy: Literal["drop_oldest", "drop_newest"] = Field(
        default="drop_oldest",
        description="What to discard when a connection's outbound queue is full",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
