"""Application configuration settings."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./notifications.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to stamp events and notifications",
    )
    dispatch_interval_seconds: float = Field(
        default=2.0,
        description="Seconds between two dispatcher ticks",
        gt=0,
    )
    dispatch_tick_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for the user lookup and save of a single tick",
        gt=0,
    )
    dispatch_queue_max_size: int = Field(
        default=0,
        description="Maximum number of pending events in the dispatch queue (0 = unbounded)",
        ge=0,
    )
    dispatcher_enabled: bool = Field(
        default=True,
        description="Start the periodic dispatcher together with the application",
    )
    seed_directory_on_startup: bool = Field(
        default=True,
        description="Replace the user directory with the default seed set at startup",
    )
    notification_content_template: str = Field(
        default="{source_username} {type}d your post",
        description=(
            "Template used to render notification content. Available fields: "
            "type, source_username, source_user_id, target_user_id"
        ),
        min_length=1,
    )
    notification_unknown_source: str = Field(
        default="Someone",
        description="Placeholder used when an event does not carry a source username",
    )
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS),
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: object) -> object:
        if isinstance(value, str):
            if value.strip().startswith("["):
                return json.loads(value)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
