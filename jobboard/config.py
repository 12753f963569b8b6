"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./jobboard.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key used to verify bearer tokens", min_length=1
    )
    jwt_algorithm: str = Field(
        default="HS256", description="Algorithm used to sign bearer tokens"
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Lifetime of tokens minted by operator tooling",
        gt=0,
    )
    app_timezone: str = Field(
        default="UTC", description="Timezone used to store and render timestamps"
    )
    message_list_default_limit: int = Field(
        default=200,
        description="Number of messages returned when the client sends no limit",
        gt=0,
    )
    message_list_max_limit: int = Field(
        default=500,
        description="Upper bound applied to any requested message limit",
        gt=0,
    )
    avatar_base_url: str = Field(
        default="https://api.dicebear.com/7.x/initials/svg",
        description="Generator used for conversations without a profile avatar",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )
    log_level: str = Field(default="INFO", description="Level for the jobboard logger")

    @model_validator(mode="after")
    def _validate_message_limits(self) -> "Settings":
        if self.message_list_default_limit > self.message_list_max_limit:
            raise ValueError(
                "MESSAGE_LIST_DEFAULT_LIMIT must not exceed MESSAGE_LIST_MAX_LIMIT"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
