"""Client configuration using Pydantic settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables (``SMS_`` prefix)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SMS_",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO")

    # Remote API
    api_base_uri: str = Field(default="", description="Base URI of the SMS delivery API")
    api_username: str = Field(default="")
    api_password: str = Field(default="")
    api_access_token: Optional[str] = Field(default=None)
    api_refresh_token: Optional[str] = Field(default=None)

    # Delivery
    retry_attempts: int = Field(default=3, ge=0)
    request_timeout: float = Field(default=30.0, gt=0)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_base_uri")
    @classmethod
    def strip_base_uri(cls, v: str) -> str:
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """Return the settings loaded from the environment, cached per process."""
    return Settings()
