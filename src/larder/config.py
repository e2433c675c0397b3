"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    expiring_soon_days: int = Field(default=3, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="LARDER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
