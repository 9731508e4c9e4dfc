from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class MovieServiceSettings(BaseSettings):
    """Process settings; every field is optional and defaults to 0.0.0.0:3000."""

    model_config = SettingsConfigDict(
        env_prefix="MOVIESERVICE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    APP_NAME: str = Field(default="movieservice")
    APP_VERSION: str = Field(default="0.1.0")
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000, ge=0, le=65535)
    LOG_LEVEL: LogLevel = Field(default="INFO")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v
