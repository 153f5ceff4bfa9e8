"""Configuration management using Pydantic BaseSettings."""
from __future__ import annotations

import pytz
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API settings
    api_base_url: str = ""
    api_key: str = ""
    api_key_header: str = "X-Api-Key"

    # Transport settings
    request_timeout: float = 10.0
    max_retries: int = Field(default=3, ge=1)

    # Display settings
    timezone: str = "UTC"

    @field_validator("api_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        if v is None:
            return ""
        return str(v).strip().rstrip("/")

    @field_validator("timezone")
    @classmethod
    def check_timezone(cls, v: str) -> str:
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"unknown timezone: {v}")
        return v

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls()
