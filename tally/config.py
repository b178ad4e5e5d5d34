"""Configuration loading for Tally.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from pathlib import Path
from typing import Literal

import httpx
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Remote data configuration
    remote_data_url: str = Field(
        default="http://localhost:8000/data",
        description="URL fetched by the HTTP remote data adapter",
    )
    remote_data_api_key: str = Field(
        default="",
        description="Bearer token sent with remote data requests",
    )
    remote_data_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout in seconds for remote data requests",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("remote_data_url")
    @classmethod
    def validate_remote_data_url(cls, v: str) -> str:
        """Ensure the remote data URL parses as an absolute http(s) URL."""
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"remote_data_url is not a valid URL: {e}") from e
        if url.scheme not in {"http", "https"} or not url.host:
            raise ValueError("remote_data_url must be an absolute http:// or https:// URL")
        return v

    @field_validator("remote_data_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Ensure timeout is positive."""
        if v <= 0:
            raise ValueError("remote_data_timeout_seconds must be positive")
        return v


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build Settings from the environment, optionally reading env_file.

    Without env_file, a .env in the working directory is read if present.
    Invalid values raise pydantic.ValidationError.
    """
    if env_file is None:
        return Settings()
    return Settings(_env_file=env_file)  # type: ignore[call-arg]


__all__ = ["Settings", "load_settings"]
