"""
Configuration Management for the Shishutsukan client

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The client itself never reads the environment.
Its only inputs are a base URL and a transport. These settings exist for
callers who prefer to keep the server address in a .env file, and are
consumed only by ShishutsukanClient.from_settings() and configure_logging().
"""

from functools import lru_cache
from typing import Optional

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "http://localhost:8000"


class ClientSettings(BaseSettings):
    """
    Client settings.

    Loads configuration from SHISHUTSUKAN_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHISHUTSUKAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    base_url: AnyHttpUrl = Field(
        default=DEFAULT_BASE_URL,
        validate_default=True,
        description="Base URL of the shishutsukan server"
    )
    timeout: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Seconds handed to the transport for each request (None = no limit)"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for the shishutsukan logger namespace"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> ClientSettings:
    """
    Get client settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return ClientSettings()
