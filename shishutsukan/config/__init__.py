"""Configuration package."""

from shishutsukan.config.settings import (
    DEFAULT_BASE_URL,
    ClientSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "ClientSettings",
    "get_settings",
]
