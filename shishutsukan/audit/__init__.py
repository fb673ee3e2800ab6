"""Exchange logging package."""

from shishutsukan.audit.logger import LOGGER_NAME, ExchangeLogger, configure_logging

__all__ = ["LOGGER_NAME", "ExchangeLogger", "configure_logging"]
