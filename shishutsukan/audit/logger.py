"""
Exchange Logger

Every HTTP exchange the client performs is logged as a structured event.
This provides:
1. Traceability of what was sent where
2. Timing for slow-server diagnosis

The logger:
- Only records, never decides. Errors are raised by the client, not here.
- Logs at DEBUG so a library user sees nothing unless they opt in.
"""

import logging
from typing import Optional

import structlog

from shishutsukan.config import get_settings
from shishutsukan.models.audit import ExchangeEvent


LOGGER_NAME = "shishutsukan"


# Configure structlog for local logging, unless the host application already did
if not structlog.is_configured():
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False)
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set the stdlib level of the shishutsukan logger namespace.

    Args:
        level: Level name. Defaults to ClientSettings.log_level.
    """
    level = level or get_settings().log_level
    logging.getLogger(LOGGER_NAME).setLevel(level.upper())


class ExchangeLogger:
    """Writes ExchangeEvents to the structured log."""

    def __init__(self, name: str = LOGGER_NAME):
        self._logger = structlog.get_logger(name)

    def log(self, event: ExchangeEvent) -> None:
        self._logger.debug("api_exchange", **event.to_log_dict())
