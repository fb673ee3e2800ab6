"""
API Services Package

Provides the abstract operation contract and the HTTP client that
implements it against a shishutsukan server.
"""

from shishutsukan.services.api.errors import (
    DecodingError,
    HTTPError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    ServerError,
    ShishutsukanError,
)
from shishutsukan.services.api.interface import ExpenseAPIInterface
from shishutsukan.services.api.client import ShishutsukanClient, get_shared_session

__all__ = [
    # Interface
    "ExpenseAPIInterface",
    # Exceptions
    "DecodingError",
    "HTTPError",
    "InvalidResponseError",
    "InvalidURLError",
    "NetworkError",
    "ServerError",
    "ShishutsukanError",
    # HTTP implementation
    "ShishutsukanClient",
    "get_shared_session",
]
