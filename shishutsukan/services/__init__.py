"""Services package."""

from shishutsukan.services.api import (
    DecodingError,
    ExpenseAPIInterface,
    HTTPError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    ServerError,
    ShishutsukanClient,
    ShishutsukanError,
    get_shared_session,
)

__all__ = [
    "DecodingError",
    "ExpenseAPIInterface",
    "HTTPError",
    "InvalidResponseError",
    "InvalidURLError",
    "NetworkError",
    "ServerError",
    "ShishutsukanClient",
    "ShishutsukanError",
    "get_shared_session",
]
