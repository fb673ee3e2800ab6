"""
Shishutsukan - Expense API Client

An asyncio client for the shishutsukan (支出管理) expense-tracking server.

DESIGN PRINCIPLES:
1. The server owns the rules (ids, unique genres, in-use checks)
2. Every failure is classified, never swallowed
3. No hidden state: no caching, no retries
"""

from shishutsukan.models import (
    APIMessage,
    Expense,
    ExpenseWithId,
    Genre,
    GenreWithId,
)
from shishutsukan.services import (
    DecodingError,
    ExpenseAPIInterface,
    HTTPError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    ServerError,
    ShishutsukanClient,
    ShishutsukanError,
)

__version__ = "1.0.0"

__all__ = [
    "APIMessage",
    "Expense",
    "ExpenseWithId",
    "Genre",
    "GenreWithId",
    "DecodingError",
    "ExpenseAPIInterface",
    "HTTPError",
    "InvalidResponseError",
    "InvalidURLError",
    "NetworkError",
    "ServerError",
    "ShishutsukanClient",
    "ShishutsukanError",
]
