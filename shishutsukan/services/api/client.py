"""
HTTP Client for the shishutsukan expense API

This service handles:
1. Building requests (method, path, JSON body)
2. Running them on a requests.Session without blocking the event loop
3. Validating the HTTP status
4. Decoding bodies into our models
5. Turning envelope errors into ServerError

CRITICAL: A 2xx status does NOT mean a mutation succeeded.
The server reports duplicate genres and in-use genres inside a 2xx envelope,
so every mutating call checks the envelope's ``error`` field.

DESIGN DECISION: requests is blocking, so each exchange runs in a worker
thread via asyncio.to_thread. The client holds no mutable state, so
concurrent calls need no locking. Connection pooling and timeouts belong
to the session.
"""

import asyncio
import time
from functools import lru_cache
from typing import Any, Optional, TypeVar, Union
from urllib.parse import urlsplit, urlunsplit

import requests
from pydantic import AnyHttpUrl, BaseModel, TypeAdapter, ValidationError

from shishutsukan.audit import ExchangeLogger
from shishutsukan.config import ClientSettings, get_settings
from shishutsukan.models import (
    APIMessage,
    ExchangeEvent,
    Expense,
    ExpenseWithId,
    Genre,
    GenreWithId,
)
from shishutsukan.services.api.errors import (
    DecodingError,
    HTTPError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
    ServerError,
)
from shishutsukan.services.api.interface import ExpenseAPIInterface


T = TypeVar("T")

_URL = TypeAdapter(AnyHttpUrl)
_MESSAGE = TypeAdapter(APIMessage)
_EXPENSES = TypeAdapter(list[ExpenseWithId])
_GENRES = TypeAdapter(list[GenreWithId])


@lru_cache()
def get_shared_session() -> requests.Session:
    """
    Get the process-wide default session (cached).

    Used by every client constructed without an explicit session.
    requests does not promise that a Session is thread-safe, and concurrent
    calls run in separate worker threads; pass your own session per client
    when isolation matters.
    """
    return requests.Session()


class ShishutsukanClient(ExpenseAPIInterface):
    """
    Client for the shishutsukan expense API.

    Usage:
        client = ShishutsukanClient("http://localhost:8000")
        await client.add_genre(Genre(name="食費"))
        genres = await client.get_genres()
    """

    def __init__(
        self,
        base_url: Union[str, AnyHttpUrl],
        session: Optional[requests.Session] = None,
        *,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Server base URL. A string is parsed and must be an
                     absolute http(s) URL; an AnyHttpUrl is used as is.
            session: Transport. Anything with a requests.Session-style
                    ``request(method, url, **kwargs)``. Defaults to the
                    shared session.
            timeout: Passed through to the session on every request.

        Raises:
            InvalidURLError: If base_url is a string that does not parse
        """
        if isinstance(base_url, str):
            try:
                base_url = _URL.validate_python(base_url)
            except ValidationError:
                raise InvalidURLError(base_url) from None
        self._base_url = base_url
        # Resource paths go onto the URL path; query and fragment stay put
        parts = urlsplit(str(base_url))
        self._parts = parts._replace(path=parts.path.rstrip("/"))
        self._root = urlunsplit(self._parts)
        self._session = session if session is not None else get_shared_session()
        self._timeout = timeout
        self._exchange_logger = ExchangeLogger()

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> "ShishutsukanClient":
        """Build a client from ClientSettings (defaults to get_settings())."""
        settings = settings or get_settings()
        return cls(settings.base_url, session, timeout=settings.timeout)

    @property
    def base_url(self) -> AnyHttpUrl:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        return self._session

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._root!r})"

    # =========================================================================
    # Expense APIs
    # =========================================================================

    async def add_expense(self, expense: Expense) -> APIMessage:
        return await self._mutate("POST", "/expenses", expense)

    async def get_expenses(self) -> list[ExpenseWithId]:
        response = await self._send("GET", "/expenses")
        return self._decode(response, _EXPENSES)

    async def delete_expense(self, expense_id: int) -> APIMessage:
        return await self._mutate("DELETE", f"/expenses/{expense_id}")

    # =========================================================================
    # Genre APIs
    # =========================================================================

    async def get_genres(self) -> list[GenreWithId]:
        response = await self._send("GET", "/genres")
        return self._decode(response, _GENRES)

    async def add_genre(self, genre: Genre) -> APIMessage:
        return await self._mutate("POST", "/genres", genre)

    async def delete_genre(self, genre_id: int) -> APIMessage:
        return await self._mutate("DELETE", f"/genres/{genre_id}")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _url(self, path: str) -> str:
        return urlunsplit(self._parts._replace(path=self._parts.path + path))

    async def _send(
        self,
        method: str,
        path: str,
        body: Optional[BaseModel] = None,
    ) -> Any:
        """
        Perform one exchange and validate its status.

        Returns the transport's response object, status already checked.
        """
        kwargs: dict[str, Any] = {"timeout": self._timeout}
        if body is not None:
            kwargs["json"] = body.model_dump(mode="json", by_alias=True)
            kwargs["headers"] = {"Content-Type": "application/json"}

        event = ExchangeEvent(method=method, path=path)
        started = time.perf_counter()
        try:
            response = await asyncio.to_thread(
                self._session.request, method, self._url(path), **kwargs
            )
        except requests.RequestException as e:
            raise NetworkError(e) from e

        event.elapsed_ms = (time.perf_counter() - started) * 1000
        event.status_code = self._status_of(response)
        self._exchange_logger.log(event)

        self._validate_response(response)
        return response

    @staticmethod
    def _status_of(response: Any) -> Optional[int]:
        status = getattr(response, "status_code", None)
        # bool is an int subclass, but never a status
        if isinstance(status, bool) or not isinstance(status, int):
            return None
        return status

    def _validate_response(self, response: Any) -> None:
        status = self._status_of(response)
        # Bodies are read through .json(), so a response without one is unusable
        if status is None or not callable(getattr(response, "json", None)):
            raise InvalidResponseError(response)
        if not 200 <= status <= 299:
            raise HTTPError(status)

    @staticmethod
    def _decode(response: Any, adapter: TypeAdapter[T]) -> T:
        try:
            return adapter.validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodingError(e) from e

    async def _mutate(
        self,
        method: str,
        path: str,
        body: Optional[BaseModel] = None,
    ) -> APIMessage:
        """Send a mutating request and enforce the envelope contract."""
        response = await self._send(method, path, body)
        message = self._decode(response, _MESSAGE)
        if message.is_error:
            raise ServerError(message.error)
        return message
