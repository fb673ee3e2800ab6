"""
Shared fixtures for the shishutsukan client tests.

No real API calls in unit tests: every client talks to one of two fakes.
1. ScriptedSession - replays a fixed list of responses and records requests
2. FakeServer - an in-memory server applying the real server's rules

Tests that need a live server are marked ``network`` and skipped unless
pytest is run with ``--network``.
"""

import json
from collections.abc import Iterable
from typing import Any, Optional
from urllib.parse import urlsplit

import pytest
import requests

from shishutsukan.config import get_settings


def build_response(
    status_code: Optional[int],
    body: Any = None,
    *,
    raw: Optional[bytes] = None,
) -> requests.Response:
    """Build a real requests.Response carrying a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    response._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    response.encoding = "utf-8"
    response.headers["Content-Type"] = "application/json"
    return response


class ScriptedSession:
    """Returns (or raises) the given items in order, one per request."""

    def __init__(self, *items: Any):
        self.items = list(items)
        self.requests: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> Any:
        self.requests.append({"method": method, "url": url, **kwargs})
        item = self.items.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class FakeServer:
    """
    In-memory shishutsukan server speaking the requests.Session protocol.

    Rules applied, as the real server does:
    - ids are assigned sequentially and never reused
    - genre names are unique
    - a genre referenced by an expense cannot be deleted
    - deleting a missing id still reports "deleted"
    - rejections come back as 200 with an ``error`` field
    """

    def __init__(self, genres: Iterable[str] = ("食費", "交通費")):
        self.expenses: dict[int, dict] = {}
        self.genres: dict[int, dict] = {}
        self.calls: list[tuple[str, str]] = []
        self._next_expense_id = 1
        self._next_genre_id = 1
        for name in genres:
            self._insert_genre(name)

    def _insert_genre(self, name: str) -> None:
        self.genres[self._next_genre_id] = {
            "id": self._next_genre_id,
            "name": name,
            "created_at": "2025-01-15 10:00:00",
        }
        self._next_genre_id += 1

    def request(self, method: str, url: str, json: Any = None, **kwargs: Any) -> requests.Response:
        path = urlsplit(url).path
        self.calls.append((method, path))
        parts = path.strip("/").split("/")

        if parts == ["expenses"] and method == "GET":
            return build_response(200, list(self.expenses.values()))
        if parts == ["expenses"] and method == "POST":
            if json["genre"] not in {g["name"] for g in self.genres.values()}:
                return build_response(200, {"message": None, "error": "genre not found"})
            self.expenses[self._next_expense_id] = {"id": self._next_expense_id, **json}
            self._next_expense_id += 1
            return build_response(200, {"message": "ok"})
        if parts[0] == "expenses" and len(parts) == 2 and method == "DELETE":
            self.expenses.pop(int(parts[1]), None)
            return build_response(200, {"message": "deleted"})

        if parts == ["genres"] and method == "GET":
            return build_response(200, list(self.genres.values()))
        if parts == ["genres"] and method == "POST":
            if json["name"] in {g["name"] for g in self.genres.values()}:
                return build_response(200, {"message": None, "error": "genre already exists"})
            self._insert_genre(json["name"])
            return build_response(200, {"message": "ok"})
        if parts[0] == "genres" and len(parts) == 2 and method == "DELETE":
            genre = self.genres.get(int(parts[1]))
            if genre and any(e["genre"] == genre["name"] for e in self.expenses.values()):
                return build_response(200, {"message": None, "error": "genre is in use"})
            self.genres.pop(int(parts[1]), None)
            return build_response(200, {"message": "deleted"})

        return build_response(404, {"detail": "Not Found"})


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def make_session():
    return ScriptedSession


@pytest.fixture
def fake_server() -> FakeServer:
    return FakeServer()


@pytest.fixture(autouse=True)
def _fresh_settings(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch):
    """Isolate unit tests from the developer's SHISHUTSUKAN_* environment."""
    if request.node.get_closest_marker("network") is None:
        for name in ("SHISHUTSUKAN_BASE_URL", "SHISHUTSUKAN_TIMEOUT", "SHISHUTSUKAN_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add ``--network`` to enable tests against a live server."""
    parser.addoption(
        "--network",
        action="store_true",
        default=False,
        help="Enable tests that need a running shishutsukan server.",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "network: needs a live shishutsukan server; enable with --network.",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip network tests unless ``--network`` is set."""
    if config.getoption("--network"):
        return

    skip_marker = pytest.mark.skip(reason="network tests disabled; run pytest --network to enable")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_marker)
