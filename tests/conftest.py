"""
Pytest fixtures for Issue Leaderboard tests.

HTTP is replaced by an in-memory transport keyed by request URL.
"""

import asyncio
import json

import pytest

from leaderboard.api import ApiRequest, ApiResponse, RequestFactory
from leaderboard.config import Settings, get_settings

API_BASE = "https://api.example"

_ENV_VARS = [
    "GITHUB_PAT",
    "GITHUB_USER_AGENT",
    "GITHUB_API_BASE",
    "GITHUB_PER_PAGE",
    "LEADERBOARD_CONCURRENCY",
    "LEADERBOARD_TIMEOUT",
    "LEADERBOARD_REACTIONS",
    "LOG_LEVEL",
    "DEBUG",
]


def json_response(url: str, payload, status: int = 200, link: str | None = None) -> ApiResponse:
    headers = {"Content-Type": "application/json; charset=utf-8"}
    if link:
        headers["Link"] = link
    return ApiResponse(url=url, status=status, headers=headers, body=json.dumps(payload).encode())


class FakeTransport:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes: dict | None = None, delay: float = 0.0):
        self.routes = dict(routes or {})
        self.delay = delay
        self.calls: list[ApiRequest] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def get(self, request: ApiRequest) -> ApiResponse:
        self.calls.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            outcome = self.routes.get(request.url)
            if outcome is None:
                return json_response(request.url, {"message": "Not Found"}, status=404)
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1

    @property
    def urls(self) -> list[str]:
        return [call.url for call in self.calls]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate settings from the developer's environment."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings():
    """Settings with a token and a fake API base."""
    return Settings(_env_file=None, GITHUB_PAT="t0ken", GITHUB_API_BASE=API_BASE)


@pytest.fixture
def requests_factory():
    """RequestFactory for octo/demo against the fake API base."""
    return RequestFactory(owner="octo", repo="demo", token="t0ken", api_base=API_BASE)


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def make_response():
    return json_response


@pytest.fixture
def issue_payload():
    """Build a GitHub issue object as returned by the listing endpoint."""

    def _issue(number: int, title: str | None = None, pull_request: bool = False) -> dict:
        payload = {
            "id": 9_000_000 + number,
            "number": number,
            "title": title or f"Issue {number}",
            "state": "open",
            "user": {"login": "reporter"},
        }
        if pull_request:
            payload["pull_request"] = {"url": f"{API_BASE}/repos/octo/demo/pulls/{number}"}
        return payload

    return _issue


@pytest.fixture
def reaction_payload():
    """Build a GitHub reaction object."""

    def _reaction(content: str = "+1", login: str = "someone") -> dict:
        return {"id": 1, "content": content, "user": {"login": login, "id": 7}}

    return _reaction
