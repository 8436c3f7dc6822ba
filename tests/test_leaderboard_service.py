"""
End-to-end tests for the leaderboard pipeline with an in-memory transport.
"""

import asyncio

import pytest

from leaderboard.config import Settings
from leaderboard.exceptions import ConfigurationError, TransportError
from leaderboard.services import build_leaderboard
from leaderboard.services import leaderboard_service

REPO_BASE = "https://api.example/repos/octo/demo"
PAGE_1 = f"{REPO_BASE}/issues?state=open&page=1&per_page=100"
PAGE_2 = f"{REPO_BASE}/issues?state=open&page=2&per_page=100"


def reactions_url(issue_id: int) -> str:
    return f"{REPO_BASE}/issues/{issue_id}/reactions?per_page=100"


@pytest.fixture
def two_page_routes(make_response, issue_payload, reaction_payload):
    """Page 1: 100 issues with a next link. Page 2: 5 issues, no next link."""
    routes = {
        PAGE_1: make_response(
            PAGE_1,
            [issue_payload(n) for n in range(1, 101)],
            link=f'<{PAGE_2}>; rel="next", <{PAGE_2}>; rel="last"',
        ),
        PAGE_2: make_response(
            PAGE_2,
            [issue_payload(n) for n in range(101, 106)],
            link=f'<{PAGE_1}>; rel="prev", <{PAGE_1}>; rel="first"',
        ),
    }
    for n in range(1, 106):
        routes[reactions_url(n)] = make_response(reactions_url(n), [reaction_payload("laugh")])

    routes[reactions_url(7)] = make_response(
        reactions_url(7), [reaction_payload("+1", user) for user in ("a", "b", "c")]
    )
    routes[reactions_url(50)] = make_response(
        reactions_url(50), [reaction_payload("+1", "a"), reaction_payload("heart", "b"), reaction_payload("heart", "c")]
    )
    routes[reactions_url(103)] = make_response(
        reactions_url(103), [reaction_payload("+1", "a"), reaction_payload("+1", "b")]
    )
    return routes


class TestBuildLeaderboard:
    """Tests for build_leaderboard."""

    def test_two_page_listing(self, settings, make_transport, two_page_routes):
        transport = make_transport(two_page_routes)

        result = asyncio.run(build_leaderboard(settings, "octo", "demo", transport=transport))

        assert [(e.id, e.count, e.position) for e in result.entries] == [
            (7, 3, 1),
            (103, 2, 2),
            (50, 1, 3),
        ]
        assert result.issue_count == 105
        assert result.slug == "octo/demo"
        assert result.labels == ["+1"]
        assert result.entries[0].title == "Issue 7"
        assert len(transport.calls) == 2 + 105

    def test_counted_labels_override(self, settings, make_transport, two_page_routes):
        result = asyncio.run(
            build_leaderboard(settings, "octo", "demo", labels=["heart"], transport=make_transport(two_page_routes))
        )

        assert [(e.id, e.count) for e in result.entries] == [(50, 2)]

    def test_limit(self, settings, make_transport, two_page_routes):
        result = asyncio.run(
            build_leaderboard(settings, "octo", "demo", limit=1, transport=make_transport(two_page_routes))
        )

        assert [e.id for e in result.entries] == [7]

    def test_second_page_failure_keeps_first_page(self, settings, make_transport, two_page_routes):
        two_page_routes[PAGE_2] = TransportError(PAGE_2, reason="connection reset")

        result = asyncio.run(
            build_leaderboard(settings, "octo", "demo", transport=make_transport(two_page_routes))
        )

        assert result.issue_count == 100
        assert [e.id for e in result.entries] == [7, 50]

    def test_missing_token_fails_before_any_request(self, make_transport):
        transport = make_transport()
        settings = Settings(_env_file=None)

        with pytest.raises(ConfigurationError):
            asyncio.run(build_leaderboard(settings, "octo", "demo", transport=transport))

        assert transport.calls == []

    def test_opens_http_transport_when_none_given(self, monkeypatch, settings, make_transport, two_page_routes):
        fake = make_transport(two_page_routes)
        opened = {}

        class _Transport:
            def __init__(self, max_concurrency, timeout):
                opened["args"] = (max_concurrency, timeout)

            async def __aenter__(self):
                return fake

            async def __aexit__(self, exc_type, exc_val, exc_tb):
                opened["closed"] = True

        monkeypatch.setattr(leaderboard_service, "HttpTransport", _Transport)

        result = asyncio.run(build_leaderboard(settings, "octo", "demo"))

        assert opened["args"] == (settings.max_concurrency, settings.request_timeout)
        assert opened["closed"] is True
        assert len(result.entries) == 3
