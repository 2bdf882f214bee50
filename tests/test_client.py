"""Tests for the read-only activities client."""

from __future__ import annotations

import logging

import httpx

from app.interfaces.client import PAGE_HEADING, fetch_activities, render_activities


def _client(handler) -> httpx.Client:
    return httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(handler))


def test_fetch_activities_issues_a_single_list_request() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=[{"id": "1", "title": "Run"}])

    with _client(handler) as client:
        activities = fetch_activities(client=client)

    assert activities == [{"id": "1", "title": "Run"}]
    assert [(r.method, r.url.path) for r in requests] == [("GET", "/api/activities")]


def test_fetch_activities_logs_errors_and_returns_empty(caplog) -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(500, json={"detail": "boom"})

    with caplog.at_level(logging.ERROR, logger="app.interfaces.client"):
        with _client(handler) as client:
            assert fetch_activities(client=client) == []

    assert len(calls) == 1
    assert "Error fetching activities" in caplog.text


def test_fetch_activities_handles_transport_errors(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with caplog.at_level(logging.ERROR, logger="app.interfaces.client"):
        with _client(handler) as client:
            assert fetch_activities(client=client) == []

    assert "Error fetching activities" in caplog.text


def test_render_activities_lists_titles() -> None:
    page = render_activities([{"title": "Run"}, {"title": "Swim"}])

    assert page.splitlines() == [PAGE_HEADING, "- Run", "- Swim"]
