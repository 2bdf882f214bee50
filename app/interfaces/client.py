"""Minimal read-only client for the activities API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
PAGE_HEADING = "Activities App"


def fetch_activities(
    base_url: str = DEFAULT_BASE_URL, *, client: httpx.Client | None = None
) -> list[dict[str, Any]]:
    """Fetch every activity once.

    Failures are logged and yield an empty list; the request is not retried.
    """

    owns_client = client is None
    http = client or httpx.Client(base_url=base_url, timeout=10.0)
    try:
        response = http.get("/api/activities")
        response.raise_for_status()
        return list(response.json())
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Error fetching activities: %s", exc)
        return []
    finally:
        if owns_client:
            http.close()


def render_activities(activities: list[dict[str, Any]]) -> str:
    """Render the page heading followed by one activity title per line."""

    lines = [PAGE_HEADING]
    lines.extend(f"- {activity.get('title', '')}" for activity in activities)
    return "\n".join(lines)


__all__ = ["DEFAULT_BASE_URL", "fetch_activities", "render_activities"]
