from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, List, Optional

import requests

from bstt.config import Config
from bstt.errors import FetchError
from bstt.model import Event

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

CALENDAR_URL = "https://app.bristol.ac.uk/campusm/sso/cal2/Student%20Timetable"
REFERER = "https://app.bristol.ac.uk/campusm/home"

WINDOW = timedelta(days=90)
TIMEOUT_SECONDS = 30


def _version() -> str:
    try:
        return (Path(__file__).resolve().parent / "VERSION").read_text(encoding="utf-8").strip()
    except OSError:
        return "0.0.0"


def _headers(cookie: str) -> dict[str, str]:
    return {
        "Cookie": cookie,
        "User-Agent": f"bstt/{_version()} (Linux CLI Timetable Tool)",
        "Accept": "*/*",
        "Accept-Language": "en-US,en;q=0.5",
        "Referer": REFERER,
        "X-Requested-With": "XMLHttpRequest",
        "pragma": "no-cache",
        "cache-control": "no-cache",
    }


def build_url(now: datetime) -> str:
    """
    Calendar URL covering ±90 days around `now`.

    The dates go in as literal text (not requests params) because the
    endpoint expects the raw "...T00:00:00.000Z" form.
    """
    now_utc = now.astimezone(timezone.utc)
    fmt = "%Y-%m-%dT%H:%M:%S.000Z"
    start = (now_utc - WINDOW).strftime(fmt)
    end = (now_utc + WINDOW).strftime(fmt)
    return f"{CALENDAR_URL}?start={start}&end={end}"


# ---------------------------------------------------------------------------
# Core logic
# ---------------------------------------------------------------------------


def parse_events(payload: Any) -> List[Event]:
    """
    Convert the decoded response body ({"events": [...]}) into Events.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("events"), list):
        raise FetchError("Unexpected response shape: expected an object with an 'events' list.")
    return [Event.from_api(record) for record in payload["events"]]


def fetch_events(config: Config, now: Optional[datetime] = None) -> List[Event]:
    """
    Download the student timetable. Raises FetchError on any failure.
    """
    url = build_url(now or datetime.now(timezone.utc))
    logger.debug("GET %s", url)

    try:
        resp = requests.get(url, headers=_headers(config.api.cookie), timeout=TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise FetchError(f"Request failed: {e}") from e

    if not resp.ok:
        body = resp.text or "Could not read response body"
        raise FetchError(f"API request failed with status: {resp.status_code}. Server response:\n{body}")

    try:
        payload = resp.json()
    except ValueError as e:
        raise FetchError(
            f"Failed to decode JSON response from server. Error: {e}\n\n---\nReceived Body:\n{resp.text}---"
        ) from e

    events = parse_events(payload)
    logger.debug("Fetched %d events", len(events))
    return events
