"""
Day selection.

Narrows the wide fetched event list (±90 days) down to one calendar date
and orders it chronologically.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta, tzinfo
from typing import Iterable, Optional

from bstt.model import Event

logger = logging.getLogger(__name__)


def select_day(events: Iterable[Event], target: date, tz: Optional[tzinfo] = None) -> list[Event]:
    """
    Return the events whose start, in local time, falls on `target`.

    `tz` is the local zone; None means the host's zone.
    Events with an unparseable start are skipped (and logged at DEBUG level).
    The result is sorted by the raw start string.
    """
    out: list[Event] = []
    for ev in events:
        start = ev.start_at
        if start is None:
            logger.debug("Skipping event with unparseable start %r: %s", ev.start, ev.title)
            continue
        if start.astimezone(tz).date() == target:
            out.append(ev)

    # RFC3339 text from one source sorts chronologically
    out.sort(key=lambda ev: ev.start)
    return out


def day_label(target: date, today: date) -> str:
    diff = (target - today).days
    if diff == 0:
        return " (Today)"
    if diff == 1:
        return " (Tomorrow)"
    if diff == -1:
        return " (Yesterday)"
    return ""


def target_date(offset: int, today: date) -> date:
    return today + timedelta(days=offset)
