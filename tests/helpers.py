"""
Shared fixtures for the test-suite: a fixed local zone and an Event factory.
"""

from __future__ import annotations

import os
import time
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Iterator, Optional

from bstt.model import Event

# Fixed +01:00 so results never depend on the machine running the tests
TZ = timezone(timedelta(hours=1))
DAY = "2026-10-19"


def ts(hhmm: str, day: str = DAY, offset: str = "+01:00") -> str:
    return f"{day}T{hhmm}:00{offset}"


def at(hhmm: str, day: str = DAY) -> datetime:
    h, m = hhmm.split(":")
    y, mo, d = day.split("-")
    return datetime(int(y), int(mo), int(d), int(h), int(m), tzinfo=TZ)


def make_event(
    title: str = "Data Structures Lecture",
    start: str = "09:00",
    end: str = "10:00",
    location: str = "Fry Building Room G.13",
    event_type: str = "Lecture",
    teacher_name: Optional[str] = "Dr A Smith",
    day: str = DAY,
) -> Event:
    return Event(
        title=title,
        event_type=event_type,
        start=ts(start, day),
        end=ts(end, day),
        location=location,
        teacher_name=teacher_name,
    )


# POSIX TZ strings need no tzdata: fixed +01:00, and UK time with DST
FIXED_PLUS_ONE = "CET-1"
UK_WITH_DST = "GMT0BST,M3.5.0/1,M10.5.0"


@contextmanager
def host_zone(tz_name: str) -> Iterator[None]:
    """
    Temporarily switch the process' local zone (what astimezone() uses).
    """
    saved = os.environ.get("TZ")
    os.environ["TZ"] = tz_name
    time.tzset()
    try:
        yield
    finally:
        if saved is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = saved
        time.tzset()
