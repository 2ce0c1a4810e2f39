"""
Status-bar projection ("mini mode").

Looks only at today's events and one wall-clock instant and picks one of
four outcomes:

    IDLE     nothing running, nothing left today      -> "TTB: BLK"
    NEXT     nothing running, something later today   -> "NXT title | loc @ 14:00"
    CURRENT  an event with start <= now < end         -> "CUR title | loc END 11:00"
    BORDER   CURRENT, within 10 minutes of its end,
             and a NEXT event exists                  -> "BRD 11:00→11:15 | title @ loc"

The caller reads the clock once and passes `now` in; nothing here re-reads it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from enum import Enum
from typing import Iterable, Optional

from bstt.compact import DEFAULT_RULES, CompactionRules, compact_location, compact_title
from bstt.days import select_day
from bstt.model import Event

IDLE_LINE = "TTB: BLK"
ERROR_LINE = "TTB: ERR"

BORDER_WINDOW = timedelta(minutes=10)


class StatusKind(Enum):
    IDLE = "idle"
    NEXT = "next"
    CURRENT = "current"
    BORDER = "border"


@dataclass(frozen=True)
class Status:
    """
    One projected status. Text fields are already compacted; times are HH:MM.

    For BORDER, `title`/`location` describe the next event, `end` is the
    current event's end and `start` the next event's start.
    """

    kind: StatusKind
    title: str = ""
    location: str = ""
    start: str = ""
    end: str = ""

    def render(self) -> str:
        if self.kind is StatusKind.NEXT:
            return f"NXT {self.title} | {self.location} @ {self.start}"
        if self.kind is StatusKind.CURRENT:
            return f"CUR {self.title} | {self.location} END {self.end}"
        if self.kind is StatusKind.BORDER:
            return f"BRD {self.end}→{self.start} | {self.title} @ {self.location}"
        return IDLE_LINE


def _hhmm(dt: datetime, tz: Optional[tzinfo]) -> str:
    return dt.astimezone(tz).strftime("%H:%M")


def _current(todays: Iterable[Event], now: datetime) -> Optional[tuple[Event, datetime]]:
    """First (event, end) whose [start, end) contains now; unparseable ends never match."""
    for ev in todays:
        start, end = ev.start_at, ev.end_at
        if start is not None and end is not None and start <= now < end:
            return ev, end
    return None


def _upcoming(todays: Iterable[Event], now: datetime) -> Optional[tuple[Event, datetime]]:
    """First (event, start) starting strictly after now."""
    for ev in todays:
        start = ev.start_at
        if start is not None and start > now:
            return ev, start
    return None


def find_current(todays: Iterable[Event], now: datetime) -> Optional[Event]:
    """First event (in chronological order) whose [start, end) contains now."""
    found = _current(todays, now)
    return found[0] if found else None


def find_next(todays: Iterable[Event], now: datetime) -> Optional[Event]:
    """First event (in chronological order) starting strictly after now."""
    found = _upcoming(todays, now)
    return found[0] if found else None


def project_status(
    events: Iterable[Event],
    now: datetime,
    rules: CompactionRules = DEFAULT_RULES,
    host_zone: bool = False,
) -> Status:
    """
    Compute the status for `now` (an aware datetime in the local zone).

    By default event times are converted with `now`'s fixed offset. With
    `host_zone=True` each instant gets the host zone's offset for its own
    moment, which is right on the day of a DST change.
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")

    tz = None if host_zone else now.tzinfo
    todays = select_day(events, now.date(), tz)
    current = _current(todays, now)
    upcoming = _upcoming(todays, now)

    if current is not None:
        ev, end_at = current
        if upcoming is not None and now >= end_at - BORDER_WINDOW:
            nxt, next_start = upcoming
            return Status(
                kind=StatusKind.BORDER,
                title=compact_title(nxt.title, rules),
                location=compact_location(nxt.location, rules),
                start=_hhmm(next_start, tz),
                end=_hhmm(end_at, tz),
            )
        return Status(
            kind=StatusKind.CURRENT,
            title=compact_title(ev.title, rules),
            location=compact_location(ev.location, rules),
            end=_hhmm(end_at, tz),
        )

    if upcoming is not None:
        nxt, next_start = upcoming
        return Status(
            kind=StatusKind.NEXT,
            title=compact_title(nxt.title, rules),
            location=compact_location(nxt.location, rules),
            start=_hhmm(next_start, tz),
        )

    return Status(kind=StatusKind.IDLE)


def status_line(
    events: Iterable[Event],
    now: datetime,
    rules: CompactionRules = DEFAULT_RULES,
    host_zone: bool = False,
) -> str:
    return project_status(events, now, rules, host_zone).render()
