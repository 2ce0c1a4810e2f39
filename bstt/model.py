"""
Central data model.

Defines the canonical Event record shared by the fetcher, the day selector,
the timetable renderer and the status projector.

Timestamps stay as the RFC3339 strings delivered by the API; they are parsed
on demand with parse_timestamp(), which never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from bstt.errors import FetchError


# date "T" time, whole seconds required, optional fraction, "Z" or +HH:MM
_RFC3339_RE = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$")

# one day of slack so converting to any UTC offset stays inside datetime's range
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc) + timedelta(days=1)
_LATEST = datetime.max.replace(tzinfo=timezone.utc) - timedelta(days=1)


def parse_timestamp(text: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC3339 timestamp into an aware datetime.

    Returns None for missing, malformed or offset-less input, for ISO 8601
    forms outside RFC3339 (no seconds, basic format), and for instants too
    close to the ends of datetime's range to convert between zones.
    """
    if not isinstance(text, str):
        return None
    raw = text.strip().upper()
    if not _RFC3339_RE.match(raw):
        return None
    try:
        dt = datetime.fromisoformat(raw)
        utc = dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
    if not _EARLIEST <= utc <= _LATEST:
        return None
    return dt


@dataclass(frozen=True)
class Event:
    """
    One scheduled occurrence from the student timetable.
    """

    title: str
    event_type: str
    start: str
    end: str
    location: str
    teacher_name: Optional[str] = None

    @classmethod
    def from_api(cls, record: dict[str, Any]) -> "Event":
        """
        Build an Event from one record of the campusM calendar response.

        Wire names: desc1, desc2, start, end, locAdd1, teacherName (optional).
        """
        if not isinstance(record, dict):
            raise FetchError(f"Unexpected event record: {record!r}")

        missing = [k for k in ("desc1", "desc2", "start", "end", "locAdd1") if k not in record]
        if missing:
            raise FetchError(f"Event record is missing field(s): {', '.join(missing)}")

        teacher = record.get("teacherName")
        return cls(
            title=str(record["desc1"] or ""),
            event_type=str(record["desc2"] or ""),
            start=str(record["start"] or ""),
            end=str(record["end"] or ""),
            location=str(record["locAdd1"] or ""),
            teacher_name=None if teacher is None else str(teacher),
        )

    @property
    def start_at(self) -> Optional[datetime]:
        return parse_timestamp(self.start)

    @property
    def end_at(self) -> Optional[datetime]:
        return parse_timestamp(self.end)

    @property
    def lecturer(self) -> str:
        """
        First listed lecturer ("" when the teacher name is absent or empty).
        """
        if not self.teacher_name:
            return ""
        return self.teacher_name.split(",", 1)[0].strip()
