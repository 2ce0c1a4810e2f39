"""
Full-day timetable view.

build_timetable() turns the fetched events into plain rows for one date;
print_timetable() draws them as a rich table.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bstt.days import day_label, select_day
from bstt.model import Event

NO_EVENTS_MESSAGE = "No events scheduled for this day."


@dataclass(frozen=True)
class TimetableRow:
    time: str
    event_type: str
    title: str
    location: str
    lecturer: str


@dataclass(frozen=True)
class Timetable:
    day: date
    label: str
    rows: tuple[TimetableRow, ...] = ()

    @property
    def heading(self) -> str:
        return f"Timetable for {self.day.strftime('%A, %d %B %Y')}{self.label}"


def _time_range(ev: Event, tz: Optional[tzinfo]) -> str:
    # start always parses here (select_day filtered it); end may not
    start, end = ev.start_at, ev.end_at
    start_s = start.astimezone(tz).strftime("%H:%M") if start else "?"
    end_s = end.astimezone(tz).strftime("%H:%M") if end else "?"
    return f"{start_s} - {end_s}"


def build_timetable(
    events: Iterable[Event],
    target: date,
    today: date,
    tz: Optional[tzinfo] = None,
) -> Timetable:
    rows = tuple(
        TimetableRow(
            time=_time_range(ev, tz),
            event_type=ev.event_type,
            title=ev.title,
            location=ev.location,
            lecturer=ev.lecturer,
        )
        for ev in select_day(events, target, tz)
    )
    return Timetable(day=target, label=day_label(target, today), rows=rows)


def print_timetable(timetable: Timetable, console: Console) -> None:
    console.print(f" [bold]{escape(timetable.heading)}[/]")

    if not timetable.rows:
        console.print(f"\n[green]{NO_EVENTS_MESSAGE}[/]")
        return

    table = Table(box=box.ROUNDED, show_lines=True, header_style="magenta", expand=False)
    table.add_column("Time", style="cyan", no_wrap=True)
    table.add_column("Type", style="yellow")
    table.add_column("Event")
    table.add_column("Location", style="green")
    table.add_column("Lecturer", style="blue")

    for row in timetable.rows:
        cells = (row.time, row.event_type, row.title, row.location, row.lecturer)
        table.add_row(*(escape(cell) for cell in cells))

    console.print(table)
