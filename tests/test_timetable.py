"""
Unit tests for the full-day timetable view.
"""

import io
import unittest
from datetime import date

from rich.console import Console

from bstt.model import Event
from bstt.timetable import NO_EVENTS_MESSAGE, Timetable, TimetableRow, build_timetable, print_timetable
from tests.helpers import TZ, make_event


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, width=140, color_system=None), buf


class TestBuildTimetable(unittest.TestCase):
    def test_rows_in_order_with_first_lecturer(self) -> None:
        events = [
            make_event(title="Afternoon Lab", start="14:00", end="17:00", teacher_name=None),
            make_event(title="Morning Lecture", teacher_name="Dr A Smith, Prof B Jones"),
            make_event(title="Elsewhere", day="2026-10-21"),
        ]
        tt = build_timetable(events, date(2026, 10, 19), today=date(2026, 10, 18), tz=TZ)

        self.assertEqual(tt.label, " (Tomorrow)")
        self.assertEqual(
            tt.rows,
            (
                TimetableRow("09:00 - 10:00", "Lecture", "Morning Lecture", "Fry Building Room G.13", "Dr A Smith"),
                TimetableRow("14:00 - 17:00", "Lecture", "Afternoon Lab", "Fry Building Room G.13", ""),
            ),
        )

    def test_titles_are_not_compacted(self) -> None:
        tt = build_timetable([make_event()], date(2026, 10, 19), today=date(2026, 10, 19), tz=TZ)
        self.assertEqual(tt.rows[0].title, "Data Structures Lecture")

    def test_rows_are_immutable(self) -> None:
        tt = build_timetable([make_event()], date(2026, 10, 19), today=date(2026, 10, 19), tz=TZ)
        self.assertIsInstance(tt.rows, tuple)
        self.assertEqual(Timetable(day=date(2026, 10, 19), label="").rows, ())

    def test_unparseable_end_shows_placeholder(self) -> None:
        ev = Event("T", "Lab", "2026-10-19T09:00:00+01:00", "", "L")
        tt = build_timetable([ev], date(2026, 10, 19), today=date(2026, 10, 19), tz=TZ)
        self.assertEqual(tt.rows[0].time, "09:00 - ?")

    def test_heading_and_labels(self) -> None:
        today = date(2026, 10, 19)
        self.assertEqual(
            build_timetable([], today, today, TZ).heading,
            "Timetable for Monday, 19 October 2026 (Today)",
        )
        self.assertEqual(build_timetable([], date(2026, 10, 18), today, TZ).label, " (Yesterday)")
        self.assertEqual(build_timetable([], date(2026, 10, 25), today, TZ).label, "")


class TestPrintTimetable(unittest.TestCase):
    def test_empty_day_message(self) -> None:
        console, buf = _console()
        print_timetable(Timetable(day=date(2026, 10, 24), label=""), console)
        out = buf.getvalue()
        self.assertIn("Timetable for Saturday, 24 October 2026", out)
        self.assertIn(NO_EVENTS_MESSAGE, out)
        self.assertNotIn("Lecturer", out)

    def test_table_contains_rows(self) -> None:
        console, buf = _console()
        tt = build_timetable([make_event(title="Algorithms [Grp3]")], date(2026, 10, 19), date(2026, 10, 19), TZ)
        print_timetable(tt, console)
        out = buf.getvalue()
        for text in ("Time", "Type", "Event", "Location", "Lecturer", "09:00 - 10:00", "Algorithms [Grp3]", "Dr A Smith"):
            with self.subTest(text=text):
                self.assertIn(text, out)
        self.assertNotIn(NO_EVENTS_MESSAGE, out)


if __name__ == "__main__":
    unittest.main()
