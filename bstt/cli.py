"""
CLI (Command Line Interface).

    bstt            today's timetable as a table
    bstt +1         tomorrow (any signed day offset works: -1, 2, ...)
    bstt --mini     one status line for Polybar & co.

Exit codes: 0 on success, 1 on any error in full mode. Mini mode never
fails loudly: errors become the fixed "TTB: ERR" line so the status bar
does not fill up with a traceback.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from bstt.config import load_or_create_config
from bstt.days import target_date
from bstt.errors import TimetableError
from bstt.fetch import fetch_events
from bstt.model import Event
from bstt.status import ERROR_LINE, status_line
from bstt.timetable import build_timetable, print_timetable

logger = logging.getLogger(__name__)


def _now() -> datetime:
    """
    Single wall-clock read, in the host's local zone.
    """
    return datetime.now().astimezone()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _parse_offset(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise TimetableError("Invalid day offset.") from e


def _load_events(config_path: Path | None, spinner: Console | None) -> list[Event]:
    """
    Load config and fetch events; with `spinner`, animate while waiting.
    """
    config = load_or_create_config(config_path)
    if spinner is None:
        return fetch_events(config)

    try:
        with spinner.status("Fetching timetable...", spinner="dots"):
            events = fetch_events(config)
    except TimetableError:
        spinner.print("[red]✗[/]")
        raise
    spinner.print("[green]✓[/]")
    return events


def _run_mini(args: argparse.Namespace) -> int:
    try:
        events = _load_events(args.config, spinner=None)
        line = status_line(events, _now(), host_zone=True)
    except TimetableError as e:
        logger.debug("Mini mode error: %s", e)
        line = ERROR_LINE

    # no trailing newline: status bars print the line as-is
    sys.stdout.write(line)
    sys.stdout.flush()
    return 0


def _run_full(args: argparse.Namespace) -> int:
    out = Console()
    err = Console(stderr=True)
    try:
        offset = _parse_offset(args.day_offset)
        events = _load_events(args.config, spinner=err)
    except TimetableError as e:
        err.print(f"[bold red]Error:[/] {escape(str(e))}", highlight=False)
        return 1

    now = _now()
    today = now.date()
    # tz=None: each instant gets the host zone's offset on its own date (DST)
    timetable = build_timetable(events, target_date(offset, today), today, tz=None)
    print_timetable(timetable, out)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser.
    """
    parser = argparse.ArgumentParser(
        prog="bstt",
        description="Fetches and displays University of Bristol student timetable.",
    )
    parser.add_argument(
        "day_offset",
        nargs="?",
        default="0",
        help="Day offset from today for full timetable view. E.g., 0 for today, +1 for tomorrow.",
    )
    parser.add_argument(
        "--mini",
        action="store_true",
        help="Enable compact, single-line output for status bars like Polybar",
    )
    parser.add_argument("--config", type=Path, default=None, help="Config file (default: /etc/bstt/config.toml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to the selected mode,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if args.mini:
        raise SystemExit(_run_mini(args))
    raise SystemExit(_run_full(args))
