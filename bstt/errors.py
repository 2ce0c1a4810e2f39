"""
Error types.

Full mode turns any TimetableError into "Error: ..." on stderr and exit code 1.
Mini mode downgrades it to the fixed "TTB: ERR" line.
"""

from __future__ import annotations


class TimetableError(Exception):
    """Base class for every failure the CLI reports to the user."""


class ConfigError(TimetableError):
    """Config file missing, unreadable, or still holding the template value."""


class FetchError(TimetableError):
    """Network failure or an upstream response we cannot decode."""
