from __future__ import annotations

from datetime import date, datetime


def format_local_date(value: date) -> str:
    """Format a calendar date as YYYY-MM-DD from its local components.

    Never goes through a UTC conversion, so a late-evening local datetime keeps
    its own calendar day.
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def to_local_date(value: date) -> date:
    """Drop the time-of-day part of a datetime (local midnight normalization)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def clock_minutes(value: str) -> int:
    """Minutes since midnight for an ``HH:MM`` string.

    A missing minute part counts as zero. The string is not validated beyond
    integer conversion.
    """
    parts = value.split(":")
    hours = int(parts[0])
    minutes = int(parts[1]) if len(parts) > 1 and parts[1] else 0
    return hours * 60 + minutes


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
