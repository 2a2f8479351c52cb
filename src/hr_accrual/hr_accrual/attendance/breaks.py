from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..core.constants import SECONDS_PER_HOUR
from .model import AttendanceBreak


def break_hours(b: AttendanceBreak) -> float:
    if b.resume_time is None:
        return 0.0
    return (b.resume_time - b.pause_time).total_seconds() / SECONDS_PER_HOUR


def total_break_hours(breaks: Optional[Iterable[AttendanceBreak]]) -> float:
    """Sum of closed breaks in hours. Active breaks add nothing."""
    return sum((break_hours(b) for b in breaks or ()), 0.0)


def find_active_break(breaks: Optional[Iterable[AttendanceBreak]]) -> Optional[AttendanceBreak]:
    for b in breaks or ():
        if b.is_active:
            return b
    return None


def close_open_breaks(breaks: Optional[Sequence[AttendanceBreak]], at: datetime) -> list[AttendanceBreak]:
    """Copy of ``breaks`` with any active break resumed at ``at``."""
    return [replace(b, resume_time=at) if b.is_active else b for b in breaks or ()]
