"""Shift arithmetic on ``HH:MM`` clock times, including shifts crossing midnight.

A shift whose end clock time is not after its start (``end <= start``) ends on
the following day, so ``09:00-09:00`` is a 24 hour shift.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..common.datetime_utils import clock_minutes
from ..core.constants import MINUTES_PER_DAY


def is_cross_midnight(work_start: str, work_end: str) -> bool:
    return clock_minutes(work_end) <= clock_minutes(work_start)


def expected_hours(work_start: str, work_end: str) -> float:
    """Scheduled length of the shift in hours, e.g. 14:00-01:00 -> 11.0."""
    start = clock_minutes(work_start)
    end = clock_minutes(work_end)
    if end > start:
        return (end - start) / 60
    return (MINUTES_PER_DAY - start + end) / 60


def clock_on(day: datetime, clock: str) -> datetime:
    """``day`` with its time-of-day set to ``clock`` (tzinfo kept)."""
    midnight = day.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight + timedelta(minutes=clock_minutes(clock))


def shift_end_instant(clock_in: datetime, work_start: str, work_end: str) -> datetime:
    """Absolute end of the shift the employee clocked in for.

    Anchored on the clock-in date rather than the configured start, so a late
    clock-in still resolves to the same end.
    """
    end = clock_on(clock_in, work_end)
    if is_cross_midnight(work_start, work_end):
        end += timedelta(days=1)
    return end


@dataclass(frozen=True)
class ShiftSchedule:
    work_start: str
    work_end: str

    @property
    def expected_hours(self) -> float:
        return expected_hours(self.work_start, self.work_end)

    def end_for(self, clock_in: datetime) -> datetime:
        return shift_end_instant(clock_in, self.work_start, self.work_end)
