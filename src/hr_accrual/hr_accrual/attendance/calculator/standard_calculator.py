from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ...core.constants import HOURS_DECIMALS, SECONDS_PER_HOUR
from ..breaks import close_open_breaks, total_break_hours
from ..model import AttendanceBreak
from .base import WorkedHoursCalculator


class StandardWorkedHoursCalculator(WorkedHoursCalculator):
    """Standard rule: (out - in) - breaks, not below 0, rounded to 2 decimals.

    A break still open at clock-out counts until the clock-out instant.
    """

    def worked_hours(self, *, clock_in: datetime, clock_out: datetime, breaks: Sequence[AttendanceBreak]) -> float:
        gross = (clock_out - clock_in).total_seconds() / SECONDS_PER_HOUR
        paused = total_break_hours(close_open_breaks(breaks, clock_out))
        return round(max(0.0, gross - paused), HOURS_DECIMALS)
