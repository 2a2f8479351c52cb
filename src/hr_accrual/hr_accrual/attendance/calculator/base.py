from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from ..model import AttendanceBreak


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked hours at clock-out)."""

    @abstractmethod
    def worked_hours(self, *, clock_in: datetime, clock_out: datetime, breaks: Sequence[AttendanceBreak]) -> float:
        raise NotImplementedError
