from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float
    location_name: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for a work date."""

    record_id: str
    employee_id: str
    work_date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    status: AttendanceStatus
    total_hours: Optional[float] = None
    work_mode: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.clock_in is not None and self.clock_out is None


@dataclass(frozen=True)
class AttendanceBreak:
    """Pause/resume interval inside an attendance record.

    ``resume_time`` is None while the break is active.
    """

    break_id: str
    attendance_record_id: str
    pause_time: datetime
    resume_time: Optional[datetime] = None
    pause_location: Optional[Location] = None
    resume_location: Optional[Location] = None

    @property
    def is_active(self) -> bool:
        return self.resume_time is None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports (record joined with its employee)."""

    employee_id: str
    employee_code: str
    employee_name: str
    department: Optional[str]
    working_hours_start: Optional[str]
    working_hours_end: Optional[str]
    work_date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    total_hours: Optional[float]
    status: AttendanceStatus
