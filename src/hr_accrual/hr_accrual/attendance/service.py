from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .breaks import find_active_break, total_break_hours
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardWorkedHoursCalculator
from .model import AttendanceRecord, Location
from .repository import AttendanceRepository
from .shift import ShiftSchedule

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardWorkedHoursCalculator()

    def _get_open_record(self, record_id: str) -> AttendanceRecord:
        record = self._attendance.get_record(record_id)
        if not record:
            raise NotFoundError("Attendance record not found")
        if record.clock_in is None:
            raise ValidationError("You have not clocked in for this record")
        if record.clock_out is not None:
            raise ValidationError("You have already clocked out")
        return record

    def find_open_record(self, employee_id: str, *, today: Optional[date] = None) -> Optional[AttendanceRecord]:
        """Today's record, else yesterday's record still waiting for a clock-out."""
        today = today or now_local().date()
        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record:
            return record
        return self._attendance.get_for_employee_and_date(employee_id, today - timedelta(days=1), open_only=True)

    # -------- Breaks --------
    def pause(self, record_id: str, *, location: Optional[Location] = None, now: Optional[datetime] = None) -> str:
        now = now or now_local()
        self._get_open_record(record_id)

        if find_active_break(self._attendance.list_breaks(record_id)):
            raise ValidationError("A break is already in progress")

        break_id = self._attendance.create_break(record_id=record_id, pause_time=now, location=location)
        logger.info("Break %s started on record %s", break_id, record_id)
        return break_id

    def resume(self, record_id: str, *, location: Optional[Location] = None, now: Optional[datetime] = None) -> None:
        now = now or now_local()
        active = find_active_break(self._attendance.list_breaks(record_id))
        if not active:
            raise ValidationError("No break in progress")
        if now < active.pause_time:
            raise ValidationError("Resume time cannot be before the pause time")

        if not self._attendance.resume_break(break_id=active.break_id, resume_time=now, location=location):
            raise ValidationError("Break has already been resumed")
        logger.info("Break %s ended on record %s", active.break_id, record_id)

    def break_hours(self, record_id: str) -> float:
        return total_break_hours(self._attendance.list_breaks(record_id))

    # -------- Clock-out --------
    def clock_out(self, record_id: str, *, location: Optional[Location] = None, now: Optional[datetime] = None) -> float:
        """Close the record and return its net worked hours."""
        now = now or now_local()
        record = self._get_open_record(record_id)
        if now < record.clock_in:
            raise ValidationError("Clock-out time cannot be before the clock-in time")

        active = find_active_break(self._attendance.list_breaks(record_id))
        if active:
            if now < active.pause_time:
                raise ValidationError("Clock-out time cannot be before the current break started")
            self._attendance.resume_break(break_id=active.break_id, resume_time=now)
            logger.info("Auto-resumed break %s at clock-out", active.break_id)

        total_hours = self._calculator.worked_hours(
            clock_in=record.clock_in,
            clock_out=now,
            breaks=self._attendance.list_breaks(record_id),
        )
        if not self._attendance.close_record(record_id=record_id, clock_out=now, total_hours=total_hours, location=location):
            raise ValidationError("Clock-out failed")

        logger.info("Record %s closed with %.2f worked hours", record_id, total_hours)
        return total_hours

    def expected_shift_end(self, record: AttendanceRecord) -> Optional[datetime]:
        if record.clock_in is None:
            return None
        employee = self._employees.get_by_id(record.employee_id)
        if not employee or not employee.has_schedule:
            return None
        schedule = ShiftSchedule(employee.working_hours_start, employee.working_hours_end)
        return schedule.end_for(record.clock_in)
