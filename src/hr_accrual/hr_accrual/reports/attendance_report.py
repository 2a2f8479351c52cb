from __future__ import annotations

import calendar
import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..attendance.shift import ShiftSchedule, clock_on
from ..core.constants import DEFAULT_LATE_GRACE_MINUTES, HOURS_DECIMALS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceReportRecord:
    employee_id: str
    employee_code: str
    employee_name: str
    department: str
    total_days: int
    total_hours: float
    late_arrivals: int
    total_late_minutes: int
    total_overtime_hours: float
    working_hours_start: Optional[str]
    working_hours_end: Optional[str]


@dataclass(frozen=True)
class AttendanceReportSummary:
    month_name: str
    records: list[AttendanceReportRecord]
    total_employees: int
    total_late_arrivals: int
    total_overtime_hours: float
    avg_late_minutes: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def month_bounds(month: int, year: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


class AttendanceReportService:
    """Monthly lateness/overtime summary per employee."""

    def __init__(self, attendance: AttendanceRepository, *, late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES):
        self._attendance = attendance
        self._grace = int(late_grace_minutes)

    @staticmethod
    def _late_minutes(row: AttendanceReportRow) -> int:
        if row.clock_in is None or not row.working_hours_start:
            return 0
        scheduled = clock_on(row.clock_in, row.working_hours_start)
        if row.clock_in <= scheduled:
            return 0
        return int((row.clock_in - scheduled).total_seconds() // 60)

    @staticmethod
    def _overtime_hours(row: AttendanceReportRow, schedule: Optional[ShiftSchedule]) -> float:
        if not row.total_hours or schedule is None:
            return 0.0
        return max(0.0, row.total_hours - schedule.expected_hours)

    def build_monthly(self, *, month: int, year: int) -> AttendanceReportSummary:
        start, end = month_bounds(month, year)
        rows = self._attendance.get_report_rows(start_date=start, end_date=end)

        by_employee: dict[str, dict] = {}
        for r in rows:
            s = by_employee.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "employee_code": r.employee_code,
                    "employee_name": r.employee_name,
                    "department": r.department or "-",
                    "total_days": 0,
                    "total_hours": 0.0,
                    "late_arrivals": 0,
                    "total_late_minutes": 0,
                    "total_overtime_hours": 0.0,
                    "working_hours_start": r.working_hours_start,
                    "working_hours_end": r.working_hours_end,
                }
                by_employee[r.employee_id] = s

            schedule = None
            if r.working_hours_start and r.working_hours_end:
                schedule = ShiftSchedule(r.working_hours_start, r.working_hours_end)

            s["total_days"] += 1
            s["total_hours"] += r.total_hours or 0.0

            late = self._late_minutes(r)
            if late > self._grace:
                s["late_arrivals"] += 1
                s["total_late_minutes"] += late

            s["total_overtime_hours"] += self._overtime_hours(r, schedule)

        records = [AttendanceReportRecord(**s) for s in by_employee.values()]
        records.sort(key=lambda x: (-x.late_arrivals, -x.total_overtime_hours))

        total_late = sum(x.late_arrivals for x in records)
        total_late_minutes = sum(x.total_late_minutes for x in records)
        total_overtime = sum(x.total_overtime_hours for x in records)

        logger.info("Built attendance report for %02d/%d (%d employees)", month, year, len(records))
        return AttendanceReportSummary(
            month_name=start.strftime("%B %Y"),
            records=records,
            total_employees=len(records),
            total_late_arrivals=total_late,
            total_overtime_hours=round(total_overtime, HOURS_DECIMALS),
            avg_late_minutes=_round_half_up(total_late_minutes / total_late) if total_late else 0,
        )
