from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceBreak, AttendanceRecord, AttendanceReportRow, Location


class AttendanceRepository(Protocol):
    def get_record(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(
        self,
        employee_id: str,
        work_date: date,
        *,
        open_only: bool = False,
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def close_record(
        self,
        *,
        record_id: str,
        clock_out: datetime,
        total_hours: float,
        location: Optional[Location] = None,
    ) -> bool:
        raise NotImplementedError

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError

    # Breaks
    def list_breaks(self, record_id: str) -> Sequence[AttendanceBreak]:
        """All breaks of a record, ordered by pause time."""

        raise NotImplementedError

    def create_break(self, *, record_id: str, pause_time: datetime, location: Optional[Location] = None) -> str:
        raise NotImplementedError

    def resume_break(self, *, break_id: str, resume_time: datetime, location: Optional[Location] = None) -> bool:
        raise NotImplementedError
