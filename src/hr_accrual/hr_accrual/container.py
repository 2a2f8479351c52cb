from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_LATE_GRACE_MINUTES
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leave.mysql_leave_repository import MySQLLeaveRepository
from .leave.service import LeaveService
from .reports.attendance_report import AttendanceReportService
from .session.state import SessionState


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    session: SessionState

    employees_repo: MySQLEmployeeRepository
    leaves_repo: MySQLLeaveRepository
    attendance_repo: MySQLAttendanceRepository

    leave_service: LeaveService
    attendance_service: AttendanceService
    attendance_report_service: AttendanceReportService


def build_container(
    *,
    db_config: dict,
    session: Optional[SessionState] = None,
    strict_date_order: bool = True,
    late_grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    session = session or SessionState()

    employees_repo = MySQLEmployeeRepository(conn)
    leaves_repo = MySQLLeaveRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    leave_service = LeaveService(
        leaves_repo,
        employees_repo,
        session=session,
        strict_date_order=strict_date_order,
    )
    attendance_service = AttendanceService(attendance_repo, employees_repo)
    attendance_report_service = AttendanceReportService(attendance_repo, late_grace_minutes=late_grace_minutes)

    return Container(
        conn=conn,
        session=session,
        employees_repo=employees_repo,
        leaves_repo=leaves_repo,
        attendance_repo=attendance_repo,
        leave_service=leave_service,
        attendance_service=attendance_service,
        attendance_report_service=attendance_report_service,
    )
