from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import clock_string, db_cursor, fetchall, fetchone
from .model import AttendanceBreak, AttendanceRecord, AttendanceReportRow, Location
from .repository import AttendanceRepository

_RECORD_COLUMNS = "record_id, employee_id, work_date, clock_in, clock_out, total_hours, status, work_mode, notes"


def _to_record(r: dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(r["record_id"]),
        employee_id=str(r["employee_id"]),
        work_date=r["work_date"],
        clock_in=r.get("clock_in"),
        clock_out=r.get("clock_out"),
        status=AttendanceStatus(r["status"]),
        total_hours=float(r["total_hours"]) if r.get("total_hours") is not None else None,
        work_mode=r.get("work_mode"),
        notes=r.get("notes"),
    )


def _location(r: dict[str, Any], prefix: str) -> Optional[Location]:
    lat = r.get(f"{prefix}_latitude")
    lng = r.get(f"{prefix}_longitude")
    if lat is None or lng is None:
        return None
    return Location(latitude=float(lat), longitude=float(lng), location_name=r.get(f"{prefix}_location_name"))


def _location_params(location: Optional[Location]) -> tuple:
    if location is None:
        return (None, None, None)
    return (location.latitude, location.longitude, location.location_name)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_record(self, record_id: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_RECORD_COLUMNS} FROM attendance_records WHERE record_id=%s", (record_id,))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def get_for_employee_and_date(
        self,
        employee_id: str,
        work_date: date,
        *,
        open_only: bool = False,
    ) -> Optional[AttendanceRecord]:
        sql = f"SELECT {_RECORD_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s"
        if open_only:
            sql += " AND clock_out IS NULL"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, (employee_id, work_date))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def close_record(
        self,
        *,
        record_id: str,
        clock_out: datetime,
        total_hours: float,
        location: Optional[Location] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET clock_out=%s, total_hours=%s,
                    clock_out_latitude=%s, clock_out_longitude=%s, clock_out_location_name=%s
                WHERE record_id=%s AND clock_out IS NULL
                """,
                (clock_out, total_hours, *_location_params(location), record_id),
            )
            return cur.rowcount > 0

    def get_report_rows(self, *, start_date: date, end_date: date) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.employee_id, e.employee_code, e.first_name, e.last_name,
                       d.name AS department_name, e.working_hours_start, e.working_hours_end,
                       a.work_date, a.clock_in, a.clock_out, a.total_hours, a.status
                FROM attendance_records a
                JOIN employees e ON e.employee_id = a.employee_id
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE a.work_date >= %s AND a.work_date <= %s
                ORDER BY a.work_date DESC
                """,
                (start_date, end_date),
            )
            return [
                AttendanceReportRow(
                    employee_id=str(r["employee_id"]),
                    employee_code=r["employee_code"],
                    employee_name=f"{r['first_name']} {r['last_name']}".strip(),
                    department=r.get("department_name"),
                    working_hours_start=clock_string(r.get("working_hours_start")),
                    working_hours_end=clock_string(r.get("working_hours_end")),
                    work_date=r["work_date"],
                    clock_in=r.get("clock_in"),
                    clock_out=r.get("clock_out"),
                    total_hours=float(r["total_hours"]) if r.get("total_hours") is not None else None,
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]

    # -------- Breaks --------
    def list_breaks(self, record_id: str) -> Sequence[AttendanceBreak]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT break_id, attendance_record_id, pause_time, resume_time,
                       pause_latitude, pause_longitude, pause_location_name,
                       resume_latitude, resume_longitude, resume_location_name
                FROM attendance_breaks
                WHERE attendance_record_id=%s
                ORDER BY pause_time
                """,
                (record_id,),
            )
            return [
                AttendanceBreak(
                    break_id=str(r["break_id"]),
                    attendance_record_id=str(r["attendance_record_id"]),
                    pause_time=r["pause_time"],
                    resume_time=r.get("resume_time"),
                    pause_location=_location(r, "pause"),
                    resume_location=_location(r, "resume"),
                )
                for r in fetchall(cur)
            ]

    def create_break(self, *, record_id: str, pause_time: datetime, location: Optional[Location] = None) -> str:
        break_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_breaks(
                    break_id, attendance_record_id, pause_time,
                    pause_latitude, pause_longitude, pause_location_name
                )
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (break_id, record_id, pause_time, *_location_params(location)),
            )
        return break_id

    def resume_break(self, *, break_id: str, resume_time: datetime, location: Optional[Location] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_breaks
                SET resume_time=%s, resume_latitude=%s, resume_longitude=%s, resume_location_name=%s
                WHERE break_id=%s AND resume_time IS NULL
                """,
                (resume_time, *_location_params(location), break_id),
            )
            return cur.rowcount > 0
