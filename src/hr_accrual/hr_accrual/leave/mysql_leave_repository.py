from __future__ import annotations

import uuid
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..common.datetime_utils import format_local_date
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveRequest, LeaveType
from .repository import LeaveRepository

_REQUEST_COLUMNS = """
    request_id, employee_id, leave_type_id, start_date, end_date, days_count,
    reason, status, created_at, reviewed_by, reviewed_at
"""


def _to_request(r: dict[str, Any]) -> LeaveRequest:
    return LeaveRequest(
        request_id=str(r["request_id"]),
        employee_id=str(r["employee_id"]),
        leave_type_id=str(r["leave_type_id"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        days_count=int(r["days_count"]),
        status=LeaveStatus(r["status"]),
        created_at=r["created_at"],
        reason=r.get("reason"),
        reviewed_by=r.get("reviewed_by"),
        reviewed_at=r.get("reviewed_at"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    # -------- Leave types --------
    def list_leave_types(self) -> Sequence[LeaveType]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_type_id, name, description, days_per_year, is_paid
                FROM leave_types
                ORDER BY name
                """
            )
            return [
                LeaveType(
                    leave_type_id=str(r["leave_type_id"]),
                    name=r["name"],
                    days_per_year=float(r["days_per_year"] or 0),
                    is_paid=bool(r["is_paid"]) if r.get("is_paid") is not None else True,
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]

    # -------- Leave requests --------
    def list_approved_requests(
        self,
        *,
        start_from: date,
        start_to: date,
        employee_ids: Optional[Iterable[str]] = None,
    ) -> Sequence[LeaveRequest]:
        clauses = ["status=%s", "start_date>=%s", "start_date<=%s"]
        params: list[object] = [LeaveStatus.APPROVED.value, format_local_date(start_from), format_local_date(start_to)]

        if employee_ids is not None:
            ids = list(employee_ids)
            if not ids:
                return []
            clauses.append(f"employee_id IN ({','.join(['%s'] * len(ids))})")
            params.extend(ids)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_REQUEST_COLUMNS} FROM leave_requests WHERE {where} ORDER BY start_date",
                tuple(params),
            )
            return [_to_request(r) for r in fetchall(cur)]

    def create_leave(
        self,
        *,
        employee_id: str,
        leave_type_id: str,
        start_date: date,
        end_date: date,
        days_count: int,
        reason: Optional[str],
    ) -> str:
        request_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(
                    request_id, employee_id, leave_type_id, start_date, end_date, days_count, reason, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    request_id,
                    employee_id,
                    leave_type_id,
                    format_local_date(start_date),
                    format_local_date(end_date),
                    int(days_count),
                    reason,
                    LeaveStatus.PENDING.value,
                ),
            )
        return request_id

    def get_leave(self, *, request_id: str) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_REQUEST_COLUMNS} FROM leave_requests WHERE request_id=%s",
                (request_id,),
            )
            r = fetchone(cur)
            return _to_request(r) if r else None

    def decide_leave(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        reviewed_by: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, reviewed_by=%s, reviewed_at=NOW()
                WHERE request_id=%s AND status=%s
                """,
                (status.value, reviewed_by, request_id, LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0
