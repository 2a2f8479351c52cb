from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import clock_string, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.employee_code, e.first_name, e.last_name, e.status, e.role,
           e.working_hours_start, e.working_hours_end, d.name AS department_name
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


def _to_employee(row: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        employee_code=row["employee_code"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        department_name=row.get("department_name"),
        status=row.get("status") or "active",
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        working_hours_start=clock_string(row.get("working_hours_start")),
        working_hours_end=clock_string(row.get("working_hours_end")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_by_status(self, statuses: Iterable[str]) -> Sequence[Employee]:
        wanted = list(statuses)
        if not wanted:
            return []
        placeholders = ",".join(["%s"] * len(wanted))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT + f" WHERE e.status IN ({placeholders}) ORDER BY e.first_name",
                tuple(wanted),
            )
            return [_to_employee(r) for r in fetchall(cur)]
