"""Leave balance aggregation.

Balances are a projection: entitlement comes from the leave type catalog,
usage is the sum of ``days_count`` over approved requests starting in the
year. Nothing here is persisted.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ..core.constants import UNASSIGNED_DEPARTMENT
from ..core.enums import LeaveStatus
from ..employees.model import Employee
from .model import EmployeeBalances, LeaveBalance, LeaveBalanceReport, LeaveRequest, LeaveType


def _counts_against(req: LeaveRequest, *, year: int, employee_id: Optional[str]) -> bool:
    if req.status != LeaveStatus.APPROVED:
        return False
    if req.start_date.year != year:
        return False
    return employee_id is None or req.employee_id == employee_id


def used_days_by_type(
    approved_requests: Optional[Iterable[LeaveRequest]],
    year: int,
    *,
    employee_id: Optional[str] = None,
) -> dict[str, float]:
    used: dict[str, float] = defaultdict(float)
    for req in approved_requests or ():
        if _counts_against(req, year=year, employee_id=employee_id):
            used[req.leave_type_id] += req.days_count
    return dict(used)


def _sorted_catalog(leave_types: Optional[Iterable[LeaveType]]) -> list[LeaveType]:
    return sorted(leave_types or (), key=lambda lt: lt.name)


def compute_balances(
    leave_types: Optional[Sequence[LeaveType]],
    approved_requests: Optional[Sequence[LeaveRequest]],
    year: int,
    *,
    employee_id: Optional[str] = None,
) -> list[LeaveBalance]:
    """One balance per leave type of the catalog, ordered by leave type name.

    Types without usage still get a row (``used == 0``). Requests whose leave
    type is not in the catalog contribute to no row. ``remaining`` can go
    negative when approved usage exceeds the entitlement.
    """
    used = used_days_by_type(approved_requests, year, employee_id=employee_id)
    return [
        LeaveBalance(
            leave_type_id=lt.leave_type_id,
            leave_type=lt.name,
            is_paid=lt.is_paid,
            year=year,
            total=lt.days_per_year,
            used=used.get(lt.leave_type_id, 0),
        )
        for lt in _sorted_catalog(leave_types)
    ]


def build_balance_report(
    employees: Optional[Sequence[Employee]],
    leave_types: Optional[Sequence[LeaveType]],
    approved_requests: Optional[Sequence[LeaveRequest]],
    year: int,
) -> LeaveBalanceReport:
    """Multi-employee mode: exactly one balance per (employee, leave type)."""
    catalog = _sorted_catalog(leave_types)
    requests = list(approved_requests or ())

    records = []
    for emp in employees or ():
        records.append(
            EmployeeBalances(
                employee_id=emp.employee_id,
                employee_code=emp.employee_code,
                employee_name=emp.full_name,
                department=emp.department_name or UNASSIGNED_DEPARTMENT,
                balances=compute_balances(catalog, requests, year, employee_id=emp.employee_id),
            )
        )

    return LeaveBalanceReport(year=year, leave_types=[lt.name for lt in catalog], records=records)
