from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveType:
    """Leave category with its yearly entitlement (read-only reference data)."""

    leave_type_id: str
    name: str
    days_per_year: float
    is_paid: bool = True
    description: Optional[str] = None


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    employee_id: str
    leave_type_id: str
    start_date: date
    end_date: date
    days_count: int
    status: LeaveStatus
    created_at: datetime
    reason: Optional[str] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None


@dataclass(frozen=True)
class LeaveBalance:
    """Derived balance of one leave type for one employee and year."""

    leave_type_id: str
    leave_type: str
    is_paid: bool
    year: int
    total: float
    used: float

    @property
    def remaining(self) -> float:
        return self.total - self.used


@dataclass(frozen=True)
class EmployeeBalances:
    """Read-model row of the leave-balance report."""

    employee_id: str
    employee_code: str
    employee_name: str
    department: str
    balances: list[LeaveBalance] = field(default_factory=list)


@dataclass(frozen=True)
class LeaveBalanceReport:
    year: int
    leave_types: list[str]
    records: list[EmployeeBalances]
