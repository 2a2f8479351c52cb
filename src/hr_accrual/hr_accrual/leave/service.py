from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local, to_local_date
from ..common.validators import require_date_order
from ..core.constants import REPORTABLE_EMPLOYEE_STATUSES
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..session.state import SessionState
from .balance import build_balance_report, compute_balances
from .day_counter import count_days
from .model import LeaveBalance, LeaveBalanceReport, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

REVIEWER_ROLES = frozenset({Role.ADMIN, Role.HR, Role.MANAGER})

BALANCES_KEY = "leave-balances"
REPORT_KEY = "leave-balance-report"
TYPES_KEY = "leave-types"


class LeaveService:
    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        *,
        session: Optional[SessionState] = None,
        strict_date_order: bool = True,
    ):
        self._leaves = leaves
        self._employees = employees
        self._session = session if session is not None else SessionState()
        self._cache = self._session.cache
        self._strict_date_order = bool(strict_date_order)

    @staticmethod
    def _year_bounds(year: int) -> tuple[date, date]:
        return date(year, 1, 1), date(year, 12, 31)

    def _leave_types(self):
        return self._cache.get_or_load((TYPES_KEY,), self._leaves.list_leave_types)

    def _invalidate_for(self, employee_id: str) -> None:
        self._cache.invalidate((BALANCES_KEY, employee_id))
        self._cache.invalidate((REPORT_KEY,))

    # -------- Requests --------
    def submit(
        self,
        *,
        employee_id: str,
        leave_type_id: str,
        start_date: date,
        end_date: date,
        reason: str = "",
    ) -> str:
        start = to_local_date(start_date)
        end = to_local_date(end_date)
        if self._strict_date_order:
            require_date_order(start, end)

        days = count_days(start, end)
        request_id = self._leaves.create_leave(
            employee_id=employee_id,
            leave_type_id=leave_type_id,
            start_date=start,
            end_date=end,
            days_count=days,
            reason=(reason or "").strip() or None,
        )
        self._invalidate_for(employee_id)
        logger.info("Leave request %s submitted by %s (%d days)", request_id, employee_id, days)
        return request_id

    def _get_pending(self, request_id: str) -> LeaveRequest:
        req = self._leaves.get_leave(request_id=request_id)
        if not req:
            raise NotFoundError("Leave request not found")
        if req.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request has already been processed")
        return req

    def _decide(self, req: LeaveRequest, status: LeaveStatus, reviewed_by: Optional[str]) -> None:
        if not req.status.can_transition_to(status):
            raise ValidationError(f"Cannot move a {req.status.value} request to {status.value}")
        if not self._leaves.decide_leave(request_id=req.request_id, status=status, reviewed_by=reviewed_by):
            raise ValidationError("Leave request has already been processed")
        self._invalidate_for(req.employee_id)
        logger.info("Leave request %s -> %s", req.request_id, status.value)

    def _reviewer_role(self, user_id: str) -> Optional[Role]:
        employee = self._employees.get_by_id(self._session.employee_id or user_id)
        return employee.role if employee else None

    def _require_reviewer(self) -> str:
        if not self._session.is_authenticated:
            raise AuthorizationError("Sign in to review leave requests")
        self._session.require_role(*REVIEWER_ROLES, loader=self._reviewer_role)
        return self._session.employee_id or self._session.user_id

    def approve(self, *, request_id: str) -> None:
        reviewer_id = self._require_reviewer()
        req = self._get_pending(request_id)
        self._decide(req, LeaveStatus.APPROVED, reviewer_id)

    def reject(self, *, request_id: str) -> None:
        reviewer_id = self._require_reviewer()
        req = self._get_pending(request_id)
        self._decide(req, LeaveStatus.REJECTED, reviewer_id)

    def cancel(self, *, employee_id: str, request_id: str) -> None:
        req = self._get_pending(request_id)
        if req.employee_id != employee_id:
            raise AuthorizationError("Only the requesting employee can cancel a leave request")
        self._decide(req, LeaveStatus.CANCELLED, None)

    # -------- Balances --------
    def get_balances(self, employee_id: str, *, year: Optional[int] = None) -> list[LeaveBalance]:
        year = year or now_local().year

        def load() -> list[LeaveBalance]:
            start, end = self._year_bounds(year)
            approved = self._leaves.list_approved_requests(
                start_from=start,
                start_to=end,
                employee_ids=[employee_id],
            )
            return compute_balances(self._leave_types(), approved, year, employee_id=employee_id)

        return self._cache.get_or_load((BALANCES_KEY, employee_id, year), load)

    def balance_report(self, year: int) -> LeaveBalanceReport:
        def load() -> LeaveBalanceReport:
            employees = self._employees.list_by_status(REPORTABLE_EMPLOYEE_STATUSES)
            start, end = self._year_bounds(year)
            approved = self._leaves.list_approved_requests(
                start_from=start,
                start_to=end,
                employee_ids=[e.employee_id for e in employees],
            )
            report = build_balance_report(employees, self._leave_types(), approved, year)
            logger.info("Built leave balance report for %d (%d employees)", year, len(report.records))
            return report

        return self._cache.get_or_load((REPORT_KEY, year), load)
