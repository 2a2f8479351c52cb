from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest, LeaveType


class LeaveRepository(Protocol):
    # Reference data
    def list_leave_types(self) -> Sequence[LeaveType]:
        """Full catalog, ordered by name."""

        raise NotImplementedError

    # Leave requests
    def list_approved_requests(
        self,
        *,
        start_from: date,
        start_to: date,
        employee_ids: Optional[Iterable[str]] = None,
    ) -> Sequence[LeaveRequest]:
        """Approved requests whose start date lies in ``start_from..start_to``.

        ``employee_ids=None`` means every employee.
        """

        raise NotImplementedError

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
        raise NotImplementedError

    def get_leave(self, *, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def decide_leave(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        reviewed_by: Optional[str],
    ) -> bool:
        """Move a pending request to ``status``; False when it was no longer pending."""

        raise NotImplementedError
