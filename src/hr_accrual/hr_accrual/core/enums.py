from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for review permissions."""

    ADMIN = "admin"
    HR = "hr"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class LeaveStatus(str, Enum):
    """Leave request workflow states."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"

    def can_transition_to(self, target: "LeaveStatus") -> bool:
        return target in _LEAVE_TRANSITIONS.get(self, frozenset())


_LEAVE_TRANSITIONS = {
    LeaveStatus.PENDING: frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED, LeaveStatus.CANCELLED}),
}


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    HALF_DAY = "half_day"
