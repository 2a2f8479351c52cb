from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime

import pytest

from src.hr_accrual.hr_accrual.core.enums import LeaveStatus, Role
from src.hr_accrual.hr_accrual.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from src.hr_accrual.hr_accrual.employees.model import Employee
from src.hr_accrual.hr_accrual.leave.model import LeaveRequest, LeaveType
from src.hr_accrual.hr_accrual.leave.service import LeaveService
from src.hr_accrual.hr_accrual.session.state import SessionState


class FakeLeaveRepo:
    def __init__(self, leave_types):
        self._types = list(leave_types)
        self._requests: dict[str, LeaveRequest] = {}
        self._next_id = 1
        self.type_calls = 0
        self.approved_calls = []

    def list_leave_types(self):
        self.type_calls += 1
        return sorted(self._types, key=lambda t: t.name)

    def list_approved_requests(self, *, start_from, start_to, employee_ids=None):
        self.approved_calls.append({"start_from": start_from, "start_to": start_to, "employee_ids": employee_ids})
        wanted = set(employee_ids) if employee_ids is not None else None
        return [
            r
            for r in self._requests.values()
            if r.status == LeaveStatus.APPROVED
            and start_from <= r.start_date <= start_to
            and (wanted is None or r.employee_id in wanted)
        ]

    def create_leave(self, *, employee_id, leave_type_id, start_date, end_date, days_count, reason):
        rid = f"req-{self._next_id}"
        self._next_id += 1
        self._requests[rid] = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            leave_type_id=leave_type_id,
            start_date=start_date,
            end_date=end_date,
            days_count=days_count,
            status=LeaveStatus.PENDING,
            created_at=datetime(2024, 1, 2, 9, 0),
            reason=reason,
        )
        return rid

    def get_leave(self, *, request_id):
        return self._requests.get(request_id)

    def decide_leave(self, *, request_id, status, reviewed_by):
        req = self._requests.get(request_id)
        if not req or req.status != LeaveStatus.PENDING:
            return False
        self._requests[request_id] = replace(
            req, status=status, reviewed_by=reviewed_by, reviewed_at=datetime(2024, 1, 3, 9, 0)
        )
        return True


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = list(employees)
        self.lookups = []

    def get_by_id(self, employee_id):
        self.lookups.append(employee_id)
        return next((e for e in self._employees if e.employee_id == employee_id), None)

    def list_by_status(self, statuses):
        return [e for e in self._employees if e.status in set(statuses)]


ANNUAL = LeaveType(leave_type_id="lt-annual", name="Annual", days_per_year=12)
SICK = LeaveType(leave_type_id="lt-sick", name="Sick", days_per_year=6)

EMPLOYEES = [
    Employee(employee_id="e1", employee_code="EMP-001", first_name="Ada", last_name="Lovelace"),
    Employee(employee_id="e2", employee_code="EMP-002", first_name="Alan", last_name="Turing", status="onboarding"),
    Employee(employee_id="e3", employee_code="EMP-003", first_name="Grace", last_name="Hopper", status="terminated"),
    Employee(employee_id="m1", employee_code="MGR-001", first_name="Margaret", last_name="Hamilton", role=Role.MANAGER),
    Employee(employee_id="h1", employee_code="HR-001", first_name="Hedy", last_name="Lamarr", role=Role.HR),
    Employee(employee_id="a1", employee_code="ADM-001", first_name="Barbara", last_name="Liskov", role=Role.ADMIN),
]


def _service(*, reviewer="m1", **kwargs):
    repo = FakeLeaveRepo([ANNUAL, SICK])
    session = kwargs.pop("session", None) or SessionState()
    if reviewer:
        session.sign_in(user_id=f"user-{reviewer}", employee_id=reviewer)
    svc = LeaveService(repo, FakeEmployeeRepo(EMPLOYEES), session=session, **kwargs)
    return svc, repo


def test_submit_counts_days_and_starts_pending():
    svc, repo = _service()
    rid = svc.submit(
        employee_id="e1",
        leave_type_id="lt-annual",
        start_date=datetime(2024, 3, 4, 18, 30),
        end_date=date(2024, 3, 8),
        reason="  Family trip ",
    )

    req = repo.get_leave(request_id=rid)
    assert req.status == LeaveStatus.PENDING
    assert req.days_count == 5
    assert req.start_date == date(2024, 3, 4)
    assert req.reason == "Family trip"


def test_blank_reason_is_stored_as_none():
    svc, repo = _service()
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))
    assert repo.get_leave(request_id=rid).reason is None


def test_swapped_dates_rejected_when_strict():
    svc, _ = _service()
    with pytest.raises(ValidationError):
        svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 8), end_date=date(2024, 3, 4))


def test_swapped_dates_accepted_when_not_strict():
    svc, repo = _service(strict_date_order=False)
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 8), end_date=date(2024, 3, 4))
    assert repo.get_leave(request_id=rid).days_count == 5


def test_approve_counts_against_balance():
    svc, _ = _service()
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 6))

    before = svc.get_balances("e1", year=2024)
    assert before[0].used == 0

    svc.approve(request_id=rid)

    after = svc.get_balances("e1", year=2024)
    assert [(b.leave_type, b.used, b.remaining) for b in after] == [("Annual", 3, 9), ("Sick", 0, 6)]


def test_employee_cannot_review():
    svc, _ = _service(reviewer="e2")
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))
    with pytest.raises(AuthorizationError):
        svc.approve(request_id=rid)


def test_request_is_decided_only_once():
    svc, repo = _service()
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))
    svc.reject(request_id=rid)

    assert repo.get_leave(request_id=rid).status == LeaveStatus.REJECTED
    with pytest.raises(ValidationError):
        svc.approve(request_id=rid)
    with pytest.raises(ValidationError):
        svc.cancel(employee_id="e1", request_id=rid)


def test_cancel_only_by_owner():
    svc, repo = _service()
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))

    with pytest.raises(AuthorizationError):
        svc.cancel(employee_id="e2", request_id=rid)

    svc.cancel(employee_id="e1", request_id=rid)
    assert repo.get_leave(request_id=rid).status == LeaveStatus.CANCELLED


def test_unknown_request():
    svc, _ = _service()
    with pytest.raises(NotFoundError):
        svc.approve(request_id="nope")


def test_balances_are_cached_per_employee_and_year():
    svc, repo = _service()

    svc.get_balances("e1", year=2024)
    svc.get_balances("e1", year=2024)
    assert len(repo.approved_calls) == 1
    assert repo.approved_calls[0]["start_from"] == date(2024, 1, 1)
    assert repo.approved_calls[0]["start_to"] == date(2024, 12, 31)
    assert repo.approved_calls[0]["employee_ids"] == ["e1"]

    svc.get_balances("e1", year=2023)
    assert len(repo.approved_calls) == 2
    assert repo.type_calls == 1


def test_balance_report_covers_active_and_onboarding_employees():
    svc, _ = _service()
    r1 = svc.submit(employee_id="e2", leave_type_id="lt-sick", start_date=date(2024, 5, 1), end_date=date(2024, 5, 2))
    svc.approve(request_id=r1)

    report = svc.balance_report(2024)

    assert [r.employee_id for r in report.records] == ["e1", "e2", "m1", "h1", "a1"]
    alan = report.records[1]
    assert [(b.leave_type, b.used) for b in alan.balances] == [("Annual", 0), ("Sick", 2)]


def test_decision_invalidates_cached_report():
    svc, _ = _service()
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 5, 1), end_date=date(2024, 5, 1))
    assert svc.balance_report(2024).records[0].balances[0].used == 0

    svc.approve(request_id=rid)

    assert svc.balance_report(2024).records[0].balances[0].used == 1


def test_reviewer_role_is_fetched_once_per_sign_in():
    employees = FakeEmployeeRepo(EMPLOYEES)
    session = SessionState()
    session.sign_in(user_id="user-h1", employee_id="h1")
    svc = LeaveService(FakeLeaveRepo([ANNUAL, SICK]), employees, session=session)

    r1 = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 6, 3), end_date=date(2024, 6, 3))
    r2 = svc.submit(employee_id="e1", leave_type_id="lt-sick", start_date=date(2024, 6, 4), end_date=date(2024, 6, 4))
    svc.approve(request_id=r1)
    svc.reject(request_id=r2)

    assert employees.lookups == ["h1"]
    assert session.cache.get(("user-role", "user-h1")) == Role.HR

    session.sign_in(user_id="user-h1", employee_id="h1")
    assert ("user-role", "user-h1") not in session.cache

    r3 = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 6, 5), end_date=date(2024, 6, 5))
    svc.approve(request_id=r3)
    assert employees.lookups == ["h1", "h1"]


def test_review_requires_sign_in():
    svc, _ = _service(reviewer=None)
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))
    with pytest.raises(AuthorizationError):
        svc.approve(request_id=rid)


def test_reviewer_is_recorded_on_the_decision():
    svc, repo = _service(reviewer="a1")
    rid = svc.submit(employee_id="e1", leave_type_id="lt-annual", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4))
    svc.approve(request_id=rid)
    assert repo.get_leave(request_id=rid).reviewed_by == "a1"
