from __future__ import annotations

import io

import pandas as pd
import pytest

from src.hr_accrual.hr_accrual.core.exceptions import ValidationError
from src.hr_accrual.hr_accrual.leave.model import EmployeeBalances, LeaveBalance, LeaveBalanceReport
from src.hr_accrual.hr_accrual.reports.attendance_report import AttendanceReportRecord, AttendanceReportSummary
from src.hr_accrual.hr_accrual.reports.export import (
    attendance_frame,
    leave_balance_frame,
    to_excel_bytes,
    write_report,
)


def _report():
    balances = [
        LeaveBalance(leave_type_id="lt-a", leave_type="Annual", is_paid=True, year=2024, total=12, used=5),
        LeaveBalance(leave_type_id="lt-s", leave_type="Sick", is_paid=True, year=2024, total=6, used=0),
    ]
    return LeaveBalanceReport(
        year=2024,
        leave_types=["Annual", "Sick"],
        records=[
            EmployeeBalances(
                employee_id="e1",
                employee_code="EMP-001",
                employee_name="Ada Lovelace",
                department="R&D",
                balances=balances,
            )
        ],
    )


def test_leave_balance_frame_is_wide():
    df = leave_balance_frame(_report())

    assert list(df.columns) == [
        "Employee Code",
        "Employee",
        "Department",
        "Annual Total",
        "Annual Used",
        "Annual Remaining",
        "Sick Total",
        "Sick Used",
        "Sick Remaining",
    ]
    assert df.loc[0, "Annual Remaining"] == 7
    assert df.loc[0, "Sick Remaining"] == 6


def test_attendance_frame():
    summary = AttendanceReportSummary(
        month_name="March 2024",
        records=[
            AttendanceReportRecord(
                employee_id="e1",
                employee_code="EMP-001",
                employee_name="Ada Lovelace",
                department="R&D",
                total_days=20,
                total_hours=161.234,
                late_arrivals=2,
                total_late_minutes=35,
                total_overtime_hours=1.456,
                working_hours_start="09:00",
                working_hours_end="18:00",
            )
        ],
        total_employees=1,
        total_late_arrivals=2,
        total_overtime_hours=1.46,
        avg_late_minutes=18,
    )
    df = attendance_frame(summary)

    assert df.loc[0, "Hours"] == 161.23
    assert df.loc[0, "Overtime Hours"] == 1.46
    assert df.loc[0, "Late Arrivals"] == 2


def test_write_csv(tmp_path):
    out = write_report(leave_balance_frame(_report()), tmp_path / "nested" / "balances.csv")

    assert out.exists()
    back = pd.read_csv(out)
    assert back.loc[0, "Employee Code"] == "EMP-001"
    assert back.loc[0, "Annual Used"] == 5


def test_excel_bytes_round_trip():
    data = to_excel_bytes(leave_balance_frame(_report()), sheet_name="LeaveBalance")
    back = pd.read_excel(io.BytesIO(data), sheet_name="LeaveBalance")
    assert back.loc[0, "Employee"] == "Ada Lovelace"


def test_unknown_format(tmp_path):
    with pytest.raises(ValidationError):
        write_report(leave_balance_frame(_report()), tmp_path / "balances.pdf")
