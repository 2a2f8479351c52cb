"""Tabular export of reports (CSV or Excel)."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import pandas as pd

from ..core.exceptions import ValidationError
from ..leave.model import LeaveBalanceReport
from .attendance_report import AttendanceReportSummary


def leave_balance_frame(report: LeaveBalanceReport) -> pd.DataFrame:
    columns = ["Employee Code", "Employee", "Department"]
    for name in report.leave_types:
        columns += [f"{name} Total", f"{name} Used", f"{name} Remaining"]

    data = []
    for rec in report.records:
        row = {
            "Employee Code": rec.employee_code,
            "Employee": rec.employee_name,
            "Department": rec.department,
        }
        for b in rec.balances:
            row[f"{b.leave_type} Total"] = b.total
            row[f"{b.leave_type} Used"] = b.used
            row[f"{b.leave_type} Remaining"] = b.remaining
        data.append(row)

    return pd.DataFrame(data, columns=columns)


def attendance_frame(summary: AttendanceReportSummary) -> pd.DataFrame:
    data = [
        {
            "Employee Code": r.employee_code,
            "Employee": r.employee_name,
            "Department": r.department,
            "Days": r.total_days,
            "Hours": round(r.total_hours, 2),
            "Late Arrivals": r.late_arrivals,
            "Late Minutes": r.total_late_minutes,
            "Overtime Hours": round(r.total_overtime_hours, 2),
        }
        for r in summary.records
    ]
    return pd.DataFrame(
        data,
        columns=["Employee Code", "Employee", "Department", "Days", "Hours", "Late Arrivals", "Late Minutes", "Overtime Hours"],
    )


def to_excel_bytes(df: pd.DataFrame, *, sheet_name: str) -> bytes:
    # Written in memory, nothing touches the disk
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()


def write_report(df: pd.DataFrame, path: Union[str, Path], *, sheet_name: str = "Report") -> Path:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in {".csv", ".xlsx"}:
        raise ValidationError(f"Unsupported export format: {suffix or '(none)'}")

    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        path.write_bytes(to_excel_bytes(df, sheet_name=sheet_name))
    return path
