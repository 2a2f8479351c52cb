"""Export the leave-balance or monthly attendance report to CSV/XLSX.

Examples:
    python scripts/export_reports.py leave-balance --year 2024
    python scripts/export_reports.py attendance --year 2024 --month 3 --format csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.hr_accrual.hr_accrual.main import create_container, load_settings
from src.hr_accrual.hr_accrual.reports.export import attendance_frame, leave_balance_frame, write_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")


def main() -> None:
    parser = argparse.ArgumentParser(description="Export HR accrual reports")
    parser.add_argument("report", choices=["leave-balance", "attendance"])
    parser.add_argument("--year", type=int, default=date.today().year)
    parser.add_argument("--month", type=int, default=date.today().month, help="attendance report only")
    parser.add_argument("--format", choices=["xlsx", "csv"], default="xlsx")
    parser.add_argument("--out-dir", type=Path, default=None)
    args = parser.parse_args()

    settings = load_settings()
    out_dir = args.out_dir or Path(getattr(settings, "REPORT_EXPORT_DIR", "exports"))
    container = create_container(settings.__name__)

    if args.report == "leave-balance":
        report = container.leave_service.balance_report(args.year)
        df = leave_balance_frame(report)
        out = write_report(df, out_dir / f"leave_balance_{args.year}.{args.format}", sheet_name="LeaveBalance")
    else:
        summary = container.attendance_report_service.build_monthly(month=args.month, year=args.year)
        df = attendance_frame(summary)
        out = write_report(
            df,
            out_dir / f"attendance_{args.year}_{args.month:02d}.{args.format}",
            sheet_name="Attendance",
        )

    print(f"OK: {len(df)} rows -> {out}")


if __name__ == "__main__":
    main()
