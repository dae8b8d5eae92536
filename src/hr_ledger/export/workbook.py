from __future__ import annotations

import io
from datetime import date
from typing import Optional

import pandas as pd

from ..records.state import AppState

EMPLOYEE_SHEET = "FORCE_REGISTRY"
ATTENDANCE_SHEET = "ATTENDANCE_LOG"
SALARY_SHEET = "PAYROLL_LEDGER"
TRANSACTION_SHEET = "FINANCIAL_TRANSACTIONS"

ATTENDANCE_COLUMNS = ["EmployeeID", "Month", "Year", "Day", "Status"]

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"Force_Management_Data_{today.isoformat()}.xlsx"


def flatten_attendance(state: AppState) -> list[dict]:
    rows = []
    for rec in state.attendance:
        for day, status in sorted(rec.days.items()):
            rows.append(
                {
                    "EmployeeID": rec.employee_id,
                    "Month": rec.month,
                    "Year": rec.year,
                    "Day": day,
                    "Status": status,
                }
            )
    return rows


def build_frames(state: AppState) -> dict[str, pd.DataFrame]:
    return {
        EMPLOYEE_SHEET: pd.DataFrame([e.to_json(include_photo=False) for e in state.employees]),
        ATTENDANCE_SHEET: pd.DataFrame(flatten_attendance(state), columns=ATTENDANCE_COLUMNS),
        SALARY_SHEET: pd.DataFrame([s.to_json() for s in state.salaries]),
        TRANSACTION_SHEET: pd.DataFrame([t.to_json() for t in state.transactions]),
    }


def export_workbook(state: AppState) -> bytes:
    """Write every collection to one .xlsx workbook in memory."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for sheet_name, df in build_frames(state).items():
            df.to_excel(writer, index=False, sheet_name=sheet_name)
    return output.getvalue()
