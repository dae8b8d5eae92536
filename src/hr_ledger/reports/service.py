from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.aggregator import summarize_record
from ..core.constants import FISCAL_MONTHS, MONTHS
from ..core.enums import AttendanceStatus, EmployeeStatus, Gender
from ..employees.service import EmployeeService
from ..records.store import RecordStore


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    totals: dict


def _month_sort_key(month: str) -> int:
    return MONTHS.index(month) + 1 if month in MONTHS else 0


class ReportService:
    """Read-only aggregates over the stored collections."""

    def __init__(self, store: RecordStore, employees: EmployeeService):
        self._store = store
        self._employees = employees

    def dashboard(self) -> dict:
        employees = self._store.get_employees()
        salaries = self._store.get_salaries()
        transactions = self._store.get_transactions()

        total_salary = sum(s.paid_amount for s in salaries)
        total_paid = sum(t.amount for t in transactions)
        return {
            "totalSalary": total_salary,
            "totalPF": sum(s.pf for s in salaries),
            "totalPaid": total_paid,
            "totalBalance": total_salary - total_paid,
            "maleCount": sum(1 for e in employees if e.gender == Gender.MALE),
            "femaleCount": sum(1 for e in employees if e.gender == Gender.FEMALE),
            "activeCount": sum(1 for e in employees if e.status == EmployeeStatus.ACTIVE),
            "inactiveCount": sum(1 for e in employees if e.status == EmployeeStatus.INACTIVE),
            "employeeCount": len(employees),
        }

    def balance_summary(self, status: Optional[EmployeeStatus] = None) -> ReportData:
        salaries = self._store.get_salaries()
        transactions = self._store.get_transactions()

        rows = []
        totals = {"total": 0.0, "paid": 0.0, "balance": 0.0}
        for e in self._employees.list_all(status):
            total = sum(s.paid_amount for s in salaries if s.employee_id == e.id)
            paid = sum(t.amount for t in transactions if t.employee_id == e.id)
            row = {
                "employeeId": e.id,
                "name": e.name,
                "designation": e.designation,
                "status": e.status.value,
                "total": total,
                "paid": paid,
                "balance": total - paid,
            }
            rows.append(row)
            for k in totals:
                totals[k] += row[k]
        return ReportData(rows=rows, totals=totals)

    def payment_status(self, employee_id: str, year: Optional[int] = None) -> ReportData:
        """Fiscal-month payable/paid/balance for one employee.

        A month's payable is the recorded paid amount, falling back to the
        basic salary when nothing was recorded.
        """
        emp = self._employees.get(employee_id)
        salaries = [s for s in self._store.get_salaries() if s.employee_id == emp.id]
        transactions = [t for t in self._store.get_transactions() if t.employee_id == emp.id]
        if year is not None:
            salaries = [s for s in salaries if s.year == int(year)]
            transactions = [t for t in transactions if t.year == int(year)]

        rows = []
        totals = {"total": 0.0, "paid": 0.0, "balance": 0.0}
        for month in FISCAL_MONTHS:
            rec = next((s for s in salaries if s.month == month), None)
            base = (rec.paid_amount if rec else 0.0) or emp.basic_salary or 0.0
            paid = sum(t.amount for t in transactions if t.month == month)
            row = {"month": month, "total": base, "paid": paid, "balance": base - paid}
            rows.append(row)
            for k in totals:
                totals[k] += row[k]

        totals["pf"] = sum(s.pf for s in salaries)
        return ReportData(rows=rows, totals=totals)

    def month_wise_summary(self, year: int) -> ReportData:
        year = int(year)
        active_staff = sum(1 for e in self._store.get_employees() if e.status == EmployeeStatus.ACTIVE)
        attendance = self._store.get_attendance()
        salaries = self._store.get_salaries()
        transactions = self._store.get_transactions()

        rows = []
        totals = {"present": 0, "absent": 0, "gross": 0.0, "paid": 0.0, "balance": 0.0}
        for month in FISCAL_MONTHS:
            present = absent = half_day = 0
            for rec in attendance:
                if rec.month == month and rec.year == year:
                    s = summarize_record(rec)
                    present += s.present
                    absent += s.absent
                    half_day += s.half_day

            gross = sum(s.paid_amount for s in salaries if s.month == month and s.year == year)
            paid = sum(t.amount for t in transactions if t.month == month and t.year == year)
            rows.append(
                {
                    "month": month,
                    "activeStaff": active_staff,
                    "present": present,
                    "absent": absent,
                    "halfDay": half_day,
                    "gross": gross,
                    "paid": paid,
                    "balance": gross - paid,
                }
            )
            totals["present"] += present
            totals["absent"] += absent
            totals["gross"] += gross
            totals["paid"] += paid
            totals["balance"] += gross - paid
        return ReportData(rows=rows, totals=totals)

    def employee_summary(self, employee_id: str) -> dict:
        emp = self._employees.get(employee_id)

        records = [a for a in self._store.get_attendance() if a.employee_id == emp.id]
        records.sort(key=lambda a: (a.year, _month_sort_key(a.month)), reverse=True)
        attendance_rows = []
        for a in records:
            days = list(a.days.values())
            attendance_rows.append(
                {
                    "month": a.month,
                    "year": a.year,
                    "present": days.count(AttendanceStatus.PRESENT.value),
                    "absent": days.count(AttendanceStatus.ABSENT.value),
                    # Holidays and weekly offs are shown together on the profile sheet.
                    "holidayOrOff": days.count(AttendanceStatus.HOLIDAY.value) + days.count(AttendanceStatus.OFF.value),
                    "halfDay": days.count(AttendanceStatus.HALF_DAY.value),
                }
            )

        payments = [t for t in self._store.get_transactions() if t.employee_id == emp.id]
        payments.sort(key=lambda t: t.date, reverse=True)

        return {
            "employee": emp.to_json(),
            "attendance": attendance_rows,
            "payments": [t.to_json() for t in payments],
            "totalPaid": sum(t.amount for t in payments),
        }
