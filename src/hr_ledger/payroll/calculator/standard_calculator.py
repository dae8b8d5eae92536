from __future__ import annotations

from typing import Optional

from ...attendance.model import AttendanceSummary
from ...common.validators import to_number
from ...core.constants import SALARY_DAY_DIVISOR
from ...employees.model import Employee
from ..model import PayrollBreakdown, SalaryRecord
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: basic salary over a fixed 30-day month.

    Allowed leave first offsets absences (a half day counts 0.5); only the
    remainder is charged at the per-day rate. Net payable is not clamped and
    may come out negative.
    """

    def __init__(self, day_divisor: int = SALARY_DAY_DIVISOR):
        self._day_divisor = day_divisor

    def calculate(
        self,
        employee: Employee,
        attendance: AttendanceSummary,
        salary: Optional[SalaryRecord],
    ) -> PayrollBreakdown:
        s = salary or SalaryRecord(employee_id=employee.id, month="", year=0)
        basic = to_number(employee.basic_salary)

        per_day = basic / self._day_divisor
        deductible_days = max(0.0, (attendance.absent + attendance.half_day * 0.5) - to_number(s.allowed_leave))
        leave_charge = deductible_days * per_day

        gross = (
            (basic - leave_charge)
            + to_number(s.da)
            + to_number(s.ta)
            + to_number(s.hra)
            + to_number(s.ma)
            + to_number(s.bonus)
            + to_number(s.other_allowance)
        )
        deductions = (
            to_number(s.pf)
            + to_number(s.uniform_charge)
            + to_number(s.late_coming_charge)
            + to_number(s.other_charge)
        )
        advance = to_number(s.advance_paid)

        return PayrollBreakdown(
            per_day_rate=per_day,
            deductible_days=deductible_days,
            leave_charge=leave_charge,
            gross_earnings=gross,
            total_deductions=deductions,
            advance_paid=advance,
            net_payable=gross - deductions - advance,
        )
