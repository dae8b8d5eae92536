from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..attendance.aggregator import summarize_attendance
from ..attendance.model import AttendanceSummary
from ..attendance.repository import AttendanceRepository
from ..common.validators import require_month, require_non_empty, require_year, to_number
from ..core.exceptions import ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import FIELD_ALIASES, PayrollBreakdown, SalaryRecord
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollRow:
    employee: Employee
    attendance: AttendanceSummary
    salary: Optional[SalaryRecord]
    breakdown: PayrollBreakdown

    def to_json(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee.id,
            "name": self.employee.name,
            "designation": self.employee.designation,
            "basicSalary": self.employee.basic_salary,
            "attendance": self.attendance.to_json(),
            "salary": self.salary.to_json() if self.salary else None,
            **self.breakdown.to_json(),
        }


class PayrollService:
    def __init__(
        self,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._salaries = salaries
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()

    def _resolve_id(self, employee_id: str) -> str:
        # Records are keyed by the registry spelling of the id when there is one.
        emp = self._employees.get_by_id(employee_id) if employee_id else None
        return emp.id if emp else employee_id

    def get_salary(self, employee_id: str, month: str, year: int) -> Optional[SalaryRecord]:
        return self._salaries.get(self._resolve_id(employee_id), month, int(year))

    def update_field(self, employee_id: str, month: str, year: int, field: str, value: Any) -> SalaryRecord:
        """Write one adjustment field, creating the month's record on first write."""
        employee_id = require_non_empty(employee_id, "Employee ID")
        employee_id = self._resolve_id(employee_id)
        month = require_month(month)
        year = require_year(year)

        attr = FIELD_ALIASES.get(field)
        if attr is None:
            raise ValidationError(f"Unknown salary field: {field!r}")
        amount = to_number(value)

        record = self._salaries.upsert(
            (employee_id, month, year),
            lambda rec: dataclasses.replace(rec, **{attr: amount}),
        )
        logger.debug("salary %s/%s/%s %s=%s", employee_id, month, year, attr, amount)
        return record

    def breakdown(self, employee: Employee, month: str, year: int) -> PayrollRow:
        attendance = summarize_attendance(employee.id, month, int(year), self._attendance.list_all())
        salary = self._salaries.get(employee.id, month, int(year))
        return PayrollRow(
            employee=employee,
            attendance=attendance,
            salary=salary,
            breakdown=self._calculator.calculate(employee, attendance, salary),
        )

    def month_sheet(self, month: str, year: int) -> list[PayrollRow]:
        month = require_month(month)
        year = require_year(year)
        return [self.breakdown(e, month, year) for e in self._employees.list_all()]
