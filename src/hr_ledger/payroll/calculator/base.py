from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...attendance.model import AttendanceSummary
from ...employees.model import Employee
from ..model import PayrollBreakdown, SalaryRecord


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(
        self,
        employee: Employee,
        attendance: AttendanceSummary,
        salary: Optional[SalaryRecord],
    ) -> PayrollBreakdown:
        raise NotImplementedError
