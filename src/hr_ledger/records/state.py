from __future__ import annotations

from dataclasses import dataclass, field

from ..attendance.model import AttendanceRecord
from ..company.model import DEFAULT_PROFILE, CompanyProfile
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..ledger.model import Transaction
from ..payroll.model import SalaryRecord


@dataclass
class AppState:
    """Every collection the application owns, in one place.

    Only the record store mutates this object; everything else receives
    snapshots through the store's getters.
    """

    company: CompanyProfile = DEFAULT_PROFILE
    employees: list[Employee] = field(default_factory=list)
    attendance: list[AttendanceRecord] = field(default_factory=list)
    salaries: list[SalaryRecord] = field(default_factory=list)
    holidays: list[Holiday] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
