from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from ..common.validators import to_number
from ..core.constants import DEFAULT_ALLOWED_LEAVE, DEFAULT_HOLIDAY_COUNT

_JSON_KEYS = {
    "da": "da",
    "ta": "ta",
    "hra": "hra",
    "ma": "ma",
    "bonus": "bonus",
    "other_allowance": "otherAllowance",
    "pf": "pf",
    "uniform_charge": "uniformCharge",
    "late_coming_charge": "lateComingCharge",
    "other_charge": "otherCharge",
    "advance_paid": "advancePaid",
    "previous_balance": "previousBalance",
    "paid_amount": "paidAmount",
    "allowed_leave": "allowedLeave",
    "holiday": "holiday",
    "days_late": "daysLate",
}

# Accept both spellings from forms and API payloads.
FIELD_ALIASES = {**{k: k for k in _JSON_KEYS}, **{v: k for k, v in _JSON_KEYS.items()}}


@dataclass(frozen=True)
class SalaryRecord:
    """Manual salary adjustments for one employee-month."""

    employee_id: str
    month: str
    year: int
    da: float = 0.0
    ta: float = 0.0
    hra: float = 0.0
    ma: float = 0.0
    bonus: float = 0.0
    other_allowance: float = 0.0
    pf: float = 0.0
    uniform_charge: float = 0.0
    late_coming_charge: float = 0.0
    other_charge: float = 0.0
    advance_paid: float = 0.0
    previous_balance: float = 0.0
    paid_amount: float = 0.0
    allowed_leave: float = 0.0
    holiday: float = 0.0
    days_late: float = 0.0

    @classmethod
    def new_default(cls, employee_id: str, month: str, year: int) -> "SalaryRecord":
        """Record created on the first field write for a month."""
        return cls(
            employee_id=employee_id,
            month=month,
            year=year,
            allowed_leave=DEFAULT_ALLOWED_LEAVE,
            holiday=DEFAULT_HOLIDAY_COUNT,
        )

    @property
    def key(self) -> tuple[str, str, int]:
        return (self.employee_id, self.month, self.year)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "SalaryRecord":
        amounts = {attr: to_number(data.get(key)) for attr, key in _JSON_KEYS.items()}
        return cls(
            employee_id=str(data.get("employeeId", "")),
            month=str(data.get("month", "")),
            year=int(data.get("year") or 0),
            **amounts,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {"employeeId": self.employee_id, "month": self.month, "year": self.year}
        for attr, key in _JSON_KEYS.items():
            out[key] = getattr(self, attr)
        return out


AMOUNT_FIELDS = tuple(f.name for f in fields(SalaryRecord) if f.name not in ("employee_id", "month", "year"))


@dataclass(frozen=True)
class PayrollBreakdown:
    per_day_rate: float
    deductible_days: float
    leave_charge: float
    gross_earnings: float
    total_deductions: float
    advance_paid: float
    net_payable: float

    def to_json(self) -> dict[str, Any]:
        return {
            "perDayRate": self.per_day_rate,
            "deductibleDays": self.deductible_days,
            "leaveCharge": self.leave_charge,
            "grossEarnings": self.gross_earnings,
            "totalDeductions": self.total_deductions,
            "advancePaid": self.advance_paid,
            "netPayable": self.net_payable,
        }
