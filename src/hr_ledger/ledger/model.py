from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..common.validators import to_number
from ..core.enums import PaymentMode, TransactionType


@dataclass(frozen=True)
class Transaction:
    """A single disbursement. Never edited once recorded."""

    id: str
    employee_id: str
    date: str
    voucher_no: str
    type: TransactionType
    mode: PaymentMode
    amount: float
    month: str
    year: int
    reference_id: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Transaction":
        try:
            tx_type = TransactionType(data.get("type", TransactionType.SALARY.value))
        except ValueError:
            tx_type = TransactionType.SALARY
        try:
            mode = PaymentMode(data.get("mode", PaymentMode.CASH.value))
        except ValueError:
            mode = PaymentMode.CASH

        return cls(
            id=str(data.get("id", "")),
            employee_id=str(data.get("employeeId", "")),
            date=str(data.get("date", "")),
            voucher_no=str(data.get("voucherNo", "")),
            type=tx_type,
            mode=mode,
            amount=to_number(data.get("amount")),
            month=str(data.get("month", "")),
            year=int(data.get("year") or 0),
            reference_id=data.get("referenceId") or None,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date,
            "voucherNo": self.voucher_no,
            "type": self.type.value,
            "mode": self.mode.value,
            "amount": self.amount,
            "month": self.month,
            "year": self.year,
        }
        if self.reference_id:
            out["referenceId"] = self.reference_id
        return out
