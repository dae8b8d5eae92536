from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from ..common.validators import require_month, require_non_empty, require_year, to_number
from ..core.enums import PaymentMode, TransactionType
from ..core.exceptions import ValidationError
from ..employees.service import EmployeeService
from .model import Transaction
from .repository import TransactionRepository


class LedgerService:
    """Use case: record and list salary/advance disbursements."""

    def __init__(
        self,
        transactions: TransactionRepository,
        employees: EmployeeService,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._transactions = transactions
        self._employees = employees
        self._clock = clock
        self._last_id = 0

    def _millis(self) -> int:
        return int(self._clock().timestamp() * 1000)

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped so two payments in the same ms differ.
        tx_id = max(self._millis(), self._last_id + 1)
        self._last_id = tx_id
        return str(tx_id)

    def next_voucher_no(self) -> str:
        return f"V-{str(self._millis())[-6:]}"

    def record_payment(
        self,
        *,
        employee_id: str,
        amount,
        voucher_no: str,
        month: str,
        year: int,
        date: Optional[str] = None,
        type: TransactionType = TransactionType.SALARY,
        mode: PaymentMode = PaymentMode.CASH,
        reference_id: Optional[str] = None,
    ) -> Transaction:
        employee = self._employees.get(employee_id)
        voucher_no = require_non_empty(voucher_no, "Voucher number")
        value = to_number(amount)
        if value <= 0:
            raise ValidationError("Amount must be greater than zero")

        tx = Transaction(
            id=self._next_id(),
            employee_id=employee.id,
            date=date or self._clock().date().isoformat(),
            voucher_no=voucher_no,
            type=type,
            mode=mode,
            amount=value,
            month=require_month(month),
            year=require_year(year),
            reference_id=(reference_id or "").strip() or None,
        )
        self._transactions.add(tx)
        return tx

    def list_all(self, employee_id: Optional[str] = None) -> list[Transaction]:
        items = list(self._transactions.list_all())
        if employee_id is not None:
            items = [t for t in items if t.employee_id == employee_id]
        return sorted(items, key=lambda t: t.date, reverse=True)

    def total_disbursed(self) -> float:
        return sum(t.amount for t in self._transactions.list_all())
