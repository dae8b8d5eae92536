from datetime import datetime

import pytest

from hr_ledger.core.enums import PaymentMode, TransactionType
from hr_ledger.core.exceptions import NotFoundError, ValidationError
from hr_ledger.ledger.repository import StoreTransactionRepository
from hr_ledger.ledger.service import LedgerService


@pytest.fixture
def ledger(container, add_employee):
    add_employee("EMP001")
    clock = lambda: datetime(2025, 4, 15, 10, 30, 0)
    return LedgerService(StoreTransactionRepository(container.store), container.employee_service, clock=clock)


def _pay(ledger, **kw):
    args = {"employee_id": "EMP001", "amount": 5000, "voucher_no": "V-000001", "month": "April", "year": 2025}
    args.update(kw)
    return ledger.record_payment(**args)


def test_record_payment_defaults(ledger):
    tx = _pay(ledger)
    assert tx.date == "2025-04-15"
    assert tx.type == TransactionType.SALARY
    assert tx.mode == PaymentMode.CASH
    assert tx.amount == 5000
    assert tx.reference_id is None


def test_ids_are_unique_within_same_millisecond(ledger):
    a = _pay(ledger)
    b = _pay(ledger, voucher_no="V-000002")
    assert a.id != b.id
    assert int(b.id) == int(a.id) + 1


def test_validation(ledger):
    with pytest.raises(ValidationError):
        _pay(ledger, amount=0)
    with pytest.raises(ValidationError):
        _pay(ledger, amount="abc")
    with pytest.raises(ValidationError):
        _pay(ledger, voucher_no="")
    with pytest.raises(NotFoundError):
        _pay(ledger, employee_id="EMP404")


def test_list_newest_first_and_total(ledger, add_employee):
    add_employee("EMP002", name="Sunita")
    _pay(ledger, date="2025-04-01", amount=1000)
    _pay(ledger, date="2025-05-01", amount=2000, mode=PaymentMode.UPI)
    _pay(ledger, employee_id="EMP002", date="2025-04-20", amount=500, type=TransactionType.ADVANCE)

    assert [t.date for t in ledger.list_all()] == ["2025-05-01", "2025-04-20", "2025-04-01"]
    assert [t.amount for t in ledger.list_all("EMP002")] == [500]
    assert ledger.total_disbursed() == 3500


def test_next_voucher_no(ledger):
    expected = str(int(datetime(2025, 4, 15, 10, 30, 0).timestamp() * 1000))[-6:]
    assert ledger.next_voucher_no() == f"V-{expected}"
