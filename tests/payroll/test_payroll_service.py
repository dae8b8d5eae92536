import math

import pytest

from hr_ledger.core.exceptions import ValidationError


def test_first_write_creates_record_with_defaults(container):
    rec = container.payroll_service.update_field("EMP001", "April", 2025, "da", 500)

    salaries = container.store.get_salaries()
    assert len(salaries) == 1
    assert rec.da == 500
    assert rec.allowed_leave == 1
    assert rec.holiday == 4
    assert rec.ta == 0 and rec.pf == 0 and rec.advance_paid == 0


def test_second_write_updates_same_record(container):
    svc = container.payroll_service
    svc.update_field("EMP001", "April", 2025, "da", 500)
    svc.update_field("EMP001", "April", 2025, "pf", 200)
    svc.update_field("EMP001", "May", 2025, "pf", 100)

    salaries = container.store.get_salaries()
    assert len(salaries) == 2
    april = svc.get_salary("EMP001", "April", 2025)
    assert (april.da, april.pf) == (500, 200)


def test_camel_case_field_names_are_accepted(container):
    rec = container.payroll_service.update_field("EMP001", "April", 2025, "advancePaid", "1,000")
    assert rec.advance_paid == 1000


def test_non_numeric_input_is_zeroed(container):
    svc = container.payroll_service
    svc.update_field("EMP001", "April", 2025, "bonus", "abc")
    svc.update_field("EMP001", "April", 2025, "hra", float("nan"))
    rec = svc.get_salary("EMP001", "April", 2025)
    assert rec.bonus == 0
    assert rec.hra == 0


def test_unknown_field_is_rejected(container):
    with pytest.raises(ValidationError):
        container.payroll_service.update_field("EMP001", "April", 2025, "salary", 1)


def test_month_sheet_uses_attendance_and_adjustments(container, add_employee):
    add_employee("EMP001", basic_salary=9000)
    add_employee("EMP002", name="Sunita", basic_salary=15000)

    container.attendance_service.mark("EMP001", "April", 2025, 1, "A")
    container.attendance_service.mark("EMP001", "April", 2025, 2, "A")
    svc = container.payroll_service
    for field, value in (("da", 500), ("ta", 300), ("pf", 200), ("advancePaid", 1000)):
        svc.update_field("EMP001", "April", 2025, field, value)

    rows = {r.employee.id: r for r in svc.month_sheet("April", 2025)}
    assert rows["EMP001"].breakdown.net_payable == 8300
    assert rows["EMP002"].salary is None
    assert rows["EMP002"].breakdown.net_payable == 15000
    assert not any(math.isnan(r.breakdown.net_payable) for r in rows.values())


def test_adjustment_written_with_other_id_case_reaches_breakdown(container, add_employee):
    emp = add_employee("EMP001", basic_salary=9000)
    container.payroll_service.update_field("emp001", "April", 2025, "bonus", 500)

    assert [s.employee_id for s in container.store.get_salaries()] == ["EMP001"]
    row = container.payroll_service.breakdown(emp, "April", 2025)
    assert row.breakdown.net_payable == 9500


def test_adjustment_for_unregistered_id_keeps_raw_key(container):
    container.payroll_service.update_field("ghost", "April", 2025, "bonus", 10)
    assert container.payroll_service.get_salary("ghost", "April", 2025).bonus == 10
