import pytest

from hr_ledger.core.constants import FISCAL_MONTHS
from hr_ledger.core.enums import EmployeeStatus


@pytest.fixture
def populated(container, add_employee):
    add_employee("EMP001", basic_salary=9000, gender="Male")
    add_employee("EMP002", name="Sunita", basic_salary=15000, gender="Female")
    container.employee_service.update_status("EMP002", EmployeeStatus.INACTIVE)

    payroll = container.payroll_service
    payroll.update_field("EMP001", "April", 2025, "paidAmount", 8000)
    payroll.update_field("EMP001", "April", 2025, "pf", 200)
    payroll.update_field("EMP002", "April", 2025, "paidAmount", 12000)

    ledger = container.ledger_service
    ledger.record_payment(employee_id="EMP001", amount=5000, voucher_no="V-1", month="April", year=2025, date="2025-04-30")
    ledger.record_payment(employee_id="EMP001", amount=1000, voucher_no="V-2", month="May", year=2025, date="2025-05-31")

    att = container.attendance_service
    att.mark("EMP001", "April", 2025, 1, "P")
    att.mark("EMP001", "April", 2025, 2, "A")
    att.mark("EMP001", "April", 2025, 3, "HD")
    att.mark("EMP001", "April", 2025, 6, "OFF")
    att.mark("EMP001", "May", 2025, 1, "H")
    att.mark("EMP001", "March", 2024, 1, "P")
    return container


def test_dashboard_totals(populated):
    d = populated.report_service.dashboard()
    assert d["totalSalary"] == 20000
    assert d["totalPF"] == 200
    assert d["totalPaid"] == 6000
    assert d["totalBalance"] == 14000
    assert (d["maleCount"], d["femaleCount"]) == (1, 1)
    assert (d["activeCount"], d["inactiveCount"], d["employeeCount"]) == (1, 1, 2)


def test_balance_summary_filters_by_status(populated):
    report = populated.report_service.balance_summary()
    assert [r["employeeId"] for r in report.rows] == ["EMP001", "EMP002"]
    assert report.totals == {"total": 20000, "paid": 6000, "balance": 14000}

    active = populated.report_service.balance_summary(EmployeeStatus.ACTIVE)
    assert [r["balance"] for r in active.rows] == [2000]


def test_payment_status_runs_april_to_march(populated):
    report = populated.report_service.payment_status("EMP001", 2025)
    assert [r["month"] for r in report.rows] == list(FISCAL_MONTHS)

    april, may = report.rows[0], report.rows[1]
    assert (april["total"], april["paid"], april["balance"]) == (8000, 5000, 3000)
    # no recorded amount for May: the basic salary is payable
    assert (may["total"], may["paid"], may["balance"]) == (9000, 1000, 8000)
    assert report.totals["pf"] == 200
    assert report.totals["paid"] == 6000


def test_month_wise_summary(populated):
    report = populated.report_service.month_wise_summary(2025)
    april = report.rows[0]
    assert april["month"] == "April"
    assert april["activeStaff"] == 1
    assert (april["present"], april["absent"], april["halfDay"]) == (1, 1, 1)
    assert april["gross"] == 20000
    assert april["paid"] == 5000
    assert report.totals["gross"] == 20000
    assert report.totals["paid"] == 6000


def test_employee_summary_orders_newest_first(populated):
    summary = populated.report_service.employee_summary("EMP001")
    assert [(a["month"], a["year"]) for a in summary["attendance"]] == [
        ("May", 2025),
        ("April", 2025),
        ("March", 2024),
    ]
    april = summary["attendance"][1]
    assert april["holidayOrOff"] == 1
    assert april["halfDay"] == 1
    assert summary["attendance"][0]["holidayOrOff"] == 1
    assert [p["voucherNo"] for p in summary["payments"]] == ["V-2", "V-1"]
    assert summary["totalPaid"] == 6000
