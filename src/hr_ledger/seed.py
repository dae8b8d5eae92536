from __future__ import annotations

from datetime import date

from .common.datetime_utils import days_in_month, month_number
from .container import Container
from .core.enums import AttendanceStatus, PaymentMode, TransactionType

DEMO_EMPLOYEES = [
    {
        "id": "EMP001",
        "name": "Ravi Kumar",
        "designation": "Security Guard",
        "gender": "Male",
        "basicSalary": 9000,
        "joiningDate": "2024-04-01",
        "contact": "9000000001",
        "shift": "Day",
        "workLocation": "Main Gate",
    },
    {
        "id": "EMP002",
        "name": "Sunita Devi",
        "designation": "Supervisor",
        "gender": "Female",
        "basicSalary": 15000,
        "joiningDate": "2023-07-15",
        "contact": "9000000002",
        "shift": "Day",
        "workLocation": "Head Office",
    },
    {
        "id": "EMP003",
        "name": "Arjun Singh",
        "designation": "Security Guard",
        "gender": "Male",
        "basicSalary": 9500,
        "joiningDate": "2024-01-10",
        "contact": "9000000003",
        "shift": "Night",
        "workLocation": "Warehouse",
    },
]


def seed_demo_data(container: Container, *, year: int | None = None, month: str = "April") -> None:
    """Demo employees plus one month of attendance, adjustments and a payment."""
    year = year or date.today().year

    for data in DEMO_EMPLOYEES:
        container.employee_service.save(data)

    attendance = container.attendance_service
    m = month_number(month)
    for day in range(1, days_in_month(month, year) + 1):
        status = AttendanceStatus.OFF if date(year, m, day).weekday() == 6 else AttendanceStatus.PRESENT
        attendance.mark("EMP001", month, year, day, status.value)
    attendance.mark("EMP001", month, year, 3, AttendanceStatus.ABSENT.value)
    attendance.mark("EMP001", month, year, 4, AttendanceStatus.ABSENT.value)
    attendance.mark("EMP002", month, year, 1, AttendanceStatus.HALF_DAY.value)

    payroll = container.payroll_service
    payroll.update_field("EMP001", month, year, "da", 500)
    payroll.update_field("EMP001", month, year, "ta", 300)
    payroll.update_field("EMP001", month, year, "pf", 200)
    payroll.update_field("EMP001", month, year, "advancePaid", 1000)
    payroll.update_field("EMP001", month, year, "paidAmount", 8300)

    container.ledger_service.record_payment(
        employee_id="EMP001",
        amount=5000,
        voucher_no="V-000001",
        month=month,
        year=year,
        type=TransactionType.SALARY,
        mode=PaymentMode.CASH,
    )
