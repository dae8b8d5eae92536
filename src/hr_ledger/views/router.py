from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

from ..core.constants import DEFAULT_MONTH

if TYPE_CHECKING:
    from ..container import Container


class ViewType(str, Enum):
    DASHBOARD = "Dashboard"
    READ_INSTRUCTIONS = "ReadInstructions"
    SCHOOL_PROFILE = "SchoolProfile"
    UPLOAD_LOGO = "UploadLogo"
    BLANK_FORM = "BlankForm"
    ADD_EMPLOYEE = "AddEmployee"
    DATABASE = "Database"
    APPLICATION_FORM = "ApplicationForm"
    APPOINTMENT_LETTER = "AppointmentLetter"
    ID_CARD = "IDCard"
    EMPLOYEE_BALANCE = "EmployeeBalance"
    DAILY_ATTENDANCE = "DailyAttendance"
    SALARY_CALCULATION = "SalaryCalculation"
    ATTENDANCE_TRACKER = "AttendanceTracker"
    SALARY_TRACKER = "SalaryTracker"
    PF_CALCULATION = "PFCalculation"
    ATTENDANCE_SHEET = "AttendanceSheet"
    SALARY_SHEET_BANK = "SalarySheetBank"
    EMPLOYEE_SUMMARY = "EmployeeSummary"
    PAYMENT = "Payment"
    PAYMENT_RECORD = "PaymentRecord"
    SEARCH_MULTIPLE = "SearchMultiple"
    SALARY_STATEMENT = "SalaryStatement"
    MONTHLY_PAYSLIP = "MonthlyPayslip"
    ANNUAL_PAYSLIP = "AnnualPayslip"
    MONTH_WISE_SUMMARY = "MonthWiseSummary"
    JOB_LEAVING_DETAILS = "JobLeavingDetails"
    EXPERIENCE_CERTIFICATE = "ExperienceCertificate"
    MASTER_SETTING = "MasterSetting"
    GST_CALCULATOR = "GstCalculator"
    HOLIDAYS = "Holidays"
    EMPLOYEE_PAYMENT_STATUS = "EmployeePaymentStatus"
    QUOTATION_FORM = "QuotationForm"


@dataclass
class ViewContext:
    """Everything a screen handler may read; passed explicitly, never global."""

    container: "Container"
    year: int = field(default_factory=lambda: date.today().year)
    month: str = DEFAULT_MONTH
    employee_id: Optional[str] = None
    params: dict[str, Any] = field(default_factory=dict)


ViewHandler = Callable[[ViewContext], dict]


class ViewRouter:
    """Holds the active screen and dispatches to its handler."""

    def __init__(self, handlers: dict[ViewType, ViewHandler], context: ViewContext):
        self._handlers = handlers
        self.context = context
        self.current = ViewType.DASHBOARD

    def navigate(self, view: ViewType | str, **params: Any) -> dict:
        self.current = ViewType(view)
        for name in ("year", "month"):
            value = params.pop(name, None)
            if value not in (None, ""):
                setattr(self.context, name, value)
        employee_id = params.pop("employee_id", None)
        if employee_id is not None:
            # A blank id clears the selection.
            self.context.employee_id = employee_id or None
        self.context.params = {k: v for k, v in params.items() if v is not None}
        return self.render()

    def render(self) -> dict:
        handler = self._handlers.get(self.current)
        if handler is None:
            data = {"module": self.current.value, "placeholder": True}
        else:
            data = handler(self.context)
        return {
            "view": self.current.value,
            "year": self.context.year,
            "month": self.context.month,
            "employeeId": self.context.employee_id,
            "data": data,
        }
