from __future__ import annotations

from ..billing.quotation import quote_manpower
from ..core.constants import DEFAULT_GST_RATE
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError
from .router import ViewContext, ViewHandler, ViewType


def _status_param(ctx: ViewContext):
    status = ctx.params.get("status")
    if not status or status == "All":
        return None
    try:
        return EmployeeStatus(status)
    except ValueError:
        raise ValidationError("Status must be All, Active or Inactive")


def _employee_or_none(ctx: ViewContext):
    if not ctx.employee_id:
        return None
    return ctx.container.employee_service.get(ctx.employee_id)


def dashboard(ctx: ViewContext) -> dict:
    return ctx.container.report_service.dashboard()


def employee_form(ctx: ViewContext) -> dict:
    emp = _employee_or_none(ctx)
    return {"employee": emp.to_json() if emp else None}


def database(ctx: ViewContext) -> dict:
    employees = ctx.container.employee_service.list_all(_status_param(ctx))
    return {"employees": [e.to_json(include_photo=False) for e in employees]}


def attendance_sheet(ctx: ViewContext) -> dict:
    c = ctx.container
    calendar = c.attendance_service.month_calendar(ctx.month, ctx.year)
    employees = c.employee_service.search(ctx.params.get("search", ""))
    rows = []
    for e in employees:
        rec = c.attendance_service.get_record(e.id, ctx.month, ctx.year)
        rows.append(
            {
                "employeeId": e.id,
                "name": e.name,
                "days": {d.day: rec.status_on(d.day) if rec else "" for d in calendar},
                "summary": c.attendance_service.summary(e.id, ctx.month, ctx.year).to_json(),
            }
        )
    return {
        "calendar": [
            {"day": d.day, "date": d.iso_date, "isSunday": d.is_sunday, "holiday": d.holiday} for d in calendar
        ],
        "rows": rows,
    }


def salary_sheet(ctx: ViewContext) -> dict:
    rows = ctx.container.payroll_service.month_sheet(ctx.month, ctx.year)
    return {"rows": [r.to_json() for r in rows], "totalNetPayable": sum(r.breakdown.net_payable for r in rows)}


def printable_document(kind: str) -> ViewHandler:
    def handler(ctx: ViewContext) -> dict:
        c = ctx.container
        return {
            "document": kind,
            "company": c.company_service.get().to_json(),
            "employees": [e.to_json() for e in c.employee_service.list_all()],
        }

    return handler


def job_leaving(ctx: ViewContext) -> dict:
    inactive = ctx.container.employee_service.list_all(EmployeeStatus.INACTIVE)
    return {"inactive": [e.to_json(include_photo=False) for e in inactive]}


def payment_ledger(ctx: ViewContext) -> dict:
    ledger = ctx.container.ledger_service
    return {
        "transactions": [t.to_json() for t in ledger.list_all()],
        "totalDisbursed": ledger.total_disbursed(),
        "nextVoucherNo": ledger.next_voucher_no(),
    }


def payment_status(ctx: ViewContext) -> dict:
    if not ctx.employee_id:
        return {"employee": None, "rows": [], "totals": {}}
    emp = ctx.container.employee_service.get(ctx.employee_id)
    report = ctx.container.report_service.payment_status(emp.id)
    return {"employee": emp.to_json(include_photo=False), "rows": report.rows, "totals": report.totals}


def employee_balance(ctx: ViewContext) -> dict:
    report = ctx.container.report_service.balance_summary(_status_param(ctx))
    return {"rows": report.rows, "totals": report.totals}


def employee_summary(ctx: ViewContext) -> dict:
    if not ctx.employee_id:
        return {"employee": None}
    return ctx.container.report_service.employee_summary(ctx.employee_id)


def quotation(ctx: ViewContext) -> dict:
    emp = _employee_or_none(ctx)
    quote = quote_manpower(emp.basic_salary if emp else ctx.params.get("salary", 0))
    return {
        "company": ctx.container.company_service.get().to_json(),
        "employee": emp.to_json(include_photo=False) if emp else None,
        "quotation": quote.to_json(),
    }


def month_wise_summary(ctx: ViewContext) -> dict:
    report = ctx.container.report_service.month_wise_summary(ctx.year)
    return {"rows": report.rows, "totals": report.totals}


def company_profile(ctx: ViewContext) -> dict:
    return {"company": ctx.container.company_service.get().to_json()}


def gst_calculator(ctx: ViewContext) -> dict:
    return {"company": ctx.container.company_service.get().to_json(), "gstRate": DEFAULT_GST_RATE}


def application_form(ctx: ViewContext) -> dict:
    c = ctx.container
    return {
        "company": c.company_service.get().to_json(),
        "employees": [e.to_json(include_photo=False) for e in c.employee_service.list_all()],
    }


def holidays(ctx: ViewContext) -> dict:
    return {"holidays": [h.to_json() for h in ctx.container.holiday_service.list_all(ctx.year)]}


VIEW_HANDLERS: dict[ViewType, ViewHandler] = {
    ViewType.DASHBOARD: dashboard,
    ViewType.ADD_EMPLOYEE: employee_form,
    ViewType.BLANK_FORM: employee_form,
    ViewType.DATABASE: database,
    ViewType.ATTENDANCE_SHEET: attendance_sheet,
    ViewType.DAILY_ATTENDANCE: attendance_sheet,
    ViewType.ATTENDANCE_TRACKER: attendance_sheet,
    ViewType.SALARY_CALCULATION: salary_sheet,
    ViewType.SALARY_TRACKER: salary_sheet,
    ViewType.PF_CALCULATION: salary_sheet,
    ViewType.SALARY_SHEET_BANK: salary_sheet,
    ViewType.ID_CARD: printable_document("IDCard"),
    ViewType.APPOINTMENT_LETTER: printable_document("Letter"),
    ViewType.EXPERIENCE_CERTIFICATE: printable_document("Experience"),
    ViewType.MONTHLY_PAYSLIP: printable_document("Payslip"),
    ViewType.ANNUAL_PAYSLIP: printable_document("Payslip"),
    ViewType.JOB_LEAVING_DETAILS: job_leaving,
    ViewType.PAYMENT: payment_ledger,
    ViewType.PAYMENT_RECORD: payment_ledger,
    ViewType.EMPLOYEE_PAYMENT_STATUS: payment_status,
    ViewType.EMPLOYEE_BALANCE: employee_balance,
    ViewType.EMPLOYEE_SUMMARY: employee_summary,
    ViewType.QUOTATION_FORM: quotation,
    ViewType.MONTH_WISE_SUMMARY: month_wise_summary,
    ViewType.MASTER_SETTING: company_profile,
    ViewType.SCHOOL_PROFILE: company_profile,
    ViewType.UPLOAD_LOGO: company_profile,
    ViewType.GST_CALCULATOR: gst_calculator,
    ViewType.APPLICATION_FORM: application_form,
    ViewType.HOLIDAYS: holidays,
}
