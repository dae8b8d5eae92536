from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.http import arg_int, arg_year, json_api, ok
from ..container import Container
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    @app.route("/api/reports/dashboard", endpoint="report_dashboard")
    @json_api
    def report_dashboard():
        return ok(svc.dashboard())

    @app.route("/api/reports/balance", endpoint="report_balance")
    @json_api
    def report_balance():
        status_s = request.args.get("status")
        status = None
        if status_s and status_s != "All":
            try:
                status = EmployeeStatus(status_s)
            except ValueError:
                raise ValidationError("Status must be All, Active or Inactive")
        report = svc.balance_summary(status)
        return ok({"rows": report.rows, "totals": report.totals})

    @app.route("/api/reports/payment-status/<employee_id>", endpoint="report_payment_status")
    @json_api
    def report_payment_status(employee_id: str):
        report = svc.payment_status(employee_id, arg_int("year"))
        return ok({"rows": report.rows, "totals": report.totals})

    @app.route("/api/reports/month-wise", endpoint="report_month_wise")
    @json_api
    def report_month_wise():
        report = svc.month_wise_summary(arg_year(date.today().year))
        return ok({"rows": report.rows, "totals": report.totals})

    @app.route("/api/reports/employee/<employee_id>", endpoint="report_employee_summary")
    @json_api
    def report_employee_summary(employee_id: str):
        return ok(svc.employee_summary(employee_id))
