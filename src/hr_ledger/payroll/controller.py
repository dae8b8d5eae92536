from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.http import arg_year, json_api, ok, payload
from ..container import Container
from ..core.constants import DEFAULT_MONTH


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_sheet")
    @json_api
    def payroll_sheet():
        month = request.args.get("month", DEFAULT_MONTH)
        rows = svc.month_sheet(month, arg_year(date.today().year))
        return ok([r.to_json() for r in rows])

    @app.route("/api/payroll/<employee_id>", methods=["GET"], endpoint="payroll_breakdown")
    @json_api
    def payroll_breakdown(employee_id: str):
        employee = container.employee_service.get(employee_id)
        month = request.args.get("month", DEFAULT_MONTH)
        return ok(svc.breakdown(employee, month, arg_year(date.today().year)).to_json())

    @app.route("/api/payroll/field", methods=["POST"], endpoint="update_salary_field")
    @json_api
    def update_salary_field():
        data = payload()
        record = svc.update_field(
            data.get("employeeId", ""),
            data.get("month", ""),
            data.get("year"),
            data.get("field", ""),
            data.get("value"),
        )
        return ok(record.to_json())
