from __future__ import annotations

from flask import Flask, request

from ..common.http import json_api, ok, payload
from ..container import Container
from ..core.enums import EmployeeStatus
from ..core.exceptions import ValidationError


def _status(value):
    if not value or value == "All":
        return None
    try:
        return EmployeeStatus(value)
    except ValueError:
        raise ValidationError("Status must be Active or Inactive")


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @json_api
    def list_employees():
        search = request.args.get("search")
        if search:
            employees = svc.search(search)
        else:
            employees = svc.list_all(_status(request.args.get("status")))
        return ok([e.to_json() for e in employees])

    @app.route("/api/employees", methods=["POST"], endpoint="save_employee")
    @json_api
    def save_employee():
        employee = svc.save(payload())
        return ok(employee.to_json(), 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @json_api
    def get_employee(employee_id: str):
        return ok(svc.get(employee_id).to_json())

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @json_api
    def delete_employee(employee_id: str):
        svc.delete(employee_id)
        return ok()

    @app.route("/api/employees/<employee_id>/status", methods=["POST"], endpoint="update_employee_status")
    @json_api
    def update_employee_status(employee_id: str):
        status = _status(payload().get("status"))
        if status is None:
            employee = svc.toggle_status(employee_id)
        else:
            employee = svc.update_status(employee_id, status)
        return ok(employee.to_json())

    @app.route("/api/employees/<employee_id>/leaving", methods=["POST"], endpoint="record_leaving")
    @json_api
    def record_leaving(employee_id: str):
        data = payload()
        employee = svc.record_leaving(
            employee_id,
            leaving_date=data.get("date", ""),
            reason=data.get("reason", ""),
            status=_status(data.get("status")) or EmployeeStatus.INACTIVE,
        )
        return ok(employee.to_json())
