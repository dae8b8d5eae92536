from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.http import arg_year, json_api, ok, payload
from ..container import Container
from ..core.constants import DEFAULT_MONTH


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    @app.route("/api/attendance/<employee_id>", methods=["GET"], endpoint="get_attendance")
    @json_api
    def get_attendance(employee_id: str):
        month = request.args.get("month", DEFAULT_MONTH)
        year = arg_year(date.today().year)
        rec = svc.get_record(employee_id, month, year)
        return ok(
            {
                "record": rec.to_json() if rec else None,
                "summary": svc.summary(employee_id, month, year).to_json(),
            }
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="mark_attendance")
    @json_api
    def mark_attendance():
        data = payload()
        rec = svc.mark(
            data.get("employeeId", ""),
            data.get("month", ""),
            data.get("year"),
            data.get("day"),
            data.get("status", ""),
        )
        return ok(rec.to_json())

    @app.route("/api/attendance/time", methods=["POST"], endpoint="set_attendance_time")
    @json_api
    def set_attendance_time():
        data = payload()
        rec = svc.set_time(
            data.get("employeeId", ""),
            data.get("month", ""),
            data.get("year"),
            data.get("day"),
            data.get("field", ""),
            data.get("value", ""),
        )
        return ok(rec.to_json() if rec else None)

    @app.route("/api/attendance/calendar", methods=["GET"], endpoint="attendance_calendar")
    @json_api
    def attendance_calendar():
        month = request.args.get("month", DEFAULT_MONTH)
        days = svc.month_calendar(month, arg_year(date.today().year))
        return ok([{"day": d.day, "date": d.iso_date, "isSunday": d.is_sunday, "holiday": d.holiday} for d in days])
