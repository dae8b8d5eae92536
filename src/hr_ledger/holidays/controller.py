from __future__ import annotations

from flask import Flask

from ..common.http import arg_int, json_api, ok, payload
from ..container import Container
from ..core.enums import HolidayType
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @json_api
    def list_holidays():
        return ok([h.to_json() for h in svc.list_all(arg_int("year"))])

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @json_api
    def add_holiday():
        data = payload()
        try:
            h_type = HolidayType(data.get("type") or HolidayType.COMPANY.value)
        except ValueError:
            raise ValidationError("Holiday type must be Company, National or Festival")
        holiday = svc.add(date=data.get("date", ""), reason=data.get("reason", ""), type=h_type)
        return ok(holiday.to_json(), 201)
