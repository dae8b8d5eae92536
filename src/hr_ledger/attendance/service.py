from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import days_in_month, month_number
from ..common.validators import require_month, require_non_empty, require_year
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..holidays.service import HolidayService
from .aggregator import summarize_attendance
from .model import AttendanceRecord, AttendanceSummary, PunchTimes
from .repository import AttendanceRepository

_VALID_STATUSES = {s.value for s in AttendanceStatus}


@dataclass(frozen=True)
class CalendarDay:
    day: int
    iso_date: str
    is_sunday: bool
    holiday: Optional[str] = None


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        holidays: Optional[HolidayService] = None,
        *,
        employees: Optional[EmployeeRepository] = None,
    ):
        self._attendance = attendance
        self._holidays = holidays
        self._employees = employees

    def _resolve_id(self, employee_id: str) -> str:
        emp = self._employees.get_by_id(employee_id) if self._employees and employee_id else None
        return emp.id if emp else employee_id

    def _check_day(self, month: str, year: int, day) -> int:
        try:
            day = int(day)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid day: {day!r}")
        if day < 1 or day > days_in_month(month, year):
            raise ValidationError(f"{month} {year} has no day {day}")
        return day

    def mark(self, employee_id: str, month: str, year: int, day: int, status: str) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "Employee ID")
        employee_id = self._resolve_id(employee_id)
        month = require_month(month)
        year = require_year(year)
        day = self._check_day(month, year, day)

        status = "" if status is None else str(status)
        if status not in _VALID_STATUSES:
            raise ValidationError(f"Unknown attendance status: {status!r}")

        def apply(rec: AttendanceRecord) -> AttendanceRecord:
            return dataclasses.replace(rec, days={**rec.days, day: status})

        return self._attendance.upsert((employee_id, month, year), apply)

    def set_time(
        self,
        employee_id: str,
        month: str,
        year: int,
        day: int,
        field: str,
        value: str,
    ) -> Optional[AttendanceRecord]:
        """Record an in/out time. Only months that already have a record are touched."""
        employee_id = self._resolve_id(employee_id)
        month = require_month(month)
        year = require_year(year)
        day = self._check_day(month, year, day)
        if field not in ("in", "out"):
            raise ValidationError("Time field must be 'in' or 'out'")

        def apply(rec: AttendanceRecord) -> AttendanceRecord:
            current = rec.times.get(day, PunchTimes())
            if field == "in":
                punch = dataclasses.replace(current, check_in=value or "")
            else:
                punch = dataclasses.replace(current, check_out=value or "")
            return dataclasses.replace(rec, times={**rec.times, day: punch})

        return self._attendance.update_existing((employee_id, month, year), apply)

    def get_record(self, employee_id: str, month: str, year: int) -> Optional[AttendanceRecord]:
        return self._attendance.get(self._resolve_id(employee_id), month, int(year))

    def summary(self, employee_id: str, month: str, year: int) -> AttendanceSummary:
        return summarize_attendance(self._resolve_id(employee_id), month, int(year), self._attendance.list_all())

    def month_calendar(self, month: str, year: int) -> list[CalendarDay]:
        month = require_month(month)
        year = require_year(year)
        m = month_number(month)

        out = []
        for day in range(1, days_in_month(month, year) + 1):
            d = date(year, m, day)
            iso = d.isoformat()
            holiday = self._holidays.find(iso) if self._holidays else None
            out.append(
                CalendarDay(
                    day=day,
                    iso_date=iso,
                    is_sunday=d.weekday() == 6,
                    holiday=holiday.reason if holiday else None,
                )
            )
        return out
