from __future__ import annotations

import dataclasses
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import display_date
from ..common.validators import require_non_empty, to_number
from ..core.enums import EmployeeStatus, Gender
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage the employee registry."""

    def __init__(self, employees: EmployeeRepository, *, today=date.today):
        self._employees = employees
        self._today = today

    def list_all(self, status: Optional[EmployeeStatus] = None) -> list[Employee]:
        items = list(self._employees.list_all())
        if status is None:
            return items
        return [e for e in items if e.status == status]

    def get(self, employee_id: str) -> Employee:
        emp = self._employees.get_by_id(employee_id or "")
        if not emp:
            raise NotFoundError("Employee ID not found in registry")
        return emp

    def search(self, text: str) -> list[Employee]:
        needle = (text or "").strip().lower()
        if not needle:
            return self.list_all()
        return [e for e in self.list_all() if needle in e.id.lower() or needle in e.name.lower()]

    def save(self, data: dict[str, Any]) -> Employee:
        """Create or update from a form payload (camelCase keys)."""
        emp_id = require_non_empty(data.get("id", ""), "Employee ID")
        require_non_empty(data.get("name", ""), "Name")

        payload = dict(data)
        payload["id"] = emp_id
        payload["basicSalary"] = to_number(data.get("basicSalary"))

        gender = payload.get("gender")
        if gender is not None and gender not in {g.value for g in Gender}:
            raise ValidationError("Gender must be Male or Female")

        now = display_date(self._today())
        existing = self._employees.get_by_id(emp_id)
        if existing:
            payload["id"] = existing.id
            payload.setdefault("status", existing.status.value)
            payload["statusChangeDate"] = payload.get("statusChangeDate") or existing.status_change_date or now
        else:
            payload["status"] = EmployeeStatus.ACTIVE.value
            payload["statusChangeDate"] = now

        employee = Employee.from_json(payload)
        self._employees.save(employee)
        return employee

    def delete(self, employee_id: str) -> None:
        emp = self.get(employee_id)
        if not self._employees.delete_by_id(emp.id):
            raise ValidationError("Failed to delete employee")

    def update_status(self, employee_id: str, status: EmployeeStatus) -> Employee:
        emp = self.get(employee_id)
        now = display_date(self._today())
        updated = dataclasses.replace(
            emp,
            status=status,
            status_change_date=now,
            leaving_date=now if status == EmployeeStatus.INACTIVE else None,
        )
        self._employees.save(updated)
        return updated

    def toggle_status(self, employee_id: str) -> Employee:
        emp = self.get(employee_id)
        target = EmployeeStatus.INACTIVE if emp.is_active else EmployeeStatus.ACTIVE
        return self.update_status(emp.id, target)

    def record_leaving(
        self,
        employee_id: str,
        *,
        leaving_date: str,
        reason: str = "",
        status: EmployeeStatus = EmployeeStatus.INACTIVE,
    ) -> Employee:
        emp = self.get(employee_id)
        updated = dataclasses.replace(
            emp,
            status=status,
            leaving_date=require_non_empty(leaving_date, "Leaving date"),
            leaving_reason=(reason or "").strip() or None,
        )
        self._employees.save(updated)
        return updated
