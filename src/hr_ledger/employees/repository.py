from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..records.store import RecordStore
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on the record store.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def save(self, employee: Employee) -> bool:
        """Insert or replace by id. Returns True when a new row was added."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError


def _same_id(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


class StoreEmployeeRepository(EmployeeRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return self._store.get_employees()

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for e in self._store.get_employees():
            if _same_id(e.id, employee_id):
                return e
        return None

    def save(self, employee: Employee) -> bool:
        employees = self._store.get_employees()
        for idx, e in enumerate(employees):
            if _same_id(e.id, employee.id):
                employees[idx] = employee
                self._store.set_employees(employees)
                return False
        employees.append(employee)
        self._store.set_employees(employees)
        return True

    def delete_by_id(self, employee_id: str) -> bool:
        employees = self._store.get_employees()
        kept = [e for e in employees if not _same_id(e.id, employee_id)]
        if len(kept) == len(employees):
            return False
        self._store.set_employees(kept)
        return True
