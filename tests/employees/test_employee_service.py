from datetime import date

import pytest

from hr_ledger.core.enums import EmployeeStatus, Gender
from hr_ledger.core.exceptions import NotFoundError, ValidationError
from hr_ledger.employees.repository import StoreEmployeeRepository
from hr_ledger.employees.service import EmployeeService


@pytest.fixture
def svc(container, today):
    return EmployeeService(StoreEmployeeRepository(container.store), today=lambda: today)


def test_new_employee_is_active_with_status_date(svc):
    emp = svc.save({"id": "EMP001", "name": "Ravi", "gender": "Male", "basicSalary": "9,000"})
    assert emp.status == EmployeeStatus.ACTIVE
    assert emp.status_change_date == "15/04/2025"
    assert emp.basic_salary == 9000
    assert emp.gender == Gender.MALE


def test_save_existing_replaces_in_place(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    svc.save({"id": "EMP002", "name": "Sunita", "gender": "Female"})
    svc.update_status("EMP001", EmployeeStatus.INACTIVE)

    emp = svc.save({"id": "EMP001", "name": "Ravi Kumar", "designation": "Guard"})

    assert [e.id for e in svc.list_all()] == ["EMP001", "EMP002"]
    assert emp.name == "Ravi Kumar"
    assert emp.status == EmployeeStatus.INACTIVE


def test_save_requires_id_and_name(svc):
    with pytest.raises(ValidationError):
        svc.save({"id": " ", "name": "X"})
    with pytest.raises(ValidationError):
        svc.save({"id": "EMP001", "name": ""})
    with pytest.raises(ValidationError):
        svc.save({"id": "EMP001", "name": "X", "gender": "Other"})


def test_lookup_is_case_insensitive(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    assert svc.get(" emp001 ").id == "EMP001"
    with pytest.raises(NotFoundError):
        svc.get("EMP404")


def test_search_matches_id_or_name(svc):
    svc.save({"id": "EMP001", "name": "Ravi Kumar"})
    svc.save({"id": "EMP002", "name": "Sunita Devi"})
    assert [e.id for e in svc.search("sunita")] == ["EMP002"]
    assert [e.id for e in svc.search("emp00")] == ["EMP001", "EMP002"]
    assert len(svc.search("")) == 2


def test_status_changes_and_filters(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    svc.save({"id": "EMP002", "name": "Sunita"})

    emp = svc.toggle_status("EMP001")
    assert emp.status == EmployeeStatus.INACTIVE
    assert emp.leaving_date == "15/04/2025"
    assert [e.id for e in svc.list_all(EmployeeStatus.ACTIVE)] == ["EMP002"]

    emp = svc.toggle_status("EMP001")
    assert emp.is_active
    assert emp.leaving_date is None


def test_record_leaving(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    emp = svc.record_leaving("EMP001", leaving_date="2025-03-31", reason=" Relocated ")
    assert emp.status == EmployeeStatus.INACTIVE
    assert emp.leaving_date == "2025-03-31"
    assert emp.leaving_reason == "Relocated"
    with pytest.raises(ValidationError):
        svc.record_leaving("EMP001", leaving_date="")


def test_delete(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    svc.delete("EMP001")
    assert svc.list_all() == []
    with pytest.raises(NotFoundError):
        svc.delete("EMP001")


def test_saving_differently_cased_id_updates_existing_row(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    emp = svc.save({"id": "emp001", "name": "Ravi Kumar"})

    assert emp.id == "EMP001"
    assert [(e.id, e.name) for e in svc.list_all()] == [("EMP001", "Ravi Kumar")]


def test_delete_ignores_id_case(svc):
    svc.save({"id": "EMP001", "name": "Ravi"})
    svc.delete("emp001")
    assert svc.list_all() == []
