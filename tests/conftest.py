from __future__ import annotations

from datetime import date

import pytest

from hr_ledger.container import build_container
from hr_ledger.storage.memory_store import InMemoryStore


@pytest.fixture
def container():
    return build_container(backend=InMemoryStore())


@pytest.fixture
def add_employee(container):
    def _add(emp_id="EMP001", name="Ravi Kumar", basic_salary=9000, **extra):
        data = {"id": emp_id, "name": name, "basicSalary": basic_salary, **extra}
        return container.employee_service.save(data)

    return _add


@pytest.fixture
def today():
    return date(2025, 4, 15)


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from hr_ledger.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
