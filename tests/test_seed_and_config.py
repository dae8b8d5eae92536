import pytest

from hr_ledger.config import get_settings_module
from hr_ledger.container import build_backend
from hr_ledger.seed import seed_demo_data
from hr_ledger.storage.memory_store import InMemoryStore


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "hr_ledger.config.production"),
        ("TEST", "hr_ledger.config.testing"),
        ("anything", "hr_ledger.config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_build_backend_kinds(tmp_path):
    assert isinstance(build_backend(store_backend="memory"), InMemoryStore)
    with pytest.raises(ValueError):
        build_backend(store_backend="mysql")
    with pytest.raises(ValueError):
        build_backend(store_backend="sqlite")


def test_seed_demo_data(container):
    seed_demo_data(container, year=2025)

    assert len(container.employee_service.list_all()) == 3
    row = container.payroll_service.breakdown(container.employee_service.get("EMP001"), "April", 2025)
    assert row.attendance.absent == 2
    assert row.breakdown.net_payable == 8300
    assert container.ledger_service.total_disbursed() == 5000
