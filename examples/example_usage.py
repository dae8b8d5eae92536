"""Example: use the service layer directly (no Flask).

Controllers are thin; the payroll numbers below come from the same services
the HTTP API uses.
"""

import importlib

from hr_ledger.config import get_settings_module
from hr_ledger.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(store_backend=settings.STORE_BACKEND, data_dir=settings.DATA_DIR)
    for row in container.payroll_service.month_sheet("April", 2025):
        print(row.employee.id, row.employee.name, round(row.breakdown.net_payable, 2))


if __name__ == "__main__":
    main()
