from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.repository import StoreAttendanceRepository
from .attendance.service import AttendanceService
from .company.service import CompanyService
from .database.connection import DBConfig, DatabaseConnection
from .employees.repository import StoreEmployeeRepository
from .employees.service import EmployeeService
from .holidays.service import HolidayService
from .ledger.repository import StoreTransactionRepository
from .ledger.service import LedgerService
from .payroll.repository import StoreSalaryRepository
from .payroll.service import PayrollService
from .records.store import RecordStore
from .reports.service import ReportService
from .storage.base import KeyValueStore
from .storage.json_file_store import JsonFileStore
from .storage.memory_store import InMemoryStore
from .storage.mysql_store import MySQLKeyValueStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: RecordStore

    employees_repo: StoreEmployeeRepository
    attendance_repo: StoreAttendanceRepository
    salaries_repo: StoreSalaryRepository
    transactions_repo: StoreTransactionRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    ledger_service: LedgerService
    holiday_service: HolidayService
    company_service: CompanyService
    report_service: ReportService


def build_backend(*, store_backend: str, data_dir: str = "data", db_config: Optional[dict] = None) -> KeyValueStore:
    kind = (store_backend or "json").lower()
    if kind == "memory":
        return InMemoryStore()
    if kind == "json":
        return JsonFileStore(Path(data_dir))
    if kind == "mysql":
        if not db_config:
            raise ValueError("mysql backend needs DB_CONFIG")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown store backend: {store_backend!r}")


def build_container(
    *,
    store_backend: str = "json",
    data_dir: str = "data",
    db_config: Optional[dict] = None,
    backend: Optional[KeyValueStore] = None,
) -> Container:
    backend = backend or build_backend(store_backend=store_backend, data_dir=data_dir, db_config=db_config)
    store = RecordStore(backend)
    store.load()
    logger.info("record store ready (%s)", type(backend).__name__)

    employees_repo = StoreEmployeeRepository(store)
    attendance_repo = StoreAttendanceRepository(store)
    salaries_repo = StoreSalaryRepository(store)
    transactions_repo = StoreTransactionRepository(store)

    employee_service = EmployeeService(employees_repo)
    holiday_service = HolidayService(store)
    attendance_service = AttendanceService(attendance_repo, holiday_service, employees=employees_repo)
    payroll_service = PayrollService(salaries_repo, attendance_repo, employees_repo)
    ledger_service = LedgerService(transactions_repo, employee_service)
    company_service = CompanyService(store)
    report_service = ReportService(store, employee_service)

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        transactions_repo=transactions_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        ledger_service=ledger_service,
        holiday_service=holiday_service,
        company_service=company_service,
        report_service=report_service,
    )
