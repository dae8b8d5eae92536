from __future__ import annotations

import json
import logging
from typing import Any, Callable, Sequence

from ..attendance.model import AttendanceRecord
from ..company.model import DEFAULT_PROFILE, CompanyProfile
from ..core.constants import (
    ATTENDANCE_KEY,
    COMPANY_PROFILE_KEY,
    EMPLOYEES_KEY,
    HOLIDAYS_KEY,
    SALARIES_KEY,
    TRANSACTIONS_KEY,
)
from ..employees.model import Employee
from ..holidays.model import Holiday
from ..ledger.model import Transaction
from ..payroll.model import SalaryRecord
from ..storage.base import KeyValueStore
from .state import AppState

logger = logging.getLogger(__name__)


def _decode_list(factory: Callable[[dict], Any]) -> Callable[[Any], list]:
    def decode(raw: Any) -> list:
        if not isinstance(raw, list):
            raise ValueError("expected a JSON array")
        return [factory(item) for item in raw if isinstance(item, dict)]

    return decode


def _decode_company(raw: Any) -> CompanyProfile:
    if not isinstance(raw, dict):
        raise ValueError("expected a JSON object")
    return CompanyProfile.from_json(raw)


class RecordStore:
    """Application-state controller.

    Loads the six collections once, hands out snapshots, and writes the
    whole affected collection back to the key-value backend after every
    change (last write wins).
    """

    def __init__(self, backend: KeyValueStore):
        self._backend = backend
        self._state = AppState()

    @property
    def backend(self) -> KeyValueStore:
        return self._backend

    # ---- load/save boundary -------------------------------------------------

    def load(self) -> AppState:
        self._state = AppState(
            company=self._load(COMPANY_PROFILE_KEY, _decode_company, DEFAULT_PROFILE),
            employees=self._load(EMPLOYEES_KEY, _decode_list(Employee.from_json), []),
            attendance=self._load(ATTENDANCE_KEY, _decode_list(AttendanceRecord.from_json), []),
            salaries=self._load(SALARIES_KEY, _decode_list(SalaryRecord.from_json), []),
            holidays=self._load(HOLIDAYS_KEY, _decode_list(Holiday.from_json), []),
            transactions=self._load(TRANSACTIONS_KEY, _decode_list(Transaction.from_json), []),
        )
        logger.debug(
            "loaded state: %d employees, %d attendance, %d salary, %d transactions",
            len(self._state.employees),
            len(self._state.attendance),
            len(self._state.salaries),
            len(self._state.transactions),
        )
        return self.snapshot()

    def _load(self, key: str, decode: Callable[[Any], Any], default: Any) -> Any:
        raw = self._backend.get(key)
        if raw is None:
            return default
        try:
            return decode(json.loads(raw))
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            logger.warning("could not read %r (%s); using default", key, e)
            return default

    def _save(self, key: str, payload: Any) -> None:
        self._backend.set(key, json.dumps(payload, ensure_ascii=False))

    def save_all(self) -> None:
        for key, payload in self.dump().items():
            self._save(key, payload)

    def snapshot(self) -> AppState:
        s = self._state
        return AppState(
            company=s.company,
            employees=list(s.employees),
            attendance=list(s.attendance),
            salaries=list(s.salaries),
            holidays=list(s.holidays),
            transactions=list(s.transactions),
        )

    def dump(self) -> dict[str, Any]:
        """All collections in their persisted JSON shape."""
        s = self._state
        return {
            COMPANY_PROFILE_KEY: s.company.to_json(),
            EMPLOYEES_KEY: [e.to_json() for e in s.employees],
            ATTENDANCE_KEY: [a.to_json() for a in s.attendance],
            SALARIES_KEY: [r.to_json() for r in s.salaries],
            HOLIDAYS_KEY: [h.to_json() for h in s.holidays],
            TRANSACTIONS_KEY: [t.to_json() for t in s.transactions],
        }

    # ---- getters / setters --------------------------------------------------

    def get_company_profile(self) -> CompanyProfile:
        return self._state.company

    def set_company_profile(self, profile: CompanyProfile) -> None:
        self._state.company = profile
        self._save(COMPANY_PROFILE_KEY, profile.to_json())

    def get_employees(self) -> list[Employee]:
        return list(self._state.employees)

    def set_employees(self, employees: Sequence[Employee]) -> None:
        self._state.employees = list(employees)
        self._save(EMPLOYEES_KEY, [e.to_json() for e in self._state.employees])

    def get_attendance(self) -> list[AttendanceRecord]:
        return list(self._state.attendance)

    def set_attendance(self, records: Sequence[AttendanceRecord]) -> None:
        self._state.attendance = list(records)
        self._save(ATTENDANCE_KEY, [a.to_json() for a in self._state.attendance])

    def get_salaries(self) -> list[SalaryRecord]:
        return list(self._state.salaries)

    def set_salaries(self, records: Sequence[SalaryRecord]) -> None:
        self._state.salaries = list(records)
        self._save(SALARIES_KEY, [r.to_json() for r in self._state.salaries])

    def get_holidays(self) -> list[Holiday]:
        return list(self._state.holidays)

    def set_holidays(self, holidays: Sequence[Holiday]) -> None:
        self._state.holidays = list(holidays)
        self._save(HOLIDAYS_KEY, [h.to_json() for h in self._state.holidays])

    def get_transactions(self) -> list[Transaction]:
        return list(self._state.transactions)

    def set_transactions(self, transactions: Sequence[Transaction]) -> None:
        self._state.transactions = list(transactions)
        self._save(TRANSACTIONS_KEY, [t.to_json() for t in self._state.transactions])
