from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..records.store import RecordStore
from ..records.upsert import upsert
from .model import SalaryRecord

SalaryMutator = Callable[[SalaryRecord], SalaryRecord]


class SalaryRepository(Protocol):
    def list_all(self) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def get(self, employee_id: str, month: str, year: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def upsert(self, key: tuple[str, str, int], mutator: SalaryMutator) -> SalaryRecord:
        """Create a default-valued record if ``key`` is absent, then apply ``mutator``."""

        raise NotImplementedError


class StoreSalaryRepository(SalaryRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[SalaryRecord]:
        return self._store.get_salaries()

    def get(self, employee_id: str, month: str, year: int) -> Optional[SalaryRecord]:
        for r in self._store.get_salaries():
            if r.key == (employee_id, month, year):
                return r
        return None

    def upsert(self, key: tuple[str, str, int], mutator: SalaryMutator) -> SalaryRecord:
        records, stored = upsert(
            self._store.get_salaries(),
            key,
            key_of=lambda r: r.key,
            factory=lambda: SalaryRecord.new_default(*key),
            mutator=mutator,
        )
        self._store.set_salaries(records)
        return stored
