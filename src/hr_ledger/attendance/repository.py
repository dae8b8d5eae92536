from __future__ import annotations

from typing import Callable, Optional, Protocol, Sequence

from ..records.store import RecordStore
from ..records.upsert import upsert
from .aggregator import find_record
from .model import AttendanceRecord

AttendanceMutator = Callable[[AttendanceRecord], AttendanceRecord]


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get(self, employee_id: str, month: str, year: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, key: tuple[str, str, int], mutator: AttendanceMutator) -> AttendanceRecord:
        raise NotImplementedError

    def update_existing(self, key: tuple[str, str, int], mutator: AttendanceMutator) -> Optional[AttendanceRecord]:
        raise NotImplementedError


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._store.get_attendance()

    def get(self, employee_id: str, month: str, year: int) -> Optional[AttendanceRecord]:
        return find_record(employee_id, month, year, self._store.get_attendance())

    def upsert(self, key: tuple[str, str, int], mutator: AttendanceMutator) -> AttendanceRecord:
        employee_id, month, year = key
        records, stored = upsert(
            self._store.get_attendance(),
            key,
            key_of=lambda r: r.key,
            factory=lambda: AttendanceRecord(employee_id=employee_id, month=month, year=year),
            mutator=mutator,
        )
        self._store.set_attendance(records)
        return stored

    def update_existing(self, key: tuple[str, str, int], mutator: AttendanceMutator) -> Optional[AttendanceRecord]:
        if self.get(*key) is None:
            return None
        return self.upsert(key, mutator)
