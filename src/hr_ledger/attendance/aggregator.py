from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary

_COUNTER_FOR_STATUS = {
    AttendanceStatus.PRESENT.value: "present",
    AttendanceStatus.ABSENT.value: "absent",
    AttendanceStatus.HALF_DAY.value: "half_day",
    AttendanceStatus.LEAVE.value: "leave",
    AttendanceStatus.HOLIDAY.value: "holiday",
    AttendanceStatus.OFF.value: "off",
}


def find_record(
    employee_id: str,
    month: str,
    year: int,
    records: Iterable[AttendanceRecord],
) -> Optional[AttendanceRecord]:
    for r in records:
        if r.employee_id == employee_id and r.month == month and r.year == year:
            return r
    return None


def summarize_record(record: Optional[AttendanceRecord]) -> AttendanceSummary:
    """Count statuses in one record; ``None`` is the all-zero summary."""
    if record is None:
        return AttendanceSummary()

    counts = dict.fromkeys(_COUNTER_FOR_STATUS.values(), 0)
    for status in record.days.values():
        counter = _COUNTER_FOR_STATUS.get(status)
        if counter:
            counts[counter] += 1
    return AttendanceSummary(**counts)


def summarize_attendance(
    employee_id: str,
    month: str,
    year: int,
    records: Iterable[AttendanceRecord],
) -> AttendanceSummary:
    return summarize_record(find_record(employee_id, month, year, records))
