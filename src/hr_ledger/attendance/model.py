from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class PunchTimes:
    check_in: str = ""
    check_out: str = ""


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's day-status map for one calendar month.

    Days missing from ``days`` are unset, not absent.
    """

    employee_id: str
    month: str
    year: int
    days: dict[int, str] = field(default_factory=dict)
    times: dict[int, PunchTimes] = field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str, int]:
        return (self.employee_id, self.month, self.year)

    def status_on(self, day: int) -> str:
        return self.days.get(int(day), AttendanceStatus.UNSET.value)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "AttendanceRecord":
        days = {}
        for day, status in (data.get("days") or {}).items():
            try:
                days[int(day)] = "" if status is None else str(status)
            except (TypeError, ValueError):
                continue

        times = {}
        for day, punch in (data.get("times") or {}).items():
            try:
                times[int(day)] = PunchTimes(
                    check_in=str((punch or {}).get("in", "")),
                    check_out=str((punch or {}).get("out", "")),
                )
            except (TypeError, ValueError, AttributeError):
                continue

        return cls(
            employee_id=str(data.get("employeeId", "")),
            month=str(data.get("month", "")),
            year=int(data.get("year") or 0),
            days=days,
            times=times,
        )

    def to_json(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "employeeId": self.employee_id,
            "month": self.month,
            "year": self.year,
            "days": {str(d): s for d, s in sorted(self.days.items())},
        }
        if self.times:
            out["times"] = {
                str(d): {"in": t.check_in, "out": t.check_out} for d, t in sorted(self.times.items())
            }
        return out


@dataclass(frozen=True)
class AttendanceSummary:
    """Status counts for one employee-month."""

    present: int = 0
    absent: int = 0
    half_day: int = 0
    leave: int = 0
    holiday: int = 0
    off: int = 0

    @property
    def total_working(self) -> float:
        # Leave, holiday and off days are paid as worked days.
        return self.present + 0.5 * self.half_day + self.leave + self.holiday + self.off

    @property
    def total_marked(self) -> int:
        return self.present + self.absent + self.half_day + self.leave + self.holiday + self.off

    def to_json(self) -> dict[str, Any]:
        return {
            "present": self.present,
            "absent": self.absent,
            "halfDay": self.half_day,
            "leave": self.leave,
            "holiday": self.holiday,
            "off": self.off,
            "totalWorking": self.total_working,
        }
