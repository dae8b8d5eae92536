from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import HolidayType


@dataclass(frozen=True)
class Holiday:
    date: str
    reason: str
    type: HolidayType = HolidayType.COMPANY

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Holiday":
        try:
            h_type = HolidayType(data.get("type", HolidayType.COMPANY.value))
        except ValueError:
            h_type = HolidayType.COMPANY
        return cls(date=str(data.get("date", "")), reason=str(data.get("reason", "")), type=h_type)

    def to_json(self) -> dict[str, Any]:
        return {"date": self.date, "reason": self.reason, "type": self.type.value}
