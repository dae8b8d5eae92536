from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..core.enums import HolidayType
from ..core.exceptions import ValidationError
from ..records.store import RecordStore
from .model import Holiday


class HolidayService:
    def __init__(self, store: RecordStore):
        self._store = store

    def add(self, *, date: str, reason: str, type: HolidayType = HolidayType.COMPANY) -> Holiday:
        date = require_non_empty(date, "Date")
        reason = require_non_empty(reason, "Reason")
        try:
            parse_iso_date(date)
        except ValueError:
            raise ValidationError("Date must be YYYY-MM-DD")

        holiday = Holiday(date=date, reason=reason, type=type)
        self._store.set_holidays([*self._store.get_holidays(), holiday])
        return holiday

    def list_all(self, year: Optional[int] = None) -> list[Holiday]:
        items = self._store.get_holidays()
        if year is not None:
            items = [h for h in items if h.date.startswith(f"{int(year):04d}-")]
        return sorted(items, key=lambda h: h.date)

    def find(self, iso_date: str) -> Optional[Holiday]:
        for h in self._store.get_holidays():
            if h.date.startswith(iso_date):
                return h
        return None
