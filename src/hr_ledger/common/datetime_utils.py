from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def display_date(value: date) -> str:
    """DD/MM/YYYY, the format used for status change and leaving dates."""
    return value.strftime("%d/%m/%Y")


def month_number(month: str) -> int:
    try:
        return MONTHS.index(month) + 1
    except ValueError:
        raise ValidationError(f"Unknown month: {month!r}")


def days_in_month(month: str, year: int) -> int:
    return calendar.monthrange(int(year), month_number(month))[1]
