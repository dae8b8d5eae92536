from __future__ import annotations

import math
from typing import Any

from ..core.constants import MONTHS
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_month(value: str) -> str:
    if value not in MONTHS:
        raise ValidationError(f"Unknown month: {value!r}")
    return value


def require_year(value: Any) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid year: {value!r}")
    if year < 1900 or year > 9999:
        raise ValidationError(f"Invalid year: {value!r}")
    return year


def to_number(value: Any) -> float:
    """Coerce form input to a finite float.

    Blank, non-numeric, NaN and infinite values all become 0.0 so they can
    never leak into payroll totals.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number
