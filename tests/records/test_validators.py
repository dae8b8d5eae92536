import pytest

from hr_ledger.common.validators import require_month, require_year, to_number
from hr_ledger.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "value, expected",
    [
        ("1500", 1500.0),
        (" 2,500.50 ", 2500.5),
        (42, 42.0),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        (float("inf"), 0.0),
        (True, 0.0),
        ([1], 0.0),
    ],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_require_month_and_year():
    assert require_month("March") == "March"
    assert require_year("2025") == 2025
    with pytest.raises(ValidationError):
        require_month("march")
    with pytest.raises(ValidationError):
        require_year("twenty")
    with pytest.raises(ValidationError):
        require_year(12)
