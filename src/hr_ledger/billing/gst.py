from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..common.validators import to_number
from ..core.constants import DEFAULT_GST_RATE

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")


@dataclass(frozen=True)
class InvoiceItem:
    particulars: str
    qty: float = 1
    rate: float = 0.0

    @property
    def amount(self) -> float:
        return to_number(self.qty) * to_number(self.rate)


@dataclass(frozen=True)
class InvoiceTotals:
    sub_total: float
    tax_amount: float
    total_amount: float

    def to_json(self) -> dict:
        return {"subTotal": self.sub_total, "taxAmount": self.tax_amount, "totalAmount": self.total_amount}


def invoice_totals(items: Iterable[InvoiceItem], *, gst_rate: float = DEFAULT_GST_RATE, inclusive: bool = False) -> InvoiceTotals:
    """Sub total, GST and grand total for a bill.

    With ``inclusive`` the item rates already contain GST and the tax is
    backed out of the sum; otherwise GST is added on top.
    """
    raw = sum(item.amount for item in items)
    rate = to_number(gst_rate)
    if inclusive:
        total = raw
        sub_total = total / (1 + rate / 100)
        tax = total - sub_total
    else:
        sub_total = raw
        tax = sub_total * rate / 100
        total = sub_total + tax
    return InvoiceTotals(sub_total=sub_total, tax_amount=tax, total_amount=total)


def _two_digits(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    return f"{_TENS[tens]} {_ONES[ones]}".strip()


def amount_in_words(amount: float) -> str:
    """Indian-system words (crore/lakh/thousand/hundred), upper case."""
    n = int(round(to_number(amount)))
    if n < 0:
        n = -n
    if n > 999_999_999:
        return "AMOUNT TOO LARGE"
    if n == 0:
        return ""

    crore, rest = divmod(n, 10_000_000)
    lakh, rest = divmod(rest, 100_000)
    thousand, rest = divmod(rest, 1000)
    hundred, rest = divmod(rest, 100)

    parts = []
    if crore:
        parts.append(f"{_two_digits(crore)} crore")
    if lakh:
        parts.append(f"{_two_digits(lakh)} lakh")
    if thousand:
        parts.append(f"{_two_digits(thousand)} thousand")
    if hundred:
        parts.append(f"{_ONES[hundred]} hundred")
    if rest:
        if parts:
            parts.append("and")
        parts.append(_two_digits(rest))
    parts.append("only")
    return " ".join(parts).upper()
