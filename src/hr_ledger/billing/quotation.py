from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import to_number

ESI_RATE = 0.0325
PF_RATE = 0.13
RELIEVER_FACTOR = 1 / 6
QUOTATION_GST_RATE = 0.18


@dataclass(frozen=True)
class ManpowerQuotation:
    base_salary: float
    esi: float
    pf: float
    reliever_charge: float
    subtotal: float
    gst: float
    grand_total: float

    def to_json(self) -> dict:
        return {
            "baseSalary": self.base_salary,
            "esi": self.esi,
            "pf": self.pf,
            "relieverCharge": self.reliever_charge,
            "subtotal": self.subtotal,
            "gst": self.gst,
            "grandTotal": self.grand_total,
        }


def quote_manpower(base_salary) -> ManpowerQuotation:
    """Monthly billing for one deployed employee; each line rounded to paise."""
    base = to_number(base_salary)
    esi = round(base * ESI_RATE, 2)
    pf = round(base * PF_RATE, 2)
    reliever = round(base * RELIEVER_FACTOR, 2)
    subtotal = round(base + esi + pf + reliever, 2)
    gst = round(subtotal * QUOTATION_GST_RATE, 2)
    return ManpowerQuotation(
        base_salary=base,
        esi=esi,
        pf=pf,
        reliever_charge=reliever,
        subtotal=subtotal,
        gst=gst,
        grand_total=round(subtotal + gst, 2),
    )
