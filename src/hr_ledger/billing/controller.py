from __future__ import annotations

from flask import Flask

from ..common.http import json_api, ok, payload
from ..common.validators import to_number
from ..container import Container
from ..core.constants import DEFAULT_GST_RATE
from .gst import InvoiceItem, amount_in_words, invoice_totals
from .quotation import quote_manpower


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/gst", methods=["POST"], endpoint="gst_invoice")
    @json_api
    def gst_invoice():
        data = payload()
        items = [
            InvoiceItem(
                particulars=str(i.get("particulars", "")),
                qty=to_number(i.get("qty")),
                rate=to_number(i.get("rate")),
            )
            for i in data.get("items") or []
            if isinstance(i, dict)
        ]
        rate = data.get("gstRate")
        totals = invoice_totals(
            items,
            gst_rate=DEFAULT_GST_RATE if rate is None else to_number(rate),
            inclusive=bool(data.get("isGstInclusive")),
        )
        return ok({**totals.to_json(), "amountInWords": amount_in_words(totals.total_amount)})

    @app.route("/api/billing/quotation", methods=["POST"], endpoint="manpower_quotation")
    @json_api
    def manpower_quotation():
        data = payload()
        salary = data.get("salary")
        if salary is None and data.get("employeeId"):
            salary = container.employee_service.get(data["employeeId"]).basic_salary
        return ok(quote_manpower(salary).to_json())
