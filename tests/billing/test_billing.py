import pytest

from hr_ledger.billing.gst import InvoiceItem, amount_in_words, invoice_totals
from hr_ledger.billing.quotation import quote_manpower


def test_gst_exclusive():
    t = invoice_totals([InvoiceItem("Security services", qty=1, rate=1000)], gst_rate=18)
    assert t.sub_total == 1000
    assert t.tax_amount == pytest.approx(180)
    assert t.total_amount == pytest.approx(1180)


def test_gst_inclusive_backs_out_tax():
    t = invoice_totals([InvoiceItem("Security services", qty=2, rate=590)], gst_rate=18, inclusive=True)
    assert t.total_amount == 1180
    assert t.sub_total == pytest.approx(1000)
    assert t.tax_amount == pytest.approx(180)


def test_blank_rates_count_as_zero():
    t = invoice_totals([InvoiceItem("A", qty="", rate="abc"), InvoiceItem("B", qty=3, rate="100")])
    assert t.sub_total == 300


@pytest.mark.parametrize(
    "amount, words",
    [
        (1250, "ONE THOUSAND TWO HUNDRED AND FIFTY ONLY"),
        (15, "FIFTEEN ONLY"),
        (100000, "ONE LAKH ONLY"),
        (12345678, "ONE CRORE TWENTY THREE LAKH FORTY FIVE THOUSAND SIX HUNDRED AND SEVENTY EIGHT ONLY"),
        (0, ""),
        (1_000_000_000, "AMOUNT TOO LARGE"),
    ],
)
def test_amount_in_words(amount, words):
    assert amount_in_words(amount) == words


def test_manpower_quotation():
    q = quote_manpower(12000)
    assert q.esi == 390
    assert q.pf == 1560
    assert q.reliever_charge == 2000
    assert q.subtotal == 15950
    assert q.gst == 2871
    assert q.grand_total == 18821
