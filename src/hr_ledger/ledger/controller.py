from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.http import json_api, ok, payload
from ..container import Container
from ..core.constants import DEFAULT_MONTH
from ..core.enums import PaymentMode, TransactionType
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    svc = container.ledger_service

    @app.route("/api/transactions", methods=["GET"], endpoint="list_transactions")
    @json_api
    def list_transactions():
        items = svc.list_all(request.args.get("employeeId") or None)
        return ok(
            {
                "transactions": [t.to_json() for t in items],
                "totalDisbursed": svc.total_disbursed(),
                "nextVoucherNo": svc.next_voucher_no(),
            }
        )

    @app.route("/api/transactions", methods=["POST"], endpoint="record_payment")
    @json_api
    def record_payment():
        data = payload()
        try:
            tx_type = TransactionType(data.get("type") or TransactionType.SALARY.value)
            mode = PaymentMode(data.get("mode") or PaymentMode.CASH.value)
        except ValueError as e:
            raise ValidationError(str(e))

        tx = svc.record_payment(
            employee_id=data.get("employeeId", ""),
            amount=data.get("amount"),
            voucher_no=data.get("voucherNo", ""),
            month=data.get("month") or DEFAULT_MONTH,
            year=data.get("year") or date.today().year,
            date=data.get("date") or None,
            type=tx_type,
            mode=mode,
            reference_id=data.get("referenceId"),
        )
        app.logger.info("payment %s recorded for %s (%.2f)", tx.voucher_no, tx.employee_id, tx.amount)
        return ok(tx.to_json(), 201)
