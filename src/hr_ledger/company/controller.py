from __future__ import annotations

from flask import Flask

from ..common.http import json_api, ok, payload
from ..container import Container


def register(app: Flask, container: Container) -> None:
    svc = container.company_service

    @app.route("/api/company", methods=["GET"], endpoint="get_company")
    @json_api
    def get_company():
        return ok(svc.get().to_json())

    @app.route("/api/company", methods=["PUT", "POST"], endpoint="update_company")
    @json_api
    def update_company():
        return ok(svc.update(payload()).to_json())
