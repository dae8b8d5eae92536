from __future__ import annotations

from flask import Flask, request

from ..common.http import arg_int, json_api, ok
from ..container import Container
from ..core.exceptions import NotFoundError
from .router import ViewContext, ViewRouter, ViewType
from .screens import VIEW_HANDLERS


def register(app: Flask, container: Container) -> None:
    router = ViewRouter(VIEW_HANDLERS, ViewContext(container=container))

    @app.route("/views", endpoint="list_views")
    @json_api
    def list_views():
        return ok({"current": router.current.value, "views": [v.value for v in ViewType]})

    @app.route("/views/<name>", endpoint="show_view")
    @json_api
    def show_view(name: str):
        try:
            view = ViewType(name)
        except ValueError:
            raise NotFoundError(f"Unknown screen: {name}")

        year = arg_int("year")
        params = request.args.to_dict()
        params.pop("year", None)
        return ok(
            router.navigate(
                view,
                year=year,
                month=params.pop("month", None),
                employee_id=params.pop("employeeId", None),
                **params,
            )
        )
