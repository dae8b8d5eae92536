from __future__ import annotations

import io

from flask import Flask, send_file

from ..common.http import json_api
from ..container import Container
from .workbook import XLSX_MIMETYPE, export_filename, export_workbook


def register(app: Flask, container: Container) -> None:
    @app.route("/api/export", methods=["GET"], endpoint="export_excel")
    @json_api
    def export_excel():
        content = export_workbook(container.store.snapshot())
        filename = export_filename()
        app.logger.info("exported %s (%d bytes)", filename, len(content))
        return send_file(
            io.BytesIO(content),
            download_name=filename,
            as_attachment=True,
            mimetype=XLSX_MIMETYPE,
        )
