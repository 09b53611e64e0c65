from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from .service import REPORT_NAMES


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/reports", methods=["GET"], endpoint="list_reports")
    def list_reports():
        return jsonify({"reports": list(REPORT_NAMES)})

    @app.route("/api/reports/<name>", methods=["GET"], endpoint="run_report")
    def run_report(name: str):
        """Read-only aggregate; optional ?collegeId= and (attendance-percent) ?eventId=."""
        return jsonify(service.run(name, request.args))
