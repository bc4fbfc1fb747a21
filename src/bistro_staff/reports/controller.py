from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import ReportPeriod
from ..web.auth import admin_required


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/attendance", methods=["GET"], endpoint="attendance_reports")
    @admin_required
    def attendance_reports():
        period = request.args.get("period") or ReportPeriod.MONTH.value
        return jsonify(container.report_service.get_attendance_reports(period))
