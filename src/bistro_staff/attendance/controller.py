from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_enum
from ..container import Container
from ..core.enums import AttendanceStatus, ReportPeriod
from ..core.exceptions import NotFoundError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, is_admin, login_required
from ..web.responses import json_body, list_response, optional_date, require_field, result_response, to_json
from .model import AttendanceRecord

_UPDATABLE = ("status", "startTime", "endTime", "duration", "notes", "isLate", "lateMinutes", "overtime")


def register(app: Flask, container: Container) -> None:
    def _target_employee(data) -> str:
        # Admins may clock on behalf of someone else.
        employee_id = data.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        return str(employee_id)

    @app.route("/api/attendance/start", methods=["POST"], endpoint="start_shift")
    @login_required
    def start_shift():
        data = json_body()
        result = container.attendance_service.start_shift(
            _target_employee(data),
            optional_date(data.get("date")),
            data.get("notes"),
            shift_id=data.get("shiftId"),
        )
        return result_response(result)

    @app.route("/api/attendance/end", methods=["POST"], endpoint="end_shift")
    @login_required
    def end_shift():
        data = json_body()
        result = container.attendance_service.end_shift(
            _target_employee(data),
            optional_date(data.get("date")),
            data.get("notes"),
            shift_id=data.get("shiftId"),
        )
        return result_response(result)

    @app.route("/api/attendance/absent", methods=["POST"], endpoint="mark_absent")
    @admin_required
    def mark_absent():
        data = json_body()
        result = container.attendance_service.mark_absent(
            require_field(data, "employeeId"),
            parse_iso_date(require_field(data, "date")),
            data.get("notes"),
        )
        return result_response(result)

    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    @login_required
    def list_attendance():
        employee_id = request.args.get("employeeId")
        work_date = optional_date(request.args.get("date"))
        if not is_admin():
            employee_id = current_user_id()

        if employee_id:
            records = container.attendance_service.get_attendances_by_employee(employee_id)
            if work_date:
                records = [r for r in records if r.work_date == work_date]
        elif work_date:
            records = container.attendance_service.get_attendances_by_date(work_date)
        else:
            records = container.attendance_repo.list_all()

        records = sorted(records, key=lambda r: (r.work_date, r.employee_id))
        return list_response(records)

    @app.route("/api/attendance/current", methods=["GET"], endpoint="current_shift")
    @login_required
    def current_shift():
        employee_id = request.args.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        shift = container.attendance_service.get_current_shift(employee_id, optional_date(request.args.get("date")))
        return jsonify(to_json(shift))

    @app.route("/api/attendance/<attendance_id>", methods=["PUT"], endpoint="update_attendance")
    @admin_required
    def update_attendance(attendance_id: str):
        current = container.attendance_repo.get_by_id(attendance_id)
        if not current:
            raise NotFoundError("Attendance record not found")

        data = json_body()
        if "status" in data:
            require_enum(AttendanceStatus, data["status"], "Status")
        merged = current.to_dict()
        merged.update({k: data[k] for k in _UPDATABLE if k in data})
        return result_response(container.attendance_service.update_attendance(AttendanceRecord.from_dict(merged)))

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @login_required
    def attendance_report():
        employee_id = request.args.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        period = request.args.get("period") or ReportPeriod.MONTH.value
        report = container.attendance_service.get_attendance_report(employee_id, period)
        return jsonify(report.to_dict())
