from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_enum
from ..container import Container
from ..core.enums import ShiftStatus
from ..core.exceptions import NotFoundError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, is_admin, login_required
from ..web.responses import json_body, list_response, require_field, result_response
from .model import Shift

# Request keys an admin may change on an existing shift.
_UPDATABLE = ("employeeId", "date", "day", "startTime", "endTime", "type", "status")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="list_shifts")
    @login_required
    def list_shifts():
        employee_id = request.args.get("employeeId")
        if not is_admin():
            employee_id = current_user_id()
        shifts = container.shift_service.get_shifts(request.args.get("date"), employee_id)
        return list_response(shifts)

    @app.route("/api/shifts/<shift_id>", methods=["GET"], endpoint="get_shift")
    @login_required
    def get_shift(shift_id: str):
        data = container.attendance_service.shift_overlay(shift_id)
        if data is None:
            raise NotFoundError("Shift not found")
        ensure_self_or_admin(data["employeeId"])
        return data

    @app.route("/api/shifts", methods=["POST"], endpoint="create_shift")
    @admin_required
    def create_shift():
        data = json_body()
        result = container.shift_service.create_shift(
            employee_id=require_field(data, "employeeId"),
            work_date=parse_iso_date(require_field(data, "date")),
            start_time=require_field(data, "startTime"),
            end_time=require_field(data, "endTime"),
            shift_type=data.get("type") or "Morning",
            day=data.get("day"),
            allow_overlap=bool(data.get("allowOverlap", False)),
        )
        return result_response(result, created=True)

    @app.route("/api/shifts/<shift_id>", methods=["PUT"], endpoint="update_shift")
    @admin_required
    def update_shift(shift_id: str):
        current = container.shift_service.get_shift(shift_id)
        if not current:
            raise NotFoundError("Shift not found")

        data = json_body()
        merged = current.to_dict()
        merged.update({k: data[k] for k in _UPDATABLE if k in data})
        if "status" in data:
            require_enum(ShiftStatus, data["status"], "Status")
        if "date" in data and "day" not in data:
            # Let the weekday follow the new date.
            merged["day"] = None

        result = container.shift_service.update_shift(
            Shift.from_dict(merged), allow_overlap=bool(data.get("allowOverlap", False))
        )
        return result_response(result)

    @app.route("/api/shifts/<shift_id>", methods=["DELETE"], endpoint="delete_shift")
    @admin_required
    def delete_shift(shift_id: str):
        return result_response(container.shift_service.delete_shift(shift_id))
