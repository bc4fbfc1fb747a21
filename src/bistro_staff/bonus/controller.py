from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, login_required
from ..web.responses import json_body, list_response, require_field, result_response


def _year_arg(value):
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Year must be a number")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/bonus/eligibility", methods=["GET"], endpoint="bonus_eligibility")
    @login_required
    def bonus_eligibility():
        employee_id = request.args.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        result = container.bonus_service.calculate_bonus_eligibility(employee_id, _year_arg(request.args.get("year")))
        return jsonify(result.to_dict())

    @app.route("/api/bonus/eligible", methods=["GET"], endpoint="bonus_eligible_employees")
    @admin_required
    def bonus_eligible_employees():
        rows = container.bonus_service.get_bonus_eligible_employees(
            _year_arg(request.args.get("year")), request.args.get("employeeId")
        )
        return jsonify([{"employeeId": r["employeeId"], "report": r["report"].to_dict()} for r in rows])

    @app.route("/api/bonus", methods=["POST"], endpoint="apply_bonus")
    @admin_required
    def apply_bonus():
        data = json_body()
        try:
            amount = float(require_field(data, "amount"))
        except (TypeError, ValueError):
            raise ValidationError("Amount must be a number")
        result = container.bonus_service.apply_bonus(
            require_field(data, "employeeId"), _year_arg(require_field(data, "year")), amount
        )
        return result_response(result, created=True)

    @app.route("/api/bonus/awards", methods=["GET"], endpoint="bonus_awards")
    @login_required
    def bonus_awards():
        employee_id = request.args.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        return list_response(container.bonus_service.list_awards(employee_id))
