from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..container import Container
from ..core.exceptions import NotFoundError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, is_admin, login_required
from ..web.responses import entity_response, json_body, list_response, require_field, result_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leaves", methods=["POST"], endpoint="request_leave")
    @login_required
    def request_leave():
        data = json_body()
        result = container.leave_service.request_leave(
            employee_id=current_user_id(),
            start_date=parse_iso_date(require_field(data, "startDate")),
            end_date=parse_iso_date(require_field(data, "endDate")),
            leave_type=data.get("type") or "other",
            reason=data.get("reason", ""),
        )
        return result_response(result, created=True)

    @app.route("/api/leaves", methods=["GET"], endpoint="list_leaves")
    @login_required
    def list_leaves():
        employee_id = request.args.get("employeeId")
        if not is_admin():
            employee_id = current_user_id()
        requests = container.leave_service.get_leave_requests(employee_id, request.args.get("status"))
        return list_response(requests)

    @app.route("/api/leaves/<request_id>", methods=["GET"], endpoint="get_leave")
    @login_required
    def get_leave(request_id: str):
        leave = container.leave_service.get_leave_request(request_id)
        if not leave:
            raise NotFoundError("Leave request not found")
        ensure_self_or_admin(leave.employee_id)
        return entity_response(leave)

    @app.route("/api/leaves/<request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(request_id: str):
        data = json_body()
        return result_response(container.leave_service.approve_leave(request_id, data.get("note")))

    @app.route("/api/leaves/<request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(request_id: str):
        data = json_body()
        return result_response(container.leave_service.reject_leave(request_id, data.get("note")))
