from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..container import Container
from ..core.exceptions import NotFoundError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, is_admin, login_required
from ..web.responses import entity_response, json_body, list_response, require_field, result_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="list_payroll")
    @login_required
    def list_payroll():
        items = container.payroll_service.get_payroll(request.args.get("month") or now_local().strftime("%Y-%m"))
        if not is_admin():
            items = [i for i in items if i.employee_id == current_user_id()]
        return list_response(items)

    @app.route("/api/payroll/<payroll_id>", methods=["GET"], endpoint="get_payroll_item")
    @login_required
    def get_payroll_item(payroll_id: str):
        item = container.payroll_service.get_payroll_item(payroll_id)
        if not item:
            raise NotFoundError("Payroll item not found")
        ensure_self_or_admin(item.employee_id)
        return entity_response(item)

    @app.route("/api/payroll/generate", methods=["POST"], endpoint="generate_payroll")
    @admin_required
    def generate_payroll():
        data = json_body()
        items = container.payroll_service.generate_payroll(require_field(data, "month"))
        return list_response(items)

    @app.route("/api/payroll/<payroll_id>/process", methods=["POST"], endpoint="process_payroll")
    @admin_required
    def process_payroll(payroll_id: str):
        return result_response(container.payroll_service.process_payroll(payroll_id))

    @app.route("/api/payroll/<payroll_id>/pay", methods=["POST"], endpoint="pay_payroll")
    @admin_required
    def pay_payroll(payroll_id: str):
        return result_response(container.payroll_service.pay_payroll(payroll_id))
