from __future__ import annotations

from flask import Flask, request

from ..container import Container
from ..web.auth import current_user_id, ensure_self_or_admin, login_required
from ..web.responses import entity_response, json_body, list_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notes", methods=["POST"], endpoint="add_note")
    @login_required
    def add_note():
        data = json_body()
        employee_id = data.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        note = container.note_service.add_note(employee_id, data.get("content", ""), data.get("category"))
        return entity_response(note, 201)

    @app.route("/api/notes", methods=["GET"], endpoint="list_notes")
    @login_required
    def list_notes():
        employee_id = request.args.get("employeeId") or current_user_id()
        ensure_self_or_admin(employee_id)
        return list_response(container.note_service.get_notes_by_employee(employee_id))
