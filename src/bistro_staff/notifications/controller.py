from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError
from ..web.auth import current_user_id, ensure_self_or_admin, login_required
from ..web.responses import list_response, result_response


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notifications", methods=["GET"], endpoint="list_notifications")
    @login_required
    def list_notifications():
        unread_only = request.args.get("unread", "").lower() in {"1", "true", "yes"}
        items = container.notification_service.list_for_user(current_user_id(), unread_only=unread_only)
        return list_response(items)

    @app.route("/api/notifications/<notification_id>/read", methods=["POST"], endpoint="mark_notification_read")
    @login_required
    def mark_notification_read(notification_id: str):
        notification = container.notifications_repo.get_by_id(notification_id)
        if not notification:
            raise NotFoundError("Notification not found")
        ensure_self_or_admin(notification.user_id)
        return result_response(container.notification_service.mark_notification_as_read(notification_id))

    @app.route("/api/notifications/read-all", methods=["POST"], endpoint="mark_all_notifications_read")
    @login_required
    def mark_all_notifications_read():
        count = container.notification_service.mark_all_as_read(current_user_id())
        return jsonify({"updated": count})
