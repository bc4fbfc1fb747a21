from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def current_user_id() -> Optional[str]:
    return session.get("user_id")


def is_admin() -> bool:
    return session.get("role") == Role.ADMIN.value


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Login required"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Login required"}), 401

        if session.get("role") != Role.ADMIN.value:
            return jsonify({"error": "Admin access required"}), 403

        return view(*args, **kwargs)

    return wrapper


def ensure_self_or_admin(employee_id: str) -> None:
    """Employees may only touch their own data; admins may touch anyone's."""
    if is_admin():
        return
    if str(employee_id) != str(current_user_id()):
        raise AuthorizationError("You can only access your own records")
