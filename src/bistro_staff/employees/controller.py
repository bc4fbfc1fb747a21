from __future__ import annotations

from flask import Flask, jsonify, session

from ..container import Container
from ..core.enums import Role
from ..core.exceptions import NotFoundError
from ..web.auth import admin_required, current_user_id, ensure_self_or_admin, is_admin, login_required
from ..web.responses import entity_response, json_body, list_response, require_field, result_response


def register(app: Flask, container: Container) -> None:
    def _start_session(employee) -> None:
        session.clear()
        session["user_id"] = employee.employee_id
        session["name"] = employee.name
        session["role"] = employee.role.value

    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        employee = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        _start_session(employee)
        return entity_response(employee)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        employee = container.auth_service.signup(
            name=data.get("name", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            job_type=data.get("jobType", ""),
        )
        _start_session(employee)
        return entity_response(employee, 201)

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        employee = container.employee_service.get_employee(current_user_id())
        if not employee:
            session.clear()
            raise NotFoundError("Employee not found")
        return entity_response(employee)

    @app.route("/api/auth/password", methods=["PUT"], endpoint="update_password")
    @login_required
    def update_password():
        data = json_body()
        container.auth_service.update_password(
            current_user_id(),
            data.get("oldPassword", ""),
            require_field(data, "newPassword"),
        )
        return jsonify({"success": True})

    @app.route("/api/auth/email", methods=["PUT"], endpoint="update_email")
    @login_required
    def update_email():
        data = json_body()
        employee = container.auth_service.update_email(
            current_user_id(), require_field(data, "email"), data.get("password", "")
        )
        return entity_response(employee)

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @admin_required
    def list_employees():
        return list_response(container.employee_service.get_employees())

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @admin_required
    def add_employee():
        data = json_body()
        employee = container.employee_service.add_employee(
            name=require_field(data, "name"),
            email=require_field(data, "email"),
            role=data.get("role") or Role.EMPLOYEE.value,
            job_type=data.get("jobType"),
            hourly_rate=data.get("hourlyRate"),
            profile_image=data.get("profileImage"),
            password=data.get("password"),
        )
        return entity_response(employee, 201)

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_id: str):
        ensure_self_or_admin(employee_id)
        employee = container.employee_service.get_employee(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return entity_response(employee)

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="update_employee")
    @login_required
    def update_employee(employee_id: str):
        ensure_self_or_admin(employee_id)
        data = json_body()
        if is_admin():
            result = container.employee_service.update_employee(employee_id, data)
        else:
            result = container.employee_service.update_profile(employee_id, data)
        return result_response(result)

    @app.route("/api/employees/<employee_id>/image", methods=["PUT"], endpoint="update_profile_image")
    @login_required
    def update_profile_image(employee_id: str):
        ensure_self_or_admin(employee_id)
        data = json_body()
        result = container.employee_service.update_profile_image(employee_id, require_field(data, "profileImage"))
        return result_response(result)

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        return result_response(container.employee_service.delete_employee(employee_id))
