from __future__ import annotations

import pytest

from bistro_staff.main import create_app


@pytest.fixture
def app():
    return create_app("bistro_staff.config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email="admin@bistro.com", password="admin123"):
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200
    return resp.get_json()


def test_login_returns_public_profile(client):
    data = _login(client)

    assert data["id"] == "1"
    assert data["role"] == "admin"
    assert "passwordHash" not in data


def test_login_with_bad_password(client):
    resp = client.post("/api/auth/login", json={"email": "admin@bistro.com", "password": "x"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_routes_require_login(client):
    assert client.get("/api/employees").status_code == 401
    assert client.get("/api/auth/me").status_code == 401


def test_admin_routes_reject_employees(client):
    _login(client, "employee@bistro.com", "employee123")

    assert client.get("/api/employees").status_code == 403
    assert client.get("/api/employees/3").status_code == 403
    assert client.get("/api/employees/2").status_code == 200


def test_admin_lists_employees(client):
    _login(client)

    resp = client.get("/api/employees")

    assert resp.status_code == 200
    assert len(resp.get_json()) == 4
    assert all("passwordHash" not in e for e in resp.get_json())


def test_signup_then_me(client):
    resp = client.post(
        "/api/auth/signup",
        json={"name": "Tom Lee", "email": "tom@bistro.com", "password": "secret1", "jobType": "Host"},
    )
    assert resp.status_code == 201

    me = client.get("/api/auth/me").get_json()
    assert me["email"] == "tom@bistro.com"
    assert me["hourlyRate"] == 15.0


def test_signup_with_taken_email(client):
    resp = client.post(
        "/api/auth/signup",
        json={"name": "Jane", "email": "employee@bistro.com", "password": "secret1", "jobType": "Waiter"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Email already in use"


def test_ending_unstarted_shift_is_conflict(client):
    _login(client)

    resp = client.post("/api/attendance/end", json={"employeeId": "4", "shiftId": "shift-3"})

    assert resp.status_code == 409
    assert resp.get_json()["outcome"] == "not_started"


def test_employee_cannot_clock_for_someone_else(client):
    _login(client, "employee@bistro.com", "employee123")

    resp = client.post("/api/attendance/start", json={"employeeId": "3", "shiftId": "shift-2"})

    assert resp.status_code == 403


def test_employee_cannot_clock_into_another_employees_shift(client):
    _login(client, "employee@bistro.com", "employee123")

    resp = client.post("/api/attendance/start", json={"shiftId": "shift-3"})

    assert resp.status_code == 404


def test_leave_approval_flow(client):
    _login(client)

    first = client.post("/api/leaves/leave-1/approve", json={"note": "Enjoy"})
    second = client.post("/api/leaves/leave-1/approve", json={})

    assert first.status_code == 200
    assert first.get_json()["data"]["status"] == "approved"
    assert second.status_code == 409
    assert second.get_json()["outcome"] == "already_decided"
    assert client.post("/api/leaves/leave-x/reject", json={}).status_code == 404


def test_employee_requests_leave(client):
    _login(client, "employee@bistro.com", "employee123")

    bad = client.post(
        "/api/leaves", json={"startDate": "2024-05-03", "endDate": "2024-05-01", "type": "sick"}
    )
    good = client.post(
        "/api/leaves", json={"startDate": "2024-05-01", "endDate": "2024-05-03", "type": "sick", "reason": "Flu"}
    )

    assert bad.status_code == 409
    assert bad.get_json()["outcome"] == "invalid_date_range"
    assert good.status_code == 201
    mine = client.get("/api/leaves").get_json()
    assert {r["employeeId"] for r in mine} == {"2"}


def test_create_shift_conflict_and_notification(client):
    _login(client)

    clash = client.post(
        "/api/shifts", json={"employeeId": "2", "date": "2024-03-25", "startTime": "10:00", "endTime": "12:00"}
    )
    created = client.post(
        "/api/shifts", json={"employeeId": "2", "date": "2024-03-26", "startTime": "10:00", "endTime": "12:00"}
    )

    assert clash.status_code == 409
    assert created.status_code == 201

    client.post("/api/auth/logout")
    _login(client, "employee@bistro.com", "employee123")
    notes = client.get("/api/notifications").get_json()
    assert notes[0]["title"] == "Shift Assignment"


def test_shift_listing_by_date(client):
    _login(client)

    resp = client.get("/api/shifts?date=2024-03-25")

    assert [s["id"] for s in resp.get_json()] == ["shift-1", "shift-2", "shift-3"]
    assert client.get("/api/shifts?date=not-a-date").status_code == 400


def test_bonus_eligibility(client):
    _login(client)

    resp = client.get("/api/bonus/eligibility?employeeId=3")

    assert resp.get_json() == {"eligible": True, "bonusPercentage": 7, "leavesUsed": 1}


def test_report_rejects_unknown_period(client):
    _login(client)

    assert client.get("/api/reports/attendance?period=decade").status_code == 400
    assert client.get("/api/reports/attendance?period=all").status_code == 200


def test_payroll_generate_and_process(client):
    _login(client)

    items = client.post("/api/payroll/generate", json={"month": "2024-03"}).get_json()
    jane = next(i for i in items if i["employeeId"] == "2")

    assert client.post(f"/api/payroll/{jane['id']}/pay").status_code == 409
    assert client.post(f"/api/payroll/{jane['id']}/process").status_code == 200
    assert client.post(f"/api/payroll/{jane['id']}/pay").get_json()["data"]["status"] == "paid"


def test_notes_for_self(client):
    _login(client, "employee@bistro.com", "employee123")

    created = client.post("/api/notes", json={"content": "Swap requested"})
    empty = client.post("/api/notes", json={"content": ""})

    assert created.status_code == 201
    assert created.get_json()["category"] == "general"
    assert empty.status_code == 400
    assert len(client.get("/api/notes").get_json()) == 1
