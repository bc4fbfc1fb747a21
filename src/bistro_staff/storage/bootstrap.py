from __future__ import annotations

import logging
from typing import Any, Dict, List

from .connection import DBConfig, DatabaseConnection
from .mysql_backend import STATE_TABLE
from .state import AppState
from .store import StateStore

logger = logging.getLogger(__name__)

DEMO_STATE: Dict[str, Any] = {
    "employees": [
        {"id": "1", "name": "Prabhath@33", "email": "admin@bistro.com", "role": "admin", "jobType": "Manager",
         "profileImage": "/placeholder.svg", "hourlyRate": 25, "password": "admin123"},
        {"id": "2", "name": "Jane Smith", "email": "employee@bistro.com", "role": "employee", "jobType": "Waiter",
         "profileImage": "/placeholder.svg", "hourlyRate": 15, "password": "employee123"},
        {"id": "3", "name": "Mike Johnson", "email": "mike@bistro.com", "role": "employee", "jobType": "Chef",
         "profileImage": "/placeholder.svg", "hourlyRate": 20, "password": "mike123"},
        {"id": "4", "name": "Sarah Williams", "email": "sarah@bistro.com", "role": "employee", "jobType": "Bartender",
         "profileImage": "/placeholder.svg", "hourlyRate": 18, "password": "sarah123"},
    ],
    "shifts": [
        {"id": "shift-1", "employeeId": "2", "day": "Monday", "date": "2024-03-25", "startTime": "09:00",
         "endTime": "17:00", "type": "Morning", "status": "completed"},
        {"id": "shift-2", "employeeId": "3", "day": "Monday", "date": "2024-03-25", "startTime": "10:00",
         "endTime": "18:00", "type": "Morning", "status": "completed"},
        {"id": "shift-3", "employeeId": "4", "day": "Monday", "date": "2024-03-25", "startTime": "16:00",
         "endTime": "00:00", "type": "Evening", "status": "scheduled"},
    ],
    "leaveRequests": [
        {"id": "leave-1", "employeeId": "2", "startDate": "2024-04-10", "endDate": "2024-04-15", "type": "vacation",
         "reason": "Family vacation", "status": "pending", "requestDate": "2024-03-20"},
        {"id": "leave-2", "employeeId": "3", "startDate": "2024-03-28", "endDate": "2024-03-30", "type": "sick",
         "reason": "Flu", "status": "approved", "requestDate": "2024-03-15", "responseDate": "2024-03-16",
         "responseNote": "Get well soon"},
    ],
    "attendance": [
        {"id": "att-1", "employeeId": "2", "date": "2024-03-24", "checkIn": "08:55", "checkOut": "17:05",
         "status": "present", "hoursWorked": 8.17},
        {"id": "att-2", "employeeId": "3", "date": "2024-03-24", "checkIn": "09:50", "checkOut": "18:10",
         "status": "present", "hoursWorked": 8.33},
        {"id": "att-3", "employeeId": "4", "date": "2024-03-24", "status": "absent"},
    ],
    "notifications": [],
    "notes": [],
}


def seed_demo_state(store: StateStore) -> bool:
    """Load the demo data set when the store has no employees yet.

    Returns True when data was written.
    """
    if store.view().employees:
        return False

    demo = AppState.from_payload(DEMO_STATE)
    with store.transaction() as state:
        for attr in ("employees", "shifts", "attendance", "leave_requests"):
            getattr(state, attr).update(getattr(demo, attr))
    logger.info("demo data seeded (%d employees)", len(demo.employees))
    return True


def ensure_database_exists(db_config: dict) -> None:
    config = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(config).connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{config.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict) -> None:
    ensure_database_exists(db_config)

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute(
            f"""
            CREATE TABLE IF NOT EXISTS {STATE_TABLE} (
                state_key VARCHAR(64) NOT NULL PRIMARY KEY,
                payload LONGTEXT NOT NULL,
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
            ) CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci
            """
        )
        conn.commit()
    finally:
        conn.close()
    logger.info("schema ready (%s)", STATE_TABLE)


def list_tables(db_config: dict) -> List[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
