from __future__ import annotations

import json
from typing import Any, Dict

from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

STATE_TABLE = "app_state"


class MySQLStateBackend:
    """Persist each top-level key as one row of ``app_state``.

    All keys are written in a single transaction.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Dict[str, Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT state_key, payload FROM {STATE_TABLE}")
            rows = fetchall(cur)
            return {r["state_key"]: json.loads(r["payload"]) for r in rows}

    def save(self, payload: Dict[str, Any]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            for key, value in payload.items():
                cur.execute(
                    f"""
                    INSERT INTO {STATE_TABLE} (state_key, payload)
                    VALUES (%s, %s)
                    ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                    """,
                    (key, json.dumps(value, ensure_ascii=False)),
                )
