# storage/repos.py
# -*- coding: utf-8 -*-

import time
from typing import Dict, Optional

from storage.db import Database


def _now_ts() -> int:
    return int(time.time())


class PrefsRepo:
    """Key/value UI preferences (theme, ...)."""

    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM prefs WHERE key=?", (key,)
        ).fetchone()
        return row["value"] if row else None

    def all(self) -> Dict[str, str]:
        rows = self.db.conn.execute("SELECT key, value FROM prefs ORDER BY key")
        return {r["key"]: r["value"] for r in rows}

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO prefs(key, value, updated_at) VALUES(?, ?, ?)
            ON CONFLICT(key) DO UPDATE
              SET value=excluded.value, updated_at=excluded.updated_at
            """,
            (key, value, _now_ts()),
        )
        self.db.conn.commit()

    def updated_at(self, key: str) -> Optional[int]:
        row = self.db.conn.execute(
            "SELECT updated_at FROM prefs WHERE key=?", (key,)
        ).fetchone()
        return int(row["updated_at"]) if row else None

    def delete(self, key: str) -> None:
        self.db.conn.execute("DELETE FROM prefs WHERE key=?", (key,))
        self.db.conn.commit()
