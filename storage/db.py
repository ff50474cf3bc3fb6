#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sqlite3

SCHEMA_VERSION = "1"


class Database:
    def __init__(self, db_path: str = "countdown.db"):
        self.db_path = db_path
        self.conn = sqlite3.connect(self.db_path)
        self.conn.row_factory = sqlite3.Row
        self._closed = False

    def _table_exists(self, name: str) -> bool:
        r = self.conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (name,),
        ).fetchone()
        return bool(r)

    def init_schema(self):
        cur = self.conn.cursor()

        # UI preferences only; the countdown itself is never stored
        cur.execute("""
            CREATE TABLE IF NOT EXISTS prefs (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at INTEGER NOT NULL
            );
        """)

        cur.execute("""
            CREATE TABLE IF NOT EXISTS schema_meta (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
        """)
        cur.execute(
            "INSERT OR IGNORE INTO schema_meta(key, value) VALUES('schema_version', ?)",
            (SCHEMA_VERSION,),
        )

        self.conn.commit()

    def schema_version(self) -> str:
        if not self._table_exists("schema_meta"):
            return "unknown"
        row = self.conn.execute(
            "SELECT value FROM schema_meta WHERE key='schema_version'"
        ).fetchone()
        return row["value"] if row else "unknown"

    def close(self):
        if self._closed:
            return
        self.conn.close()
        self._closed = True
