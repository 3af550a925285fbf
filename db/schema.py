from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the local storage table (idempotent)."""
    cur = conn.cursor()

    # One row per storage key; value holds the serialized JSON array
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS local_storage (\n"
            "  key TEXT PRIMARY KEY,\n"
            "  value TEXT NOT NULL,\n"
            "  updated_at TEXT NOT NULL DEFAULT (datetime('now'))\n"
            ")"
        )
    )
    conn.commit()
