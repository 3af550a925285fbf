from __future__ import annotations

import sqlite3
from typing import Dict, List, Optional


class SqliteLocalStorage:
    """String key/value storage backed by the local_storage table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def get_item(self, key: str) -> Optional[str]:
        cur = self.conn.cursor()
        cur.execute("SELECT value FROM local_storage WHERE key = ?", (key,))
        row = cur.fetchone()
        return None if row is None else str(row[0])

    def set_item(self, key: str, value: str) -> None:
        sql = (
            "INSERT INTO local_storage (key, value, updated_at) VALUES (?, ?, datetime('now')) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at;"
        )
        self.conn.execute(sql, (key, value))
        self.conn.commit()

    def remove_item(self, key: str) -> None:
        self.conn.execute("DELETE FROM local_storage WHERE key = ?", (key,))
        self.conn.commit()

    def keys(self) -> List[str]:
        cur = self.conn.cursor()
        cur.execute("SELECT key FROM local_storage ORDER BY key")
        return [str(r[0]) for r in cur.fetchall()]


class InMemoryLocalStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return sorted(self._items)
