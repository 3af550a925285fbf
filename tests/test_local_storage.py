from __future__ import annotations

from db import schema
from db.connection import get_connection
from db.local_storage import InMemoryLocalStorage, SqliteLocalStorage


def test_sqlite_storage_set_get_overwrite_remove(tmp_path):
    conn = get_connection(str(tmp_path / "nested" / "store.db"))
    try:
        schema.bootstrap(conn)
        schema.bootstrap(conn)  # idempotent
        storage = SqliteLocalStorage(conn)
        assert storage.get_item("missing") is None

        storage.set_item("a", "[1]")
        storage.set_item("a", "[2]")
        storage.set_item("b", "[]")
        assert storage.get_item("a") == "[2]"
        assert storage.keys() == ["a", "b"]

        storage.remove_item("a")
        assert storage.get_item("a") is None
        storage.remove_item("a")
    finally:
        conn.close()


def test_sqlite_storage_survives_reconnect(tmp_path):
    db_path = str(tmp_path / "store.db")
    conn = get_connection(db_path)
    schema.bootstrap(conn)
    SqliteLocalStorage(conn).set_item("k", "v")
    conn.close()

    conn = get_connection(db_path)
    try:
        assert SqliteLocalStorage(conn).get_item("k") == "v"
    finally:
        conn.close()


def test_in_memory_storage():
    storage = InMemoryLocalStorage({"x": "1"})
    assert storage.get_item("x") == "1"
    storage.set_item("y", "2")
    assert storage.keys() == ["x", "y"]
    storage.remove_item("x")
    assert storage.get_item("x") is None
