from __future__ import annotations

import json

from utils.action_logger import log_action


def test_action_trace_writes_jsonl(tmp_path, monkeypatch):
    log_file = tmp_path / "actions.jsonl"
    monkeypatch.setenv("ACTION_TRACE", "true")
    monkeypatch.setenv("ACTION_LOG_PATH", str(log_file))
    monkeypatch.setenv("RUN_ID", "test-run-123")

    log_action(store="contacts", action="call", record_id="42", extras={"call_count": 2})

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    rec = json.loads(lines[-1])
    assert rec["store"] == "contacts"
    assert rec["action"] == "call"
    assert rec["record_id"] == "42"
    assert rec["status"] == "ok"
    assert rec["run_id"] == "test-run-123"
    assert rec["extras"] == {"call_count": 2}


def test_action_trace_disabled_writes_nothing(tmp_path, monkeypatch):
    log_file = tmp_path / "actions.jsonl"
    monkeypatch.setenv("ACTION_TRACE", "false")
    monkeypatch.setenv("ACTION_LOG_PATH", str(log_file))

    log_action(store="shipments", action="submit")
    assert not log_file.exists()
