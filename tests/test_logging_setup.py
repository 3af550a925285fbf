from __future__ import annotations

import logging

import utils.logging_setup as logging_setup


def test_formatter_fills_missing_extras():
    formatter = logging_setup.SafeExtraFormatter(fmt=logging_setup.LOG_FORMAT)
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "hello", None, None)
    record.store = "packageTrackerShipments"
    text = formatter.format(record)
    assert "hello" in text
    assert "store=packageTrackerShipments" in text
    assert "record_id=-" in text


def test_init_logging_adds_file_handler(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "app.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setattr(logging_setup, "_INITIALIZED", False)
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        logging_setup.init_logging("INFO")
        logging.getLogger("tests").info("written", extra={"action": "check"})
        for h in root.handlers:
            h.flush()
        assert "action=check" in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            h.close()
        root.handlers = saved_handlers
        root.setLevel(saved_level)
