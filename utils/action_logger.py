from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional


def _ensure_parent_dir(path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass


def log_action(
    *,
    store: str,
    action: str,
    record_id: Optional[str] = None,
    status: str = "ok",
    error: Optional[str] = None,
    extras: Optional[Dict[str, Any]] = None,
) -> None:
    """Append a single JSON line describing a user action if tracing is enabled.

    Controlled by ACTION_TRACE / ACTION_LOG_PATH in config/settings.py
    """
    from config.settings import get_settings
    # Pick up env changes made between calls (tests monkeypatch env)
    get_settings.cache_clear()
    settings = get_settings()
    if not settings.action_trace:
        return

    log_path = Path(settings.action_log_path)
    _ensure_parent_dir(log_path)

    payload: Dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "store": store,
        "action": action,
        "record_id": record_id,
        "status": status,
        "error": error,
    }
    run_id = os.getenv("RUN_ID")
    if run_id:
        payload["run_id"] = run_id

    if extras:
        payload["extras"] = extras

    try:
        with log_path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
    except OSError:
        # Never break the app on logging failures
        return
