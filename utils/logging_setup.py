from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, List

from config.settings import get_settings


_INITIALIZED: bool = False

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "store=%(store)s action=%(action)s record_id=%(record_id)s "
    "status=%(status)s error=%(error)s"
)


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields by injecting defaults."""

    DEFAULTS: dict[str, Any] = {
        "store": "-",
        "action": "-",
        "record_id": "-",
        "status": "-",
        "error": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return super().format(record)


def _build_handlers(log_file: str | None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def init_logging(level: str | None = None) -> None:
    """Attach the shared formatter to the root logger once per process.

    Existing root handlers (pytest, embedding apps) are left alone.
    """
    global _INITIALIZED
    if _INITIALIZED:
        return

    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        formatter = SafeExtraFormatter(fmt=LOG_FORMAT)
        for handler in _build_handlers(settings.log_file):
            handler.setLevel(log_level)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)

    _INITIALIZED = True
