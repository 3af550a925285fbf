from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


DEFAULT_CONTACT_CATEGORIES = ["family", "friends", "work", "business", "emergency", "other"]


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "y", "on"}


def _as_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


def _as_list(raw: Optional[str], default: list[str]) -> list[str]:
    if not raw:
        return list(default)
    items = [p.strip().lower() for p in raw.split(",")]
    return [p for p in items if p] or list(default)


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    run_env: str
    log_level: str

    # Local storage keys (one JSON array per record type)
    shipments_storage_key: str
    contacts_storage_key: str

    # Tracking data source
    tracking_source: str
    tracking_seed: Optional[int]

    contact_categories: list[str]

    # Confirmation prompts answer "yes" without asking
    auto_confirm: bool = False

    # Optional extra log destination next to stdout
    log_file: Optional[str] = None

    # Action trace
    action_trace: bool = False
    action_log_path: str = "logs/actions.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH", "data/parcelbook.db"),
        run_env=os.getenv("RUN_ENV", "dev"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        shipments_storage_key=os.getenv("SHIPMENTS_STORAGE_KEY", "packageTrackerShipments"),
        contacts_storage_key=os.getenv("CONTACTS_STORAGE_KEY", "phoneDirectoryContacts"),
        tracking_source=os.getenv("TRACKING_SOURCE", "mock"),
        tracking_seed=_as_optional_int("TRACKING_SEED"),
        contact_categories=_as_list(os.getenv("CONTACT_CATEGORIES"), DEFAULT_CONTACT_CATEGORIES),
        auto_confirm=_as_bool(os.getenv("AUTO_CONFIRM")),
        log_file=os.getenv("LOG_FILE") or None,
        action_trace=_as_bool(os.getenv("ACTION_TRACE")),
        action_log_path=os.getenv("ACTION_LOG_PATH", "logs/actions.jsonl"),
    )
