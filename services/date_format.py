from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def iso_timestamp(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _hour12(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"


def short_day(moment: datetime) -> str:
    """'Tue, Oct 21'"""
    return f"{moment:%a}, {moment:%b} {moment.day}"


def short_datetime(moment: datetime) -> str:
    """'Oct 19, 3:05 PM'"""
    return f"{moment:%b} {moment.day}, {_hour12(moment)}"


def display_timestamp(value: Optional[str]) -> Optional[str]:
    """Render a stored ISO timestamp in local time; None when missing or unparsable."""
    moment = parse_iso(value)
    if moment is None:
        return None
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return short_datetime(moment)
