from __future__ import annotations

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Tuple

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'stores.base'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")
    os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture(autouse=True)
def _fresh_settings():
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeConfirm:
    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.messages: List[str] = []

    def confirm(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer


class FakeDialer:
    def __init__(self) -> None:
        self.dialed: List[str] = []

    def dial(self, digits: str) -> None:
        self.dialed.append(digits)


class FakeNotifier:
    def __init__(self) -> None:
        self.toasts: List[Tuple[str, str]] = []

    def notify(self, message: str, kind: str = "success") -> None:
        self.toasts.append((message, kind))


class FakeScreen:
    def __init__(self) -> None:
        self.frames: List[str] = []

    def show(self, text: str) -> None:
        self.frames.append(text)


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture
def confirm():
    return FakeConfirm()


@pytest.fixture
def dialer():
    return FakeDialer()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def clock():
    return StepClock(datetime(2024, 3, 14, 15, 9, 26, tzinfo=timezone.utc))
