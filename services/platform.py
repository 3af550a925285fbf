from __future__ import annotations

import logging
import webbrowser
from typing import Callable, Optional

from ports.platform import ToastKind


logger = logging.getLogger(__name__)


class ConsoleConfirm:
    """Blocking yes/no prompt on stdin; ``auto_yes`` skips the prompt."""

    def __init__(self, auto_yes: bool = False, prompt: Optional[Callable[[str], str]] = None) -> None:
        self.auto_yes = auto_yes
        self.prompt = prompt or input

    def confirm(self, message: str) -> bool:
        if self.auto_yes:
            return True
        try:
            answer = self.prompt(f"{message} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}


class BrowserDialer:
    """Hands a tel: URL to the system handler (softphone, phone link, ...)."""

    def dial(self, digits: str) -> None:
        url = f"tel:{digits}"
        opened = webbrowser.open(url)
        if not opened:
            logger.info("No handler accepted %s", url, extra={"action": "dial", "status": "unhandled"})


class ConsoleNotifier:
    def notify(self, message: str, kind: ToastKind = "success") -> None:
        marker = "✔" if kind == "success" else "✖"
        print(f"{marker} {message}")


class ConsoleScreen:
    def show(self, text: str) -> None:
        print(text)
