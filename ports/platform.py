from __future__ import annotations

from typing import Literal, Protocol


ToastKind = Literal["success", "error"]


class ConfirmPort(Protocol):
    def confirm(self, message: str) -> bool:
        ...


class DialerPort(Protocol):
    def dial(self, digits: str) -> None:
        ...


class NotifierPort(Protocol):
    def notify(self, message: str, kind: ToastKind = "success") -> None:
        ...


class ScreenPort(Protocol):
    def show(self, text: str) -> None:
        ...
