from __future__ import annotations

import re
from typing import Optional


MIN_PHONE_DIGITS = 10


def digits_only(value: Optional[str]) -> str:
    """Strip everything but 0-9 (spaces, dashes, parentheses, '+')."""
    return re.sub(r"\D+", "", str(value or ""))


def format_phone(value: str) -> str:
    """Format a US-style number for display.

    10 digits -> (AAA) BBB-CCCC, 11 digits with a leading 1 -> +1 (AAA) BBB-CCCC.
    Any other digit count returns the input untouched.
    """
    d = digits_only(value)
    if len(d) == 10:
        return f"({d[0:3]}) {d[3:6]}-{d[6:]}"
    if len(d) == 11 and d.startswith("1"):
        return f"+1 ({d[1:4]}) {d[4:7]}-{d[7:]}"
    return value


def is_dialable(value: Optional[str]) -> bool:
    return len(digits_only(value)) >= MIN_PHONE_DIGITS
