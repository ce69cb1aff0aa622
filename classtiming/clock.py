from __future__ import annotations

import re

from .errors import FormatError

MINUTES_PER_DAY = 24 * 60

_CLOCK_RE = re.compile(r"([0-9]{2}):([0-9]{2})")


def to_clock(minutes: int) -> str:
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise FormatError(f"Minute offset out of range: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def from_clock(s: str) -> int:
    m = _CLOCK_RE.fullmatch(s or "")
    if m is None:
        raise FormatError(f"Expected HH:MM, got {s!r}")
    hours, mins = int(m.group(1)), int(m.group(2))
    if hours > 23 or mins > 59:
        raise FormatError(f"Time out of range: {s!r}")
    return hours * 60 + mins


def duration(start: str, end: str) -> int:
    return from_clock(end) - from_clock(start)


def to_12h(s: str) -> str:
    # 13:05 -> 1:05 PM
    total = from_clock(s)
    hour, mins = divmod(total, 60)
    suffix = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{mins:02d} {suffix}"
