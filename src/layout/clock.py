"""Minimal ``HH:MM`` wall-clock arithmetic."""

from __future__ import annotations

import re

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

_CLOCK_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


def parse_clock(value: str) -> tuple[int, int]:
    """Split a 24-hour ``HH:MM`` string into ``(hour, minute)``."""

    match = _CLOCK_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise ValueError(f"Expected HH:MM, got {value!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValueError(f"Clock value out of range: {value!r}")
    return hour, minute


def format_clock(minutes: int) -> str:
    # wraps past midnight, "23:30" + 60 -> "00:30"
    hour, minute = divmod(minutes % MINUTES_PER_DAY, MINUTES_PER_HOUR)
    return f"{hour:02d}:{minute:02d}"
