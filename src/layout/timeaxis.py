"""Conversion between wall-clock events, window minutes and pixels."""

from __future__ import annotations

import math

from .clock import MINUTES_PER_HOUR
from .errors import ConfigurationError
from .models import DayWindow, Event, Interval


def to_minutes(event: Event, window: DayWindow) -> Interval:
    start = (event.start_hour - window.start_hour) * MINUTES_PER_HOUR + event.start_minute
    return Interval(start=start, end=start + event.duration)


def hour_height(window: DayWindow, viewport_height: float) -> float:
    if not math.isfinite(viewport_height) or viewport_height <= 0:
        raise ConfigurationError(
            f"viewport_height must be a positive finite number, got {viewport_height}"
        )
    return viewport_height / window.hours


def to_pixels(minutes: float, window: DayWindow, viewport_height: float) -> float:
    """Map a minute offset from the window start onto the viewport.

    Offsets are not clamped: minutes before the window give a negative
    coordinate and minutes after it land past ``viewport_height``.
    """

    return (minutes / MINUTES_PER_HOUR) * hour_height(window, viewport_height)


def vertical_metrics(event: Event, window: DayWindow, viewport_height: float) -> tuple[float, float]:
    interval = to_minutes(event, window)
    top = to_pixels(interval.start, window, viewport_height)
    height = to_pixels(event.duration, window, viewport_height)
    return top, height
