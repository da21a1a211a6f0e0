"""Overlap-aware layout of a day's events on a vertical track."""

from .engine import layout_day
from .errors import ConfigurationError, EventSourceError, LayoutError, MalformedEventError
from .models import DayWindow, Event, Interval, LayoutRecord, Slot

__all__ = [
    "ConfigurationError",
    "DayWindow",
    "Event",
    "EventSourceError",
    "Interval",
    "LayoutError",
    "LayoutRecord",
    "MalformedEventError",
    "Slot",
    "layout_day",
]
