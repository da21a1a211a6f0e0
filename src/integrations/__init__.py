"""Sources of day events."""

from .events_file import load_events, parse_events

__all__ = [
    "load_events",
    "parse_events",
]
