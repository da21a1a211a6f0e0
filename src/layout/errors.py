"""Errors raised by the day layout engine."""

from __future__ import annotations


class LayoutError(Exception):
    """Base error for day layout issues."""


class ConfigurationError(LayoutError):
    """Raised when the day window or viewport cannot produce a finite scale."""


class MalformedEventError(LayoutError):
    """Raised when an event cannot be placed on the time axis."""

    def __init__(self, message: str, *, event_id: object | None = None) -> None:
        super().__init__(message)
        self.event_id = event_id


class EventSourceError(LayoutError):
    """Raised when an event source cannot be read."""
