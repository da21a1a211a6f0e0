from __future__ import annotations

from dataclasses import dataclass, field

from .clock import format_clock, parse_clock
from .errors import ConfigurationError, MalformedEventError


@dataclass(frozen=True)
class DayWindow:
    """Visible hour range ``[start_hour:00, end_hour:00)`` of the day track."""

    start_hour: int = 9
    end_hour: int = 21

    def __post_init__(self) -> None:
        if self.end_hour <= self.start_hour:
            raise ConfigurationError(
                f"end_hour ({self.end_hour}) must be after start_hour ({self.start_hour})"
            )

    @property
    def hours(self) -> int:
        return self.end_hour - self.start_hour


@dataclass(frozen=True)
class Event:
    """A single event of the day, anchored at a wall-clock start."""

    event_id: int
    start: str
    duration: int
    _hour: int = field(init=False, repr=False, compare=False)
    _minute: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise MalformedEventError(
                f"Event {self.event_id} has a non-integer duration {self.duration!r}",
                event_id=self.event_id,
            )
        if self.duration < 0:
            raise MalformedEventError(
                f"Event {self.event_id} has a negative duration", event_id=self.event_id
            )
        try:
            hour, minute = parse_clock(self.start)
        except ValueError as exc:
            raise MalformedEventError(
                f"Event {self.event_id} has an invalid start {self.start!r}",
                event_id=self.event_id,
            ) from exc
        object.__setattr__(self, "_hour", hour)
        object.__setattr__(self, "_minute", minute)

    @property
    def start_hour(self) -> int:
        return self._hour

    @property
    def start_minute(self) -> int:
        return self._minute

    @property
    def end_clock(self) -> str:
        return format_clock(self.start_hour * 60 + self.start_minute + self.duration)


@dataclass(frozen=True)
class Interval:
    """Half-open span ``[start, end)`` in minutes relative to the window start."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Slot:
    """Horizontal placement of an event inside its column group."""

    width_percent: float
    left_percent: float


@dataclass(frozen=True)
class LayoutRecord:
    """Absolute box of one event inside a container of the viewport height."""

    top: float
    height: float
    width_percent: float
    left_percent: float
