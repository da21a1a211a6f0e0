"""Sweep-line scan for the busiest stretch of a set of intervals."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .models import Interval


def sweep(intervals: Iterable[Interval]) -> List[tuple[int, int]]:
    """Return ``(time, active_count)`` after each start/end boundary.

    Boundaries are ordered by time only. Equal times keep input order, with
    each interval contributing its start before its end.
    """

    boundaries: List[tuple[int, int]] = []
    for interval in intervals:
        boundaries.append((interval.start, 1))
        boundaries.append((interval.end, -1))
    boundaries.sort(key=lambda boundary: boundary[0])

    timeline: List[tuple[int, int]] = []
    active = 0
    for time, change in boundaries:
        active += change
        timeline.append((time, active))
    return timeline


def peak_window(intervals: Sequence[Interval]) -> Optional[Interval]:
    """Return the first stretch with the highest number of active intervals."""

    timeline = sweep(intervals)
    best = 0
    peak: Optional[Interval] = None
    for (start, active), (end, _) in zip(timeline, timeline[1:]):
        if active > best:
            best = active
            peak = Interval(start=start, end=end)
    return peak


def count_active_during(window: Optional[Interval], intervals: Iterable[Interval]) -> int:
    """Count the intervals that fully contain ``window``."""

    if window is None:
        return 0
    return sum(
        1
        for interval in intervals
        if interval.start <= window.start and interval.end >= window.end
    )
