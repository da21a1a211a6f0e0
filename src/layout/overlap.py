from __future__ import annotations

from typing import List, Sequence

from .models import DayWindow, Event, Interval
from .timeaxis import to_minutes


def overlaps(candidate: Interval, target_start: int, target_duration: int) -> bool:
    """Return whether ``candidate`` intersects the span anchored at ``target_start``.

    Two disjoint cases are tested: the candidate is already running when the
    target starts, or it starts during the target's span. Intervals are
    half-open, so a candidate ending exactly at ``target_start`` does not match.
    """

    running_at_start = candidate.start <= target_start and candidate.end > target_start
    starts_within = target_start <= candidate.start < target_start + target_duration
    return running_at_start or starts_within


def overlapping(
    target: Interval,
    candidates: Sequence[Event],
    window: DayWindow,
) -> List[Event]:
    return [
        event
        for event in candidates
        if overlaps(to_minutes(event, window), target.start, target.duration)
    ]
