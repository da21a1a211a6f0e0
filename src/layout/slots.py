from __future__ import annotations

import logging
from typing import List, Sequence

from .intensity import count_active_during, peak_window
from .models import DayWindow, Event, Slot
from .overlap import overlapping
from .timeaxis import to_minutes

logger = logging.getLogger(__name__)


def local_overlap(event: Event, all_events: Sequence[Event], window: DayWindow) -> List[Event]:
    """Events overlapping ``event``, longest first; equal durations keep input order."""

    matches = overlapping(to_minutes(event, window), all_events, window)
    return sorted(matches, key=lambda other: -other.duration)


def densest_group(
    candidates: Sequence[Event],
    all_events: Sequence[Event],
    window: DayWindow,
) -> List[Event]:
    """Return the largest overlap set of any candidate; the first one wins ties."""

    group: List[Event] = []
    for candidate in candidates:
        members = overlapping(to_minutes(candidate, window), all_events, window)
        if len(members) > len(group):
            group = members
    return group


def peak_concurrency(group: Sequence[Event], window: DayWindow) -> int:
    intervals = [to_minutes(event, window) for event in group]
    count = count_active_during(peak_window(intervals), intervals)
    if count < 1:
        logger.debug("Degenerate overlap group of %s events, using a single column", len(group))
        return 1
    return count


def layout_slot(event: Event, all_events: Sequence[Event], window: DayWindow) -> Slot:
    local = local_overlap(event, all_events, window)
    columns = peak_concurrency(densest_group(local, all_events, window), window)
    width = 100 / columns

    # a zero-length event never overlaps itself; it goes after the events it touches
    index = next(
        (position for position, other in enumerate(local) if other.event_id == event.event_id),
        len(local),
    )
    return Slot(width_percent=width, left_percent=index * width)
