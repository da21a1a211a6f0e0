from __future__ import annotations

import logging
from typing import Dict, Iterable

from .errors import ConfigurationError, MalformedEventError
from .models import DayWindow, Event, LayoutRecord
from .slots import layout_slot
from .timeaxis import hour_height, vertical_metrics

logger = logging.getLogger(__name__)


def layout_day(
    events: Iterable[Event],
    window: DayWindow,
    viewport_height: float,
) -> Dict[int, LayoutRecord]:
    """Compute the box of every event of a day.

    The whole batch is validated before any record is computed: an invalid
    window or viewport raises ``ConfigurationError`` and a duplicate id raises
    ``MalformedEventError``. Records are keyed by event id in input order and
    each one depends only on the full event set, never on another record.
    """

    if not isinstance(window, DayWindow):
        raise ConfigurationError(f"Expected a DayWindow, got {type(window)!r}")
    hour_height(window, viewport_height)

    day = tuple(events)
    seen: set[int] = set()
    for event in day:
        if event.event_id in seen:
            raise MalformedEventError(f"Duplicate event id {event.event_id}", event_id=event.event_id)
        seen.add(event.event_id)

    records: Dict[int, LayoutRecord] = {}
    for event in day:
        top, height = vertical_metrics(event, window, viewport_height)
        slot = layout_slot(event, day, window)
        records[event.event_id] = LayoutRecord(
            top=top,
            height=height,
            width_percent=slot.width_percent,
            left_percent=slot.left_percent,
        )

    logger.debug(
        "Laid out %s events for %02d:00-%02d:00 at %s px",
        len(records),
        window.start_hour,
        window.end_hour,
        viewport_height,
    )
    return records
