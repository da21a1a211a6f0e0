from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..layout.errors import EventSourceError, MalformedEventError
from ..layout.models import Event

logger = logging.getLogger(__name__)


def load_events(path: str | Path) -> tuple[Event, ...]:
    """Load a day's events from a JSON file.

    Two shapes are accepted: a list of ``{"id", "start", "duration"}`` objects,
    or a mapping of id to ``{"start", "duration"}``.
    """

    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.exception("Unable to read events from %s: %s", source, exc)
        raise EventSourceError(f"Failed to read events from {source}") from exc

    events = parse_events(payload)
    logger.info("Loaded %s events from %s", len(events), source)
    return events


def parse_events(payload: Any) -> tuple[Event, ...]:
    if isinstance(payload, dict):
        entries: Iterable[tuple[Any, Any]] = (
            (raw_id, raw) for raw_id, raw in payload.items()
        )
    elif isinstance(payload, list):
        entries = ((raw.get("id") if isinstance(raw, dict) else None, raw) for raw in payload)
    else:
        raise EventSourceError("Events payload must be a list or a mapping")

    events: list[Event] = []
    seen: set[int] = set()
    for raw_id, raw in entries:
        event = _extract_event(raw_id, raw)
        if event.event_id in seen:
            raise MalformedEventError(f"Duplicate event id {event.event_id}", event_id=event.event_id)
        seen.add(event.event_id)
        events.append(event)
    return tuple(events)


def _extract_event(raw_id: Any, raw: Any) -> Event:
    if not isinstance(raw, dict):
        raise MalformedEventError(f"Event {raw_id!r} is not an object", event_id=raw_id)
    try:
        event_id = int(raw_id)
    except (TypeError, ValueError) as exc:
        raise MalformedEventError(f"Invalid event id {raw_id!r}", event_id=raw_id) from exc

    start = raw.get("start")
    duration = raw.get("duration")
    if not isinstance(start, str):
        raise MalformedEventError(f"Event {event_id} is missing a start time", event_id=event_id)
    return Event(event_id=event_id, start=start, duration=duration)
