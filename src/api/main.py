"""REST API exposing the day layout engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from fastapi import FastAPI, HTTPException, Query, status
from pydantic import BaseModel, Field, model_validator

from ..layout.engine import layout_day
from ..layout.errors import LayoutError
from ..layout.models import DayWindow, Event, LayoutRecord

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT_HEIGHT = 1200.0


@dataclass
class _DayState:
    """Container for the in-memory day."""

    window: DayWindow = field(default_factory=DayWindow)
    events: Dict[int, Event] = field(default_factory=dict)

    def upsert_event(self, event: Event) -> None:
        self.events[event.event_id] = event

    def delete_event(self, event_id: int) -> None:
        del self.events[event_id]

    def layout(self, viewport_height: float) -> Dict[int, LayoutRecord]:
        return _run_layout(self.events.values(), self.window, viewport_height)


class EventPayload(BaseModel):
    """Shared payload for creating and updating events."""

    start: str = Field(pattern=r"^[0-9]{1,2}:[0-9]{2}$", description="Start time as HH:MM")
    duration: int = Field(ge=0, description="Duration in minutes")

    def build_event(self, event_id: int) -> Event:
        try:
            return Event(event_id=event_id, start=self.start, duration=self.duration)
        except LayoutError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


class EventCreateRequest(EventPayload):
    id: int


class EventUpdateRequest(EventPayload):
    ...


class SettingsUpdate(BaseModel):
    start_hour: int = Field(ge=0, le=24)
    end_hour: int = Field(ge=0, le=24)

    @model_validator(mode="after")
    def _check_bounds(self) -> "SettingsUpdate":
        if self.end_hour <= self.start_hour:
            raise ValueError("end_hour must be after start_hour")
        return self


class LayoutRequest(SettingsUpdate):
    viewport_height: float = Field(default=DEFAULT_VIEWPORT_HEIGHT, gt=0)
    events: List[EventCreateRequest] = Field(default_factory=list)


class EventLayoutResponse(BaseModel):
    id: int
    start: str
    end: str
    duration: int
    top: float
    height: float
    width_percent: float
    left_percent: float


class LayoutResponse(BaseModel):
    start_hour: int
    end_hour: int
    viewport_height: float
    events: List[EventLayoutResponse]


def _run_layout(
    events: Iterable[Event],
    window: DayWindow,
    viewport_height: float,
) -> Dict[int, LayoutRecord]:
    try:
        return layout_day(events, window, viewport_height)
    except LayoutError as exc:
        logger.warning("Rejected layout request: %s", exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _serialize_layout(
    events: Iterable[Event],
    records: Dict[int, LayoutRecord],
    window: DayWindow,
    viewport_height: float,
) -> LayoutResponse:
    items = []
    for event in events:
        record = records[event.event_id]
        items.append(
            EventLayoutResponse(
                id=event.event_id,
                start=event.start,
                end=event.end_clock,
                duration=event.duration,
                top=record.top,
                height=record.height,
                width_percent=record.width_percent,
                left_percent=record.left_percent,
            )
        )
    return LayoutResponse(
        start_hour=window.start_hour,
        end_hour=window.end_hour,
        viewport_height=viewport_height,
        events=items,
    )


def create_app(
    events: Iterable[Event] = (),
    window: Optional[DayWindow] = None,
) -> FastAPI:
    state = _DayState(window=window or DayWindow())
    for event in events:
        state.upsert_event(event)

    app = FastAPI(title="Day Layout API")

    def _require_event(event_id: int) -> None:
        if event_id not in state.events:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Event '{event_id}' was not found.",
            )

    @app.get("/api/layout", response_model=LayoutResponse)
    def get_layout(
        viewport_height: float = Query(default=DEFAULT_VIEWPORT_HEIGHT, gt=0),
    ) -> LayoutResponse:
        records = state.layout(viewport_height)
        return _serialize_layout(state.events.values(), records, state.window, viewport_height)

    @app.post("/api/layout", response_model=LayoutResponse)
    def compute_layout(payload: LayoutRequest) -> LayoutResponse:
        window = DayWindow(start_hour=payload.start_hour, end_hour=payload.end_hour)
        day = [item.build_event(item.id) for item in payload.events]
        records = _run_layout(day, window, payload.viewport_height)
        return _serialize_layout(day, records, window, payload.viewport_height)

    @app.post("/api/events", status_code=status.HTTP_201_CREATED, response_model=LayoutResponse)
    def create_event(payload: EventCreateRequest) -> LayoutResponse:
        if payload.id in state.events:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Event '{payload.id}' already exists.",
            )
        state.upsert_event(payload.build_event(payload.id))
        return get_layout(DEFAULT_VIEWPORT_HEIGHT)

    @app.put("/api/events/{event_id}", response_model=LayoutResponse)
    def update_event(event_id: int, payload: EventUpdateRequest) -> LayoutResponse:
        _require_event(event_id)
        state.upsert_event(payload.build_event(event_id))
        return get_layout(DEFAULT_VIEWPORT_HEIGHT)

    @app.delete("/api/events/{event_id}", response_model=LayoutResponse)
    def delete_event(event_id: int) -> LayoutResponse:
        _require_event(event_id)
        state.delete_event(event_id)
        return get_layout(DEFAULT_VIEWPORT_HEIGHT)

    @app.put("/api/settings", response_model=LayoutResponse)
    def update_settings(payload: SettingsUpdate) -> LayoutResponse:
        state.window = DayWindow(start_hour=payload.start_hour, end_hour=payload.end_hour)
        return get_layout(DEFAULT_VIEWPORT_HEIGHT)

    return app


app = create_app()
