"""Chronological record of a simulated day and its text rendering."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class EventType(Enum):
    DAY_STARTED = "day_started"
    WORKER_STARTED = "worker_started"
    ANIMAL_BUSY = "animal_busy"
    TOUR_ADMITTED = "tour_admitted"
    TOUR_SKIPPED = "tour_skipped"
    VISITOR_CHARGED = "visitor_charged"
    WORKER_RELEASED = "worker_released"
    DAY_FINISHED = "day_finished"


_SHIFT = "{worker} ({role}) [{start}-{end}]"

_FORMATS: dict[EventType, str] = {
    EventType.DAY_STARTED: "=== Zoo Day Simulation ===",
    EventType.WORKER_STARTED:
        "[{tick}] " + _SHIFT + " started working with {animal} ({species})",
    EventType.ANIMAL_BUSY:
        "[{tick}] " + _SHIFT + " found {animal} busy with {holder}",
    EventType.TOUR_ADMITTED:
        "  [{tick}] tour of {category} admitted at ${price:.2f} for {charged} visitor(s)",
    EventType.TOUR_SKIPPED:
        "  [{tick}] skipped {category} tour: conflicts with {blocking} tour "
        "started at {blocking_start}",
    EventType.VISITOR_CHARGED:
        "  [{tick}] {visitor} paid ${price:.2f} for watching {role} with {animal}",
    EventType.WORKER_RELEASED: "[{tick}] " + _SHIFT + " released {animal}",
    EventType.DAY_FINISHED: "=== Day Finished ===",
}


@dataclass(frozen=True)
class Event:
    tick: int
    type: EventType
    data: dict[str, Any]


def render_event(event: Event) -> str:
    """One human-readable line per event."""
    return _FORMATS[event.type].format(tick=event.tick, **event.data)


class EventLog:
    """Append-only list of the day's events, in emission order."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def emit(self, tick: int, type: EventType, **data: Any) -> Event:
        event = Event(tick=tick, type=type, data=data)
        self._events.append(event)
        return event

    def select(self, *types: EventType, ticks: range | None = None) -> list[Event]:
        """Events of any of *types* (all types if none given) within *ticks*."""
        return [
            e for e in self._events
            if (not types or e.type in types) and (ticks is None or e.tick in ticks)
        ]

    def ticks_of(self, type: EventType) -> list[int]:
        return [e.tick for e in self._events if e.type is type]

    def latest(self, type: EventType) -> Event | None:
        matches = self.select(type)
        return matches[-1] if matches else None

    def lines(self) -> list[str]:
        return [render_event(e) for e in self._events]

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._events))

    def __len__(self) -> int:
        return len(self._events)
