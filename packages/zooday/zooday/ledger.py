"""TourLedger - append-only record of admitted tours."""
from __future__ import annotations

from typing import Iterator

from zooday.types import Tour


class TourLedger:
    def __init__(self) -> None:
        self._tours: list[Tour] = []

    def record(self, tour: Tour) -> None:
        self._tours.append(tour)

    def tours(self) -> list[Tour]:
        return list(self._tours)

    def active_at(self, tick: int) -> list[Tour]:
        """Tours whose [start, start+duration) interval contains *tick*."""
        return [t for t in self._tours if t.covers(tick)]

    def by_worker(self, name: str) -> list[Tour]:
        return [t for t in self._tours if t.worker.name == name]

    def revenue(self) -> int:
        return sum(t.revenue for t in self._tours)

    def __iter__(self) -> Iterator[Tour]:
        return iter(list(self._tours))

    def __len__(self) -> int:
        return len(self._tours)
