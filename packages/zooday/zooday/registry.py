"""EntityRegistry - animals, rosters and the animal occupancy arena."""
from __future__ import annotations

import random
from typing import Iterable

from zooday.config import DayConfig
from zooday.types import (
    Animal,
    ConfigurationError,
    SchedulingError,
    Visitor,
    Worker,
)


class EntityRegistry:
    """Owns the day's animals, workers and visitors.

    Animals live in an arena (a list indexed by position). Occupancy is kept
    as two maps, animal index -> worker index and the reverse, so that a
    worker holds at most one animal and an animal is held by at most one
    worker.
    """

    def __init__(self, config: DayConfig) -> None:
        self._config = config
        self._animals: list[Animal] = []
        self._animal_index: dict[str, int] = {}
        self._workers: list[Worker] = []
        self._visitors: list[Visitor] = []
        self._holder: dict[int, int] = {}
        self._holding: dict[int, int] = {}

    # --- Setup ---

    def initialize(
        self,
        animals: Iterable[Animal],
        workers: Iterable[Worker],
        visitors: Iterable[Visitor],
        rng: random.Random,
    ) -> None:
        """Load the dataset and draw every worker's start time.

        Animals are deduplicated by species, keeping the first occurrence.
        Raises ConfigurationError, before any draw, if a role's duration
        is not positive or does not fit in the day.
        """
        workers = list(workers)
        day_length = self._config.day_length
        durations: list[int] = []
        for worker in workers:
            duration = self._config.duration_for(worker.role)
            if duration <= 0:
                raise ConfigurationError(
                    f"{worker.name} ({worker.role.value}) has a non-positive duration {duration}"
                )
            if duration > day_length:
                raise ConfigurationError(
                    f"{worker.name} ({worker.role.value}) works {duration} ticks, "
                    f"longer than the {day_length}-tick day"
                )
            durations.append(duration)

        self._animals.clear()
        self._animal_index.clear()
        for animal in animals:
            if animal.species in self._animal_index:
                continue
            self._animal_index[animal.species] = len(self._animals)
            self._animals.append(animal)

        self._workers = workers
        self._visitors = list(visitors)
        self._holder.clear()
        self._holding.clear()

        for worker, duration in zip(self._workers, durations):
            worker.duration = duration
            worker.start_time = rng.randint(0, day_length - duration)

    # --- Queries ---

    @property
    def animals(self) -> list[Animal]:
        return list(self._animals)

    @property
    def workers(self) -> list[Worker]:
        return list(self._workers)

    @property
    def visitors(self) -> list[Visitor]:
        return list(self._visitors)

    def animal_index(self, animal: Animal) -> int:
        """Arena index of an animal. Raises KeyError if not registered."""
        index = self._animal_index.get(animal.species)
        if index is None or self._animals[index] != animal:
            raise KeyError(animal.species)
        return index

    def worker_index(self, worker: Worker) -> int:
        for index, candidate in enumerate(self._workers):
            if candidate is worker:
                return index
        raise KeyError(worker.name)

    def holder_of(self, animal: Animal) -> Worker | None:
        """Worker currently assigned to *animal*, if any."""
        windex = self._holder.get(self.animal_index(animal))
        return None if windex is None else self._workers[windex]

    def assignment_of(self, worker: Worker) -> Animal | None:
        aindex = self._holding.get(self.worker_index(worker))
        return None if aindex is None else self._animals[aindex]

    def is_busy(self, worker: Worker) -> bool:
        return self.worker_index(worker) in self._holding

    def occupancy(self) -> dict[str, str]:
        """Species -> worker name for every held animal."""
        return {
            self._animals[aindex].species: self._workers[windex].name
            for aindex, windex in self._holder.items()
        }

    # --- Mutation (scheduler only) ---

    def assign(self, worker: Worker, animal: Animal) -> None:
        windex = self.worker_index(worker)
        aindex = self.animal_index(animal)
        if windex in self._holding:
            raise SchedulingError(f"{worker.name} already holds an animal")
        if aindex in self._holder:
            other = self._workers[self._holder[aindex]]
            raise SchedulingError(f"{animal.name} is already held by {other.name}")
        self._holder[aindex] = windex
        self._holding[windex] = aindex

    def release(self, worker: Worker) -> Animal | None:
        """Free the worker's animal. Returns the released animal, if any."""
        windex = self.worker_index(worker)
        aindex = self._holding.pop(windex, None)
        if aindex is None:
            return None
        del self._holder[aindex]
        return self._animals[aindex]
