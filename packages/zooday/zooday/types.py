"""Shared tags, entity records and errors for the zoo-day engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable


class AnimalKind(Enum):
    LAND = "Land"
    FLYING = "Flying"
    AQUATIC = "Aquatic"


class Role(Enum):
    DOCTOR = "Doctor"
    FEEDER = "Feeder"
    CLEANER = "Cleaner"


class CategoryKey(Enum):
    """Which animal attribute tags a tour for conflict checks."""

    KIND = "kind"
    SPECIES = "species"


class ChargePolicy(Enum):
    ALL_VISITORS = "all_visitors"
    FIXED_QUOTA = "fixed_quota"


class RejectionPolicy(Enum):
    """What happens to a worker whose tour was rejected for a conflict."""

    HOLD = "hold"  # stays busy for its whole window
    RELEASE = "release"  # freed on the same tick


@dataclass(frozen=True, slots=True)
class Animal:
    name: str
    species: str
    kind: AnimalKind
    location: str = ""

    def category(self, key: CategoryKey) -> str:
        if key is CategoryKey.SPECIES:
            return self.species
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.name} the {self.species} [{self.kind.value}] | Enclosure: {self.location}"


@dataclass
class Worker:
    """A staff member with one working window per day.

    ``duration`` and ``start_time`` are filled in by the registry when the
    day is set up; before that they are both 0.
    """

    name: str
    role: Role
    duration: int = 0
    start_time: int = 0

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration

    def on_shift(self, tick: int) -> bool:
        return self.start_time <= tick < self.end_time

    def __str__(self) -> str:
        return f"{self.name} ({self.role.value}) [{self.start_time}-{self.end_time}]"


@dataclass
class Visitor:
    name: str
    money_spent: int = 0

    def __str__(self) -> str:
        return f"{self.name} (Spent: ${self.money_spent:.2f})"


@dataclass(frozen=True)
class Tour:
    """An admitted activity. Never mutated once recorded."""

    category: str
    start_time: int
    duration: int
    worker: Worker = field(compare=False)
    animal: Animal
    price: int
    charged: tuple[str, ...] = ()

    @property
    def end_time(self) -> int:
        return self.start_time + self.duration

    def covers(self, tick: int) -> bool:
        return self.start_time <= tick < self.end_time

    @property
    def revenue(self) -> int:
        return self.price * len(self.charged)


@dataclass(frozen=True, slots=True)
class DayContext:
    tick_number: int
    day_length: int
    random: _random.Random

    @property
    def is_final_tick(self) -> bool:
        return self.tick_number == self.day_length - 1


class ZooDayError(Exception):
    """Base class for engine errors."""


class ConfigurationError(ZooDayError, ValueError):
    """Raised at setup for an invalid dataset or configuration."""


class LifecycleError(ZooDayError, RuntimeError):
    """Raised when a simulation is used outside its valid lifecycle."""


class SchedulingError(ZooDayError, RuntimeError):
    """Raised when an assignment would break animal exclusivity."""


if TYPE_CHECKING:
    from zooday.engine import Simulation

System = Callable[["Simulation", DayContext], None]
