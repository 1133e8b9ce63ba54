"""Simulation - owns one zoo day, runs its tick loop and reports on it."""
from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Callable, Iterable

from zooday.clock import DayClock
from zooday.config import DayConfig
from zooday.conflicts import ConflictTable, default_conflicts
from zooday.events import EventLog, EventType
from zooday.ledger import TourLedger
from zooday.pricing import PricingPolicy
from zooday.registry import EntityRegistry
from zooday.revenue import RevenueAccountant
from zooday.scheduler import make_shift_system
from zooday.types import (
    Animal,
    ConfigurationError,
    DayContext,
    LifecycleError,
    System,
    Tour,
    Visitor,
    Worker,
)

Hook = Callable[["Simulation", DayContext], None]


@dataclass(frozen=True)
class DayReport:
    seed: int | None
    total_earnings: int
    tours: tuple[Tour, ...]
    visitors: tuple[Visitor, ...]

    def lines(self) -> list[str]:
        out = [str(v) for v in self.visitors]
        out.append(f"Total earnings: ${self.total_earnings:.2f}")
        return out


class Simulation:
    """One zoo day.

    Construction loads the dataset and draws start times, so configuration
    errors surface before any tick runs. The day can be advanced with
    ``step()`` or finished with ``run()``; once finished it cannot be run
    again and ``report()`` becomes available.
    """

    def __init__(
        self,
        animals: Iterable[Animal],
        workers: Iterable[Worker],
        visitors: Iterable[Visitor],
        config: DayConfig | None = None,
        conflicts: ConflictTable | None = None,
        pricing: PricingPolicy | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config if config is not None else DayConfig()
        self._clock = DayClock(self._config.day_length)

        if seed is not None and rng is not None:
            raise ConfigurationError("Pass either seed or rng, not both")
        if rng is None:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            rng = random.Random(seed)
        self._seed = seed
        self._rng = rng

        self._conflicts = (
            conflicts if conflicts is not None
            else default_conflicts(self._config.category_key)
        )
        self._pricing = pricing if pricing is not None else PricingPolicy()
        self._registry = EntityRegistry(self._config)
        self._registry.initialize(animals, workers, visitors, self._rng)
        self._ledger = TourLedger()
        self._accountant = RevenueAccountant(
            self._registry.visitors,
            policy=self._config.charge_policy,
            guest_count=self._config.guest_count,
        )
        self._events = EventLog()

        self._systems: list[System] = [make_shift_system()]
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._started = False

    @property
    def config(self) -> DayConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def clock(self) -> DayClock:
        return self._clock

    @property
    def registry(self) -> EntityRegistry:
        return self._registry

    @property
    def conflicts(self) -> ConflictTable:
        return self._conflicts

    @property
    def pricing(self) -> PricingPolicy:
        return self._pricing

    @property
    def ledger(self) -> TourLedger:
        return self._ledger

    @property
    def accountant(self) -> RevenueAccountant:
        return self._accountant

    @property
    def events(self) -> EventLog:
        return self._events

    @property
    def total_earnings(self) -> int:
        return self._accountant.total_earnings

    @property
    def finished(self) -> bool:
        return self._clock.finished

    def add_system(self, system: System) -> None:
        """Append a system that runs after the shift system each tick."""
        if self._started:
            raise LifecycleError("Cannot add systems once the day has started")
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _begin(self) -> None:
        self._started = True
        self._events.emit(0, EventType.DAY_STARTED)
        ctx = self._clock.context(self._rng)
        for hook in self._start_hooks:
            hook(self, ctx)

    def _finish(self) -> None:
        tick = self._clock.tick_number
        self._events.emit(tick, EventType.DAY_FINISHED, total_earnings=self.total_earnings)
        ctx = self._clock.context(self._rng)
        for hook in self._stop_hooks:
            hook(self, ctx)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self, ctx)

    def step(self) -> None:
        """Advance one tick. Raises LifecycleError once the day is over."""
        if self.finished:
            raise LifecycleError("The day is over; create a new Simulation")
        if not self._started:
            self._begin()
        self._tick()
        if self.finished:
            self._finish()

    def run(self) -> DayReport:
        """Run every remaining tick of the day and return the report."""
        if self.finished:
            raise LifecycleError("The day has already been run")
        while not self.finished:
            self.step()
        return self.report()

    def report(self) -> DayReport:
        if not self.finished:
            raise LifecycleError("The day has not finished yet")
        return DayReport(
            seed=self._seed,
            total_earnings=self.total_earnings,
            tours=tuple(self._ledger.tours()),
            visitors=tuple(self._registry.visitors),
        )
