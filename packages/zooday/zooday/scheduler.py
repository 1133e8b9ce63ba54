"""Shift system and tour admission."""
from __future__ import annotations

from typing import TYPE_CHECKING

from zooday.events import EventType
from zooday.types import (
    Animal,
    DayContext,
    RejectionPolicy,
    System,
    Tour,
    Worker,
)

if TYPE_CHECKING:
    from zooday.engine import Simulation


def admit_tour(
    sim: Simulation, ctx: DayContext, worker: Worker, animal: Animal
) -> Tour | None:
    """Record and charge a tour, or return None if a running tour conflicts."""
    tick = ctx.tick_number
    category = animal.category(sim.config.category_key)

    for running in sim.ledger.active_at(tick):
        if sim.conflicts.conflicts_with(running.category, category):
            sim.events.emit(
                tick, EventType.TOUR_SKIPPED,
                worker=worker.name, animal=animal.name, category=category,
                blocking=running.category, blocking_start=running.start_time,
            )
            return None

    price = sim.pricing.price_for(worker.role)
    charged = sim.accountant.charge(price, ctx.random)
    tour = Tour(
        category=category,
        start_time=tick,
        duration=sim.config.tour_length,
        worker=worker,
        animal=animal,
        price=price,
        charged=tuple(v.name for v in charged),
    )
    sim.ledger.record(tour)
    sim.events.emit(
        tick, EventType.TOUR_ADMITTED,
        worker=worker.name, animal=animal.name, category=category,
        price=price, charged=len(charged),
    )
    for visitor in charged:
        sim.events.emit(
            tick, EventType.VISITOR_CHARGED,
            visitor=visitor.name, price=price,
            role=worker.role.value, animal=animal.name,
        )
    return tour


def _shift_fields(worker: Worker) -> dict[str, object]:
    return {
        "worker": worker.name,
        "role": worker.role.value,
        "start": worker.start_time,
        "end": worker.end_time,
    }


def _start_shift(sim: Simulation, ctx: DayContext, worker: Worker) -> None:
    registry = sim.registry
    animals = registry.animals
    if not animals:
        return
    animal = animals[ctx.random.randrange(len(animals))]

    holder = registry.holder_of(animal)
    if holder is not None:
        sim.events.emit(
            ctx.tick_number, EventType.ANIMAL_BUSY,
            animal=animal.name, holder=holder.name, **_shift_fields(worker),
        )
        return

    registry.assign(worker, animal)
    sim.events.emit(
        ctx.tick_number, EventType.WORKER_STARTED,
        animal=animal.name, species=animal.species, **_shift_fields(worker),
    )
    tour = admit_tour(sim, ctx, worker, animal)
    if tour is None and sim.config.rejection_policy is RejectionPolicy.RELEASE:
        _release(sim, ctx.tick_number, worker)


def _release(sim: Simulation, tick: int, worker: Worker) -> None:
    animal = sim.registry.release(worker)
    if animal is not None:
        sim.events.emit(
            tick, EventType.WORKER_RELEASED,
            animal=animal.name, **_shift_fields(worker),
        )


def make_shift_system() -> System:
    """Return a system that starts and releases workers each tick.

    Workers are visited in roster order. A worker starts only on the tick
    equal to its start time and is released once the tick reaches its end
    time. On the final tick every worker still busy is released, so no
    assignment outlives the day.
    """

    def shift_system(sim: Simulation, ctx: DayContext) -> None:
        tick = ctx.tick_number
        registry = sim.registry
        for worker in registry.workers:
            if tick == worker.start_time and not registry.is_busy(worker):
                _start_shift(sim, ctx, worker)
            if tick >= worker.end_time:
                _release(sim, tick, worker)

        if ctx.is_final_tick:
            for worker in registry.workers:
                _release(sim, tick, worker)

    return shift_system
