"""zooday - A tick-driven zoo day scheduler with tour conflict resolution."""

from zooday.config import DEFAULT_DURATIONS, DayConfig
from zooday.conflicts import ConflictTable, default_conflicts
from zooday.engine import DayReport, Simulation
from zooday.events import Event, EventLog, EventType, render_event
from zooday.ledger import TourLedger
from zooday.pricing import DEFAULT_PRICES, PricingPolicy
from zooday.registry import EntityRegistry
from zooday.revenue import RevenueAccountant, sample_indices
from zooday.scheduler import admit_tour, make_shift_system
from zooday.types import (
    Animal,
    AnimalKind,
    CategoryKey,
    ChargePolicy,
    ConfigurationError,
    DayContext,
    LifecycleError,
    RejectionPolicy,
    Role,
    SchedulingError,
    Tour,
    Visitor,
    Worker,
    ZooDayError,
)

__all__ = [
    "Simulation",
    "DayReport",
    "DayConfig",
    "DayContext",
    "DEFAULT_DURATIONS",
    "DEFAULT_PRICES",
    "EntityRegistry",
    "ConflictTable",
    "default_conflicts",
    "TourLedger",
    "PricingPolicy",
    "RevenueAccountant",
    "sample_indices",
    "EventLog",
    "Event",
    "EventType",
    "render_event",
    "admit_tour",
    "make_shift_system",
    "Animal",
    "AnimalKind",
    "Worker",
    "Role",
    "Visitor",
    "Tour",
    "CategoryKey",
    "ChargePolicy",
    "RejectionPolicy",
    "ZooDayError",
    "ConfigurationError",
    "LifecycleError",
    "SchedulingError",
]
