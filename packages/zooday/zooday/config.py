"""Day configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from zooday.types import (
    CategoryKey,
    ChargePolicy,
    ConfigurationError,
    RejectionPolicy,
    Role,
)

DEFAULT_DURATIONS: dict[Role, int] = {
    Role.DOCTOR: 5,
    Role.FEEDER: 10,
    Role.CLEANER: 2,
}


@dataclass(frozen=True)
class DayConfig:
    """Immutable configuration for one simulated day.

    Attributes:
        day_length: Number of ticks in the day (ticks 0..day_length-1).
        tour_length: Ticks a recorded tour occupies for conflict checks.
        guest_count: Visitors charged per tour under FIXED_QUOTA.
        durations: Working window length per role.
        category_key: Animal attribute used as the tour's conflict tag.
        charge_policy: Which visitors pay for an admitted tour.
        rejection_policy: Whether a rejected worker keeps its animal.
    """

    day_length: int = 120
    tour_length: int = 10
    guest_count: int = 5
    durations: Mapping[Role, int] = field(
        default_factory=lambda: dict(DEFAULT_DURATIONS)
    )
    category_key: CategoryKey = CategoryKey.KIND
    charge_policy: ChargePolicy = ChargePolicy.ALL_VISITORS
    rejection_policy: RejectionPolicy = RejectionPolicy.HOLD

    def __post_init__(self) -> None:
        if self.day_length <= 0:
            raise ConfigurationError(f"day_length must be positive, got {self.day_length}")
        if self.tour_length <= 0:
            raise ConfigurationError(f"tour_length must be positive, got {self.tour_length}")
        if self.guest_count < 1:
            raise ConfigurationError(f"guest_count must be >= 1, got {self.guest_count}")
        for role, duration in self.durations.items():
            if duration <= 0:
                raise ConfigurationError(
                    f"duration for {role.value} must be positive, got {duration}"
                )
        object.__setattr__(self, "durations", MappingProxyType(dict(self.durations)))

    def duration_for(self, role: Role) -> int:
        """Look up the working window for a role. Raises ConfigurationError if unset."""
        if role not in self.durations:
            raise ConfigurationError(f"No duration configured for role {role.value}")
        return self.durations[role]
