"""RevenueAccountant - picks paying visitors and keeps the day's earnings."""
from __future__ import annotations

import random
from typing import Sequence

from zooday.types import ChargePolicy, ConfigurationError, Visitor


def sample_indices(n: int, k: int, rng: random.Random) -> list[int]:
    """Uniform k-subset of range(n) by reservoir sampling, in ascending order.

    Returns every index when n <= k. Draws ``rng.randrange`` once per index
    past the first k.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    if n <= k:
        return list(range(n))
    reservoir = list(range(k))
    for i in range(k, n):
        j = rng.randrange(i + 1)
        if j < k:
            reservoir[j] = i
    return sorted(reservoir)


class RevenueAccountant:
    def __init__(
        self,
        visitors: Sequence[Visitor],
        policy: ChargePolicy = ChargePolicy.ALL_VISITORS,
        guest_count: int = 5,
    ) -> None:
        if guest_count < 1:
            raise ConfigurationError(f"guest_count must be >= 1, got {guest_count}")
        self._visitors = list(visitors)
        self._policy = policy
        self._guest_count = guest_count
        self._total = 0

    @property
    def policy(self) -> ChargePolicy:
        return self._policy

    @property
    def total_earnings(self) -> int:
        return self._total

    def select(self, rng: random.Random) -> list[Visitor]:
        """Visitors who will pay for the next tour, in roster order."""
        if self._policy is ChargePolicy.ALL_VISITORS:
            return list(self._visitors)
        indices = sample_indices(len(self._visitors), self._guest_count, rng)
        return [self._visitors[i] for i in indices]

    def charge(self, price: int, rng: random.Random) -> list[Visitor]:
        """Charge the selected visitors *price* each. Returns who paid."""
        if price < 0:
            raise ValueError(f"price must be >= 0, got {price}")
        charged = self.select(rng)
        for visitor in charged:
            visitor.money_spent += price
        self._total += price * len(charged)
        return charged
