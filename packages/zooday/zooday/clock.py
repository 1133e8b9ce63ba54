"""DayClock and DayContext for the tick loop."""

import random

from zooday.types import DayContext


class DayClock:
    def __init__(self, day_length: int) -> None:
        if day_length <= 0:
            raise ValueError("day_length must be positive")
        self._day_length = day_length
        self._tick_number = -1

    @property
    def day_length(self) -> int:
        return self._day_length

    @property
    def tick_number(self) -> int:
        """Current tick, or -1 before the first tick."""
        return self._tick_number

    @property
    def finished(self) -> bool:
        return self._tick_number >= self._day_length - 1

    def advance(self) -> int:
        if self.finished:
            raise ValueError("day is already over")
        self._tick_number += 1
        return self._tick_number

    def context(self, rng: random.Random) -> DayContext:
        return DayContext(
            tick_number=self._tick_number,
            day_length=self._day_length,
            random=rng,
        )
