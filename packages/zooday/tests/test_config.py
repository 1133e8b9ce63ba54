"""Tests for DayConfig and DayClock."""
from __future__ import annotations

import random

import pytest
from zooday.clock import DayClock
from zooday.config import DEFAULT_DURATIONS, DayConfig
from zooday.types import (
    CategoryKey,
    ChargePolicy,
    ConfigurationError,
    RejectionPolicy,
    Role,
)


class TestDayConfig:
    def test_defaults(self) -> None:
        config = DayConfig()
        assert config.day_length == 120
        assert config.tour_length == 10
        assert config.guest_count == 5
        assert config.category_key is CategoryKey.KIND
        assert config.charge_policy is ChargePolicy.ALL_VISITORS
        assert config.rejection_policy is RejectionPolicy.HOLD

    def test_default_durations(self) -> None:
        config = DayConfig()
        assert config.duration_for(Role.DOCTOR) == 5
        assert config.duration_for(Role.FEEDER) == 10
        assert config.duration_for(Role.CLEANER) == 2

    def test_durations_read_only(self) -> None:
        config = DayConfig()
        with pytest.raises(TypeError):
            config.durations[Role.DOCTOR] = 99  # type: ignore[index]
        assert config.duration_for(Role.DOCTOR) == 5
        assert DEFAULT_DURATIONS[Role.DOCTOR] == 5

    def test_durations_copied_from_caller(self) -> None:
        table = {Role.DOCTOR: 5}
        config = DayConfig(durations=table)
        table[Role.DOCTOR] = 99
        assert config.duration_for(Role.DOCTOR) == 5

    def test_missing_role_duration(self) -> None:
        config = DayConfig(durations={Role.DOCTOR: 5})
        with pytest.raises(ConfigurationError):
            config.duration_for(Role.FEEDER)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"day_length": 0},
            {"tour_length": 0},
            {"guest_count": 0},
            {"durations": {Role.DOCTOR: 0}},
        ],
    )
    def test_invalid_values_raise(self, kwargs) -> None:
        with pytest.raises(ConfigurationError):
            DayConfig(**kwargs)


class TestDayClock:
    def test_starts_before_first_tick(self) -> None:
        clock = DayClock(3)
        assert clock.tick_number == -1
        assert not clock.finished

    def test_advance_to_end(self) -> None:
        clock = DayClock(3)
        assert [clock.advance() for _ in range(3)] == [0, 1, 2]
        assert clock.finished

    def test_advance_past_end_raises(self) -> None:
        clock = DayClock(1)
        clock.advance()
        with pytest.raises(ValueError):
            clock.advance()

    def test_invalid_length(self) -> None:
        with pytest.raises(ValueError):
            DayClock(0)

    def test_context(self) -> None:
        clock = DayClock(5)
        rng = random.Random(3)
        clock.advance()
        ctx = clock.context(rng)
        assert ctx.tick_number == 0
        assert ctx.day_length == 5
        assert ctx.random is rng
