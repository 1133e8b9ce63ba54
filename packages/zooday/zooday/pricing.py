"""PricingPolicy - ticket price per worker role."""
from __future__ import annotations

from typing import Mapping

from zooday.types import ConfigurationError, Role

DEFAULT_PRICES: dict[Role, int] = {
    Role.DOCTOR: 30,
    Role.FEEDER: 20,
    Role.CLEANER: 10,
}


class PricingPolicy:
    """Fixed role -> price lookup. Unlisted roles pay ``default_price``."""

    def __init__(
        self, prices: Mapping[Role, int] | None = None, default_price: int = 10
    ) -> None:
        table = dict(DEFAULT_PRICES if prices is None else prices)
        for role, price in table.items():
            if price < 0:
                raise ConfigurationError(
                    f"price for {role.value} must be >= 0, got {price}"
                )
        if default_price < 0:
            raise ConfigurationError(f"default_price must be >= 0, got {default_price}")
        self._prices = table
        self._default = default_price

    @property
    def default_price(self) -> int:
        return self._default

    def price_for(self, role: Role) -> int:
        return self._prices.get(role, self._default)
