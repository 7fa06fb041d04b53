from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickerengine._types import AmountLike, amount_str, as_amount, product, truncate
from clickerengine.errors import InvalidConfigurationError

if TYPE_CHECKING:
    from clickerengine.world import World


@dataclass
class CurrencyConfig:
    """Construction parameters for a currency."""

    name: str = "Gold"
    initial_value: AmountLike = 0

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.name:
            errors.append("Currency name cannot be empty")
        try:
            as_amount(self.initial_value)
        except ValueError as exc:
            errors.append(str(exc))
        return errors


class Currency:
    """Arbitrary-precision accumulator of a named resource.

    The value is a plain Python ``int`` and is never clamped: subtracting
    past zero is allowed, callers check sufficiency first.
    """

    def __init__(self, world: World, config: CurrencyConfig | None = None) -> None:
        config = config or CurrencyConfig()
        errors = config.validate()
        if errors:
            raise InvalidConfigurationError("CurrencyConfig", errors)

        self._world_ref = weakref.ref(world)
        self._name = config.name
        self._value = as_amount(config.initial_value)
        world.add_currency(self)

    @property
    def world(self) -> World | None:
        return self._world_ref()

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> int:
        return self._value

    def amount_as_string(self) -> str:
        """Exact base-10 value, no grouping or abbreviation."""
        return amount_str(self._value)

    def add(self, amount: AmountLike) -> None:
        self._value += as_amount(amount)

    def sub(self, amount: AmountLike) -> None:
        self._value -= as_amount(amount)

    def multiply(self, factor: float) -> None:
        self._value = truncate(product(self._value, factor))

    def _set(self, value: AmountLike) -> None:
        # Privileged overwrite for restore and test setup.
        self._value = as_amount(value)

    def __str__(self) -> str:
        return f"{self._name}: {self.amount_as_string()}"

    def __repr__(self) -> str:
        return f"Currency(name={self._name!r}, value={self.amount_as_string()})"
