from __future__ import annotations

import logging
import sys
import weakref
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from clickerengine._types import (
    AmountLike,
    amount_str,
    as_amount,
    growth,
    product,
    truncate,
)
from clickerengine.errors import InvalidArgumentError

if TYPE_CHECKING:
    from clickerengine.currency import Currency
    from clickerengine.world import World

logger = logging.getLogger(__name__)

DEFAULT_PRICE_MULTIPLIER = 1.145
UNLIMITED_LEVEL = sys.maxsize


class PurchaseStatus(Enum):
    OK = auto()
    INSUFFICIENT_FUNDS = auto()
    MAX_LEVEL_REACHED = auto()


@dataclass(frozen=True)
class PurchaseResult:
    """Outcome of a purchase attempt."""

    status: PurchaseStatus
    price: int = 0
    level: int = 0

    @property
    def success(self) -> bool:
        return self.status is PurchaseStatus.OK


def scaled_price(base_price: int, multiplier: float, level: int) -> int:
    """Price = base_price * multiplier ** level, truncated toward zero."""
    return truncate(product(base_price, growth(multiplier, level)))


class Item:
    """Levelled, purchasable unit shared by generators and automators."""

    def __init__(
        self,
        world: World,
        name: str,
        base_price: AmountLike = 1,
        price_multiplier: float = DEFAULT_PRICE_MULTIPLIER,
        max_item_level: int | None = None,
        description: str = "",
    ) -> None:
        self._world_ref = weakref.ref(world)
        self._name = ""
        self._base_price = 1
        self._item_level = 0
        self._max_item_level = UNLIMITED_LEVEL
        self.name = name
        self.description = description
        self.base_price = base_price
        self.price_multiplier = price_multiplier
        if max_item_level is not None:
            self.max_item_level = max_item_level

    @property
    def world(self) -> World | None:
        """Owning world, or None once it has been garbage collected."""
        return self._world_ref()

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if not value:
            raise InvalidArgumentError("Item name cannot be None or empty")
        self._name = value

    @property
    def base_price(self) -> int:
        return self._base_price

    @base_price.setter
    def base_price(self, value: AmountLike) -> None:
        if value is None:
            raise InvalidArgumentError("Base price cannot be None")
        amount = as_amount(value)
        if amount <= 0:
            raise InvalidArgumentError(f"Base price must be positive, got {amount}")
        self._base_price = amount

    @property
    def max_item_level(self) -> int:
        return self._max_item_level

    @max_item_level.setter
    def max_item_level(self, value: int) -> None:
        if value <= 0:
            raise InvalidArgumentError(
                f"Max item level must be greater than zero, got {value}"
            )
        self._max_item_level = value
        # Lowering the ceiling pulls the current level down with it.
        if self._item_level > value:
            self._item_level = value

    @property
    def item_level(self) -> int:
        return self._item_level

    @item_level.setter
    def item_level(self, value: int) -> None:
        self._item_level = min(max(value, 0), self._max_item_level)

    @property
    def price(self) -> int:
        """Price of the next level.

        Undefined for astronomically high levels, such as a maximized item
        with no level cap: reading it then raises InvalidArgumentError.
        """
        return scaled_price(self._base_price, self.price_multiplier, self._item_level)

    @property
    def is_maxed(self) -> bool:
        return self._item_level >= self._max_item_level

    def upgrade(self) -> None:
        if self._item_level < self._max_item_level:
            self._item_level += 1

    def downgrade(self) -> None:
        if self._item_level > 0:
            self._item_level -= 1

    def maximize(self) -> None:
        self._item_level = self._max_item_level

    def buy_with(self, currency: Currency) -> PurchaseResult:
        """Pay for one level with *currency*. Never raises for lack of funds."""
        if currency is None:
            raise InvalidArgumentError("Currency cannot be None")
        if self.is_maxed:
            return PurchaseResult(PurchaseStatus.MAX_LEVEL_REACHED, level=self._item_level)

        price = self.price
        if currency.value < price:
            return PurchaseResult(
                PurchaseStatus.INSUFFICIENT_FUNDS, price=price, level=self._item_level
            )

        currency.sub(price)
        self.upgrade()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "%s bought level %d for %s %s",
                self._name,
                self._item_level,
                amount_str(price),
                currency.name,
            )
        return PurchaseResult(PurchaseStatus.OK, price=price, level=self._item_level)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, level={self._item_level})"
