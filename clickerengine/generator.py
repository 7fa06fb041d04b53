from __future__ import annotations

import logging
import random
import zlib
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Callable

from clickerengine._types import (
    AmountLike,
    as_amount,
    fraction,
    growth,
    plus,
    product,
    truncate,
)
from clickerengine.currency import Currency
from clickerengine.errors import InvalidConfigurationError
from clickerengine.item import DEFAULT_PRICE_MULTIPLIER, Item

if TYPE_CHECKING:
    from clickerengine.modifier import GeneratorModifier
    from clickerengine.world import World

logger = logging.getLogger(__name__)

# Banked fractional output pays out one unit once it reaches this.
REMAINDER_THRESHOLD = 0.999


@dataclass
class GeneratorConfig:
    """Construction parameters for a generator.

    ``probability=None`` means the generator always works when levelled.
    ``seed=None`` derives the probability stream from the generator's name
    and registration index, so identical setups replay identically.
    """

    currency: Currency | None = None
    name: str = "Nameless generator"
    description: str = ""
    base_amount: AmountLike = 1
    amount_multiplier: float = 1.1
    max_level: int | None = None
    base_price: AmountLike = 1
    price_multiplier: float = DEFAULT_PRICE_MULTIPLIER
    probability: float | None = None
    use_remainder: bool = True
    initial_level: int = 0
    on_processed: Callable[[Generator], None] | None = None
    seed: int | None = None

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.currency is None:
            errors.append("Generator needs a currency to generate")
        if not self.name:
            errors.append("Generator name cannot be empty")
        try:
            if as_amount(self.base_amount) < 0:
                errors.append(f"Base amount cannot be negative, got {self.base_amount}")
        except ValueError as exc:
            errors.append(f"Base amount: {exc}")
        if self.amount_multiplier <= 0:
            errors.append(
                f"Amount multiplier must be positive, got {self.amount_multiplier}"
            )
        if self.max_level is not None and self.max_level <= 0:
            errors.append(f"Max level must be greater than 0, got {self.max_level}")
        try:
            if as_amount(self.base_price) <= 0:
                errors.append(f"Base price must be positive, got {self.base_price}")
        except ValueError as exc:
            errors.append(f"Base price: {exc}")
        if self.price_multiplier <= 0:
            errors.append(
                f"Price multiplier must be positive, got {self.price_multiplier}"
            )
        if self.probability is not None and not 0.0 <= self.probability <= 1.0:
            errors.append(
                f"Probability should be between 0.0 and 1.0, got {self.probability}"
            )
        if self.initial_level < 0:
            errors.append(f"Initial level cannot be negative, got {self.initial_level}")
        return errors


class Generator(Item):
    """Production unit that turns process() calls into currency."""

    def __init__(self, world: World, config: GeneratorConfig) -> None:
        errors = config.validate()
        if config.currency is not None and config.currency.world is not world:
            errors.append(f"Currency {config.currency.name!r} belongs to another world")
        if errors:
            raise InvalidConfigurationError("GeneratorConfig", errors)

        super().__init__(
            world,
            config.name,
            base_price=config.base_price,
            price_multiplier=config.price_multiplier,
            max_item_level=config.max_level,
            description=config.description,
        )
        self._currency: Currency = config.currency
        self._base_amount = as_amount(config.base_amount)
        self.amount_multiplier = config.amount_multiplier
        self.probability = config.probability if config.probability is not None else 1.0
        self.use_probability = config.probability is not None
        self.use_remainder = config.use_remainder
        self.on_processed = config.on_processed
        self._remainder = 0.0
        self._times_processed = 0
        self._modifiers: list[GeneratorModifier] = []
        self.item_level = config.initial_level

        seed = config.seed
        if seed is None:
            seed = zlib.crc32(f"{config.name}:{len(world.generators)}".encode())
        self._seed = seed
        self._rng = random.Random(seed)

        world.add_generator(self)

    # ── State ────────────────────────────────────────────────────────

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def base_amount(self) -> int:
        return self._base_amount

    @property
    def remainder(self) -> float:
        return self._remainder

    @property
    def times_processed(self) -> int:
        return self._times_processed

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def modifiers(self) -> tuple[GeneratorModifier, ...]:
        return tuple(self._modifiers)

    def _restore(self, remainder: float, times_processed: int) -> None:
        """Reinstate in-flight accumulators from a saved snapshot."""
        self._remainder = remainder
        self._times_processed = times_processed

    # ── Production ───────────────────────────────────────────────────

    def generated_amount(self) -> int:
        """Amount the next processing cycle yields.

        With remainder banking enabled this call is stateful: the fractional
        part of the raw amount is added to the bank, and a full unit is paid
        out once the bank reaches the threshold.
        """
        if self.item_level == 0:
            return 0

        amount = product(self._base_amount, growth(self.amount_multiplier, self.item_level - 1))
        if self.use_remainder:
            self._remainder += fraction(amount)
            if self._remainder >= REMAINDER_THRESHOLD:
                self._remainder -= 1.0
                amount = plus(amount, 1)

        amount = self._apply_modifiers(amount)
        return truncate(amount)

    def expected_amount(self) -> int:
        """Per-cycle output without touching the remainder bank."""
        if self.item_level == 0:
            return 0
        amount = product(self._base_amount, growth(self.amount_multiplier, self.item_level - 1))
        return truncate(self._apply_modifiers(amount))

    def _apply_modifiers(self, amount: Decimal) -> Decimal:
        for modifier in self._modifiers:
            factor = modifier.multiplier
            if factor != 1.0:
                amount = product(amount, factor)
        return amount

    def is_working(self) -> bool:
        if self.item_level == 0:
            return False
        if not self.use_probability:
            return True
        return self._rng.random() < self.probability

    def process(self) -> None:
        """Run one production cycle into the target currency."""
        if not self.is_working():
            return
        self._currency.add(self.generated_amount())
        self._times_processed += 1
        if self.on_processed is not None:
            self.on_processed(self)

    # ── Modifiers ────────────────────────────────────────────────────

    def _attach_modifier(self, modifier: GeneratorModifier) -> None:
        if modifier is not None and modifier not in self._modifiers:
            self._modifiers.append(modifier)

    def _detach_modifier(self, modifier: GeneratorModifier) -> None:
        if modifier in self._modifiers:
            self._modifiers.remove(modifier)
