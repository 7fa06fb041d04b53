from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clickerengine._types import AmountLike, as_amount
from clickerengine.errors import InvalidConfigurationError
from clickerengine.generator import Generator
from clickerengine.item import DEFAULT_PRICE_MULTIPLIER, Item

if TYPE_CHECKING:
    from clickerengine.world import World

logger = logging.getLogger(__name__)

# Positive tick rates never drop below this many seconds.
MIN_TICK_RATE = 0.01


@dataclass
class AutomatorConfig:
    """Construction parameters for an automator.

    With ``tick_rate_multiplier`` left as None the automator ticks every
    ``tick_rate`` seconds regardless of level. Setting it makes the
    automator level-gated: it is idle at level 0 and each level above 1
    divides the interval by the multiplier.
    """

    generator: Generator | None = None
    name: str = "Nameless automator"
    description: str = ""
    tick_rate: float = 1.0
    tick_rate_multiplier: float | None = None
    max_level: int | None = None
    base_price: AmountLike = 1
    price_multiplier: float = DEFAULT_PRICE_MULTIPLIER
    initial_level: int = 0
    enabled: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.generator is None:
            errors.append("Automator needs a generator to automate")
        if not self.name:
            errors.append("Automator name cannot be empty")
        if self.tick_rate_multiplier is not None and self.tick_rate_multiplier <= 0:
            errors.append(
                f"Tick rate multiplier must be positive, got {self.tick_rate_multiplier}"
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
        if self.initial_level < 0:
            errors.append(f"Initial level cannot be negative, got {self.initial_level}")
        return errors


class Automator(Item):
    """Fixed-interval scheduler that processes one generator."""

    def __init__(self, world: World, config: AutomatorConfig) -> None:
        errors = config.validate()
        if config.generator is not None and config.generator.world is not world:
            errors.append(f"Generator {config.generator.name!r} belongs to another world")
        if errors:
            raise InvalidConfigurationError("AutomatorConfig", errors)

        super().__init__(
            world,
            config.name,
            base_price=config.base_price,
            price_multiplier=config.price_multiplier,
            max_item_level=config.max_level,
            description=config.description,
        )
        self._generator: Generator = config.generator
        self._tick_rate = 0.0
        self.tick_rate = config.tick_rate
        self._tick_rate_multiplier = config.tick_rate_multiplier
        self._tick_timer = 0.0
        self._enabled = False
        self.item_level = config.initial_level

        if config.enabled:
            self.enable()

    @property
    def generator(self) -> Generator:
        return self._generator

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @tick_rate.setter
    def tick_rate(self, seconds: float) -> None:
        self._tick_rate = max(seconds, 0.0)

    @property
    def tick_rate_multiplier(self) -> float | None:
        return self._tick_rate_multiplier

    @property
    def tick_timer(self) -> float:
        return self._tick_timer

    @property
    def level_gated(self) -> bool:
        return self._tick_rate_multiplier is not None

    @property
    def effective_tick_rate(self) -> float | None:
        """Seconds between ticks at the current level, None while idle.

        A zero rate means the automator never ticks. Positive rates are
        floored at MIN_TICK_RATE.
        """
        if self._tick_rate_multiplier is not None and self.item_level == 0:
            return None
        if self._tick_rate == 0.0:
            return 0.0
        if self._tick_rate_multiplier is None:
            return max(self._tick_rate, MIN_TICK_RATE)
        try:
            divisor = self._tick_rate_multiplier ** (self.item_level - 1)
        except OverflowError:
            return MIN_TICK_RATE
        if divisor == 0.0:
            return math.inf
        return max(self._tick_rate / divisor, MIN_TICK_RATE)

    @property
    def timer_percentage(self) -> float:
        """Progress toward the next tick, for progress bars."""
        rate = self.effective_tick_rate
        if rate is None:
            return 0.0
        if rate == 0.0:
            return 1.0
        return self._tick_timer / rate

    def _restore(self, tick_timer: float) -> None:
        """Reinstate the in-flight timer from a saved snapshot."""
        self._tick_timer = max(tick_timer, 0.0)

    def enable(self) -> None:
        if self._enabled:
            return
        world = self.world
        if world is not None:
            world.add_automator(self)
        self._enabled = True

    def disable(self) -> None:
        if not self._enabled:
            return
        world = self.world
        if world is not None:
            world.remove_automator(self)
        self._enabled = False

    def update(self, delta: float) -> None:
        """Advance the timer by *delta* seconds, firing every elapsed tick."""
        if not self._enabled:
            return
        rate = self.effective_tick_rate
        if rate is None or rate <= 0.0:
            return

        self._tick_timer += delta
        fired = 0
        while self._tick_timer >= rate:
            self._tick_timer -= rate
            self._generator.process()
            fired += 1
        if fired > 1:
            logger.debug("%s caught up %d ticks", self.name, fired)
