from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from clickerengine.automator import Automator

if TYPE_CHECKING:
    from clickerengine.currency import Currency
    from clickerengine.item import Item
    from clickerengine.world import World


@dataclass
class ClickProfile:
    """Manual process() calls per second, by generator name."""

    targets: dict[str, float] = field(default_factory=dict)

    def get_clicks(self, duration: float) -> dict[str, int]:
        """Return number of clicks per generator for the given duration."""
        result: dict[str, int] = {}
        for generator, cps in self.targets.items():
            clicks = int(cps * duration)
            if clicks > 0:
                result[generator] = clicks
        return result


@dataclass(frozen=True)
class PurchaseOption:
    """Read-only view of an item that could be levelled up."""

    name: str
    kind: str
    level: int
    max_level: int
    price: int
    affordable: bool

    @classmethod
    def of(cls, item: Item, wallet: Currency) -> PurchaseOption:
        price = item.price
        return cls(
            name=item.name,
            kind="automator" if isinstance(item, Automator) else "generator",
            level=item.item_level,
            max_level=item.max_item_level,
            price=price,
            affordable=wallet.value >= price,
        )


class Strategy(ABC):
    """Base class for simulation purchase strategies."""

    @abstractmethod
    def decide_purchases(
        self, world: World, options: list[PurchaseOption]
    ) -> list[str]:
        """Return ordered list of item names to buy."""
        ...

    @abstractmethod
    def describe(self) -> str: ...


class NeverBuy(Strategy):
    """Idle: let the automators run and never spend."""

    def decide_purchases(
        self, world: World, options: list[PurchaseOption]
    ) -> list[str]:
        return []

    def describe(self) -> str:
        return "NeverBuy"


class GreedyCheapest(Strategy):
    """Buy the cheapest affordable level first."""

    def __init__(self, kinds: set[str] | None = None) -> None:
        self.kinds = kinds

    def decide_purchases(
        self, world: World, options: list[PurchaseOption]
    ) -> list[str]:
        affordable = [
            o for o in options
            if o.affordable and (self.kinds is None or o.kind in self.kinds)
        ]
        return [o.name for o in sorted(affordable, key=lambda o: o.price)]

    def describe(self) -> str:
        if self.kinds:
            return f"GreedyCheapest({', '.join(sorted(self.kinds))})"
        return "GreedyCheapest"


class PriorityList(Strategy):
    """Follow a designer-specified upgrade order."""

    def __init__(
        self,
        priorities: list[tuple[str, int]],
        fallback: Strategy | None = None,
    ) -> None:
        self.priorities = priorities  # (item name, target level)
        self.fallback = fallback

    def decide_purchases(
        self, world: World, options: list[PurchaseOption]
    ) -> list[str]:
        by_name = {o.name: o for o in options}

        for name, target_level in self.priorities:
            option = by_name.get(name)
            if option is None or option.level >= target_level:
                continue
            # Save up for the first unmet priority.
            return [name] if option.affordable else []

        if self.fallback:
            return self.fallback.decide_purchases(world, options)
        return []

    def describe(self) -> str:
        items = ", ".join(f"{name}@{level}" for name, level in self.priorities)
        return f"PriorityList([{items}])"


class CustomStrategy(Strategy):
    """Strategy defined by a callable."""

    def __init__(
        self,
        decide_fn: Callable[[World, list[PurchaseOption]], list[str]] | None = None,
        name: str = "Custom",
    ) -> None:
        self._decide_fn = decide_fn
        self._name = name

    def decide_purchases(
        self, world: World, options: list[PurchaseOption]
    ) -> list[str]:
        if self._decide_fn:
            return self._decide_fn(world, options)
        return []

    def describe(self) -> str:
        return self._name


STRATEGY_REGISTRY: dict[str, type[Strategy]] = {
    "never": NeverBuy,
    "greedy_cheapest": GreedyCheapest,
    "priority_list": PriorityList,
    "custom": CustomStrategy,
}
