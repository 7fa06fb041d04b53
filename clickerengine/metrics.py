from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from clickerengine.world import World


@dataclass
class CurrencySnapshot:
    time: float
    currency: str
    value: int


@dataclass
class LevelSnapshot:
    time: float
    item: str
    level: int


@dataclass
class PurchaseEvent:
    time: float
    item: str
    price: int
    level_after: int
    wallet_after: int


class MetricsCollector:
    """Collects simulation metrics at a configurable interval."""

    def __init__(self, snapshot_interval: float = 1.0) -> None:
        self.snapshot_interval = snapshot_interval
        self._last_snapshot_time: float | None = None

        self.currency_snapshots: list[CurrencySnapshot] = []
        self.level_snapshots: list[LevelSnapshot] = []
        self.purchases: list[PurchaseEvent] = []

    @property
    def last_snapshot_time(self) -> float | None:
        return self._last_snapshot_time

    def record_tick(self, world: World, time: float) -> None:
        """Record a snapshot if enough time has passed since the last one."""
        if (
            self._last_snapshot_time is None
            or time - self._last_snapshot_time >= self.snapshot_interval
        ):
            self.take_snapshot(world, time)

    def record_purchase(
        self, time: float, item: str, price: int, level_after: int, wallet_after: int
    ) -> None:
        self.purchases.append(
            PurchaseEvent(
                time=time,
                item=item,
                price=price,
                level_after=level_after,
                wallet_after=wallet_after,
            )
        )

    def take_snapshot(self, world: World, time: float) -> None:
        self._last_snapshot_time = time
        for currency in world.currencies:
            self.currency_snapshots.append(
                CurrencySnapshot(time=time, currency=currency.name, value=currency.value)
            )
        for item in world.items():
            self.level_snapshots.append(
                LevelSnapshot(time=time, item=item.name, level=item.item_level)
            )
