from __future__ import annotations

import logging

from clickerengine.currency import Currency
from clickerengine.errors import InvalidArgumentError
from clickerengine.item import Item
from clickerengine.metrics import MetricsCollector
from clickerengine.report import SimulationReport, build_report
from clickerengine.strategy import ClickProfile, PurchaseOption, Strategy
from clickerengine.world import World

logger = logging.getLogger(__name__)

MAX_TICKS = 10_000_000
# Purchase rounds per tick; a greedy strategy may buy many cheap levels at once.
MAX_PURCHASE_ROUNDS = 1_000


class Simulation:
    """Advances a world in fixed steps while a strategy spends one wallet."""

    def __init__(
        self,
        world: World,
        strategy: Strategy,
        wallet: Currency | str,
        duration: float,
        tick_resolution: float = 1.0,
        snapshot_interval: float | None = None,
        click_profile: ClickProfile | None = None,
    ) -> None:
        if tick_resolution <= 0:
            raise InvalidArgumentError(
                f"Tick resolution must be positive, got {tick_resolution}"
            )
        if isinstance(wallet, str):
            found = world.get_currency(wallet)
            if found is None:
                raise InvalidArgumentError(f"Unknown wallet currency: {wallet!r}")
            wallet = found

        self.world = world
        self.strategy = strategy
        self.wallet = wallet
        self.duration = duration
        self.tick_resolution = tick_resolution
        self.click_profile = click_profile
        self.time = 0.0
        self.collector = MetricsCollector(
            snapshot_interval=snapshot_interval or tick_resolution
        )

    def purchase_options(self) -> list[PurchaseOption]:
        return [
            PurchaseOption.of(item, self.wallet)
            for item in self.world.items()
            if not item.is_maxed
        ]

    def run(self) -> SimulationReport:
        logger.info(
            "Simulating %s for %.1fs with %s",
            self.world.name,
            self.duration,
            self.strategy.describe(),
        )
        self.collector.take_snapshot(self.world, self.time)
        tick_count = 0

        while self.time < self.duration:
            tick_count += 1
            if tick_count > MAX_TICKS:
                break

            # 1. Advance time
            step = min(self.tick_resolution, self.duration - self.time)
            self.world.update(step)
            self.time += step

            # 2. Manual clicks
            if self.click_profile is not None:
                self._process_clicks(step)

            # 3. Spend
            self._make_purchases()

            # 4. Record metrics
            self.collector.record_tick(self.world, self.time)

        if self.collector.last_snapshot_time != self.time:
            self.collector.take_snapshot(self.world, self.time)

        outcome = "Duration reached" if self.time >= self.duration else "Max ticks reached"
        report = build_report(
            collector=self.collector,
            strategy_description=self.strategy.describe(),
            wallet=self.wallet.name,
            outcome=outcome,
            total_time=self.time,
        )
        logger.info(
            "Simulation finished: %s after %.1fs, %d purchases",
            outcome,
            self.time,
            len(report.purchases),
        )
        return report

    def _make_purchases(self) -> None:
        for _ in range(MAX_PURCHASE_ROUNDS):
            to_buy = self.strategy.decide_purchases(self.world, self.purchase_options())
            bought = False
            for name in to_buy:
                item = self._find_item(name)
                if item is None:
                    continue
                result = item.buy_with(self.wallet)
                if result.success:
                    bought = True
                    self.collector.record_purchase(
                        time=self.time,
                        item=item.name,
                        price=result.price,
                        level_after=result.level,
                        wallet_after=self.wallet.value,
                    )
            if not bought:
                return

    def _process_clicks(self, duration: float) -> None:
        for name, count in self.click_profile.get_clicks(duration).items():
            generator = self.world.get_generator(name)
            if generator is None:
                continue
            for _ in range(count):
                generator.process()

    def _find_item(self, name: str) -> Item | None:
        return self.world.get_generator(name) or self.world.get_automator(name)
