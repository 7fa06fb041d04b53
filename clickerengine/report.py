from __future__ import annotations

from dataclasses import dataclass, field

from clickerengine.metrics import (
    CurrencySnapshot,
    LevelSnapshot,
    MetricsCollector,
    PurchaseEvent,
)


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    strategy_description: str = ""
    wallet: str = ""
    outcome: str = ""
    total_time: float = 0.0

    # Raw metrics
    currency_snapshots: list[CurrencySnapshot] = field(default_factory=list)
    level_snapshots: list[LevelSnapshot] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)

    # Derived metrics
    final_values: dict[str, int] = field(default_factory=dict)
    final_levels: dict[str, int] = field(default_factory=dict)
    purchase_gaps: list[float] = field(default_factory=list)
    max_purchase_gap: float = 0.0
    mean_purchase_gap: float = 0.0
    purchases_per_minute: float = 0.0
    total_spent: int = 0

    def currency_series(self, currency: str) -> list[tuple[float, int]]:
        """Return (time, value) series for a currency."""
        return [
            (s.time, s.value) for s in self.currency_snapshots if s.currency == currency
        ]

    def level_series(self, item: str) -> list[tuple[float, int]]:
        """Return (time, level) series for a generator or automator."""
        return [(s.time, s.level) for s in self.level_snapshots if s.item == item]


def build_report(
    collector: MetricsCollector,
    strategy_description: str,
    wallet: str,
    outcome: str,
    total_time: float,
) -> SimulationReport:
    """Build a SimulationReport from collected metrics."""
    purchase_gaps: list[float] = []
    purchase_times = sorted(p.time for p in collector.purchases)
    if purchase_times:
        purchase_gaps.append(purchase_times[0])  # gap from t=0 to first purchase
        for i in range(1, len(purchase_times)):
            purchase_gaps.append(purchase_times[i] - purchase_times[i - 1])

    max_gap = max(purchase_gaps) if purchase_gaps else 0.0
    mean_gap = (sum(purchase_gaps) / len(purchase_gaps)) if purchase_gaps else 0.0
    ppm = (len(collector.purchases) / total_time * 60.0) if total_time > 0 else 0.0

    # Last snapshot per name wins.
    final_values = {s.currency: s.value for s in collector.currency_snapshots}
    final_levels = {s.item: s.level for s in collector.level_snapshots}

    return SimulationReport(
        strategy_description=strategy_description,
        wallet=wallet,
        outcome=outcome,
        total_time=total_time,
        currency_snapshots=collector.currency_snapshots,
        level_snapshots=collector.level_snapshots,
        purchases=collector.purchases,
        final_values=final_values,
        final_levels=final_levels,
        purchase_gaps=purchase_gaps,
        max_purchase_gap=max_gap,
        mean_purchase_gap=mean_gap,
        purchases_per_minute=ppm,
        total_spent=sum(p.price for p in collector.purchases),
    )
