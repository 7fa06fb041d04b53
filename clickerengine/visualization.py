from __future__ import annotations

from clickerengine.report import SimulationReport


def plot_simulation(
    report: SimulationReport,
    output_path: str | None = None,
) -> None:
    """Generate a 3-panel matplotlib visualization of simulation results.

    Requires matplotlib (optional dependency).
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install clickerengine[viz]"
        )

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    fig.suptitle(
        f"clickerengine Simulation: {report.strategy_description}",
        fontsize=14,
    )

    # 1. Currency values over time (log scale)
    ax1 = axes[0]
    currency_names = sorted({s.currency for s in report.currency_snapshots})
    for name in currency_names:
        series = report.currency_series(name)
        if series:
            times, values = zip(*series)
            # Values can outgrow float range; clamp for plotting only.
            positive_values = [max(_as_float(v), 1e-10) for v in values]
            ax1.plot(times, positive_values, label=name)
    ax1.set_yscale("log")
    ax1.set_xlabel("Time (s)")
    ax1.set_ylabel("Value")
    ax1.set_title("Currency Values")
    ax1.legend(fontsize=8)
    ax1.grid(True, alpha=0.3)

    # 2. Item levels over time
    ax2 = axes[1]
    item_names = sorted({s.item for s in report.level_snapshots})
    for name in item_names:
        series = report.level_series(name)
        if series:
            times, levels = zip(*series)
            ax2.step(times, levels, where="post", label=name)
    ax2.set_xlabel("Time (s)")
    ax2.set_ylabel("Level")
    ax2.set_title("Item Levels")
    ax2.legend(fontsize=8)
    ax2.grid(True, alpha=0.3)

    # 3. Purchase timeline
    ax3 = axes[2]
    if report.purchases:
        times = [p.time for p in report.purchases]
        items = [p.item for p in report.purchases]
        item_types = sorted(set(items))
        y_map = {name: i for i, name in enumerate(item_types)}
        ys = [y_map[name] for name in items]
        ax3.scatter(times, ys, s=10, alpha=0.6)
        ax3.set_yticks(range(len(item_types)))
        ax3.set_yticklabels(item_types, fontsize=7)
        ax3.set_xlabel("Time (s)")
        ax3.set_title("Purchase Timeline")
        ax3.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        plt.savefig(output_path, dpi=150)
    else:
        plt.show()


def _as_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return float("inf")
