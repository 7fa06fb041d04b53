from __future__ import annotations

from clickerengine._types import amount_str
from clickerengine.report import SimulationReport


def format_text_report(report: SimulationReport) -> str:
    """Format a simulation report for console output."""
    lines: list[str] = []

    lines.append("=" * 30 + " clickerengine Simulation Report " + "=" * 30)
    lines.append(f"Strategy: {report.strategy_description}")
    lines.append(f"Wallet: {report.wallet}")
    lines.append(f"Result: {report.outcome} at {report.total_time:.1f}s")
    lines.append("")

    # Balances
    if report.final_values:
        lines.append("CURRENCIES:")
        for name, value in report.final_values.items():
            lines.append(f"  {name:.<30s} {amount_str(value)}")
        lines.append("")

    # Levels
    if report.final_levels:
        lines.append("LEVELS:")
        for name, level in report.final_levels.items():
            lines.append(f"  {name:.<30s} {level}")
        lines.append("")

    # Purchase summary
    lines.append("PURCHASES:")
    lines.append(f"  Total: {len(report.purchases)}")
    lines.append(f"  Spent: {amount_str(report.total_spent)}")
    lines.append(f"  Rate: {report.purchases_per_minute:.1f}/min")
    lines.append(f"  Max gap: {report.max_purchase_gap:.1f}s")
    lines.append(f"  Mean gap: {report.mean_purchase_gap:.1f}s")

    return "\n".join(lines)
