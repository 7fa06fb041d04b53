from __future__ import annotations

import argparse
import importlib
import logging
import sys

from clickerengine.formatting import format_text_report
from clickerengine.simulation import Simulation
from clickerengine.strategy import STRATEGY_REGISTRY, ClickProfile, Strategy
from clickerengine.world import World

# Registry entries that build without arguments.
CLI_STRATEGIES = ("greedy_cheapest", "never")


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger that writes to stderr.

    This is safe to call multiple times.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    else:
        root.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clickerengine",
        description="clickerengine: idle economy simulation CLI",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at DEBUG level"
    )
    sub = parser.add_subparsers(dest="command")

    sim = sub.add_parser("simulate", help="Run a simulation")
    sim.add_argument("world_module", help="Python module with define_world()")
    sim.add_argument(
        "--wallet", required=True, help="Currency the strategy spends on upgrades"
    )
    sim.add_argument(
        "--strategy",
        default="greedy_cheapest",
        choices=CLI_STRATEGIES,
        help="Strategy to use (default: greedy_cheapest)",
    )
    sim.add_argument(
        "--duration", type=float, default=3600, help="Simulated time (s)"
    )
    sim.add_argument(
        "--tick-resolution", type=float, default=1.0, help="Seconds per tick"
    )
    sim.add_argument("--cps", type=float, default=0.0, help="Clicks per second")
    sim.add_argument(
        "--click-target", default=None, help="Generator to click (default: first)"
    )
    sim.add_argument("--plot", default=None, help="Plot output path (PNG)")

    return parser


def load_world(module_path: str) -> World:
    """Import module and call define_world()."""
    mod = importlib.import_module(module_path)
    if not hasattr(mod, "define_world"):
        print(f"Error: module {module_path!r} has no define_world() function")
        sys.exit(1)
    return mod.define_world()


def build_strategy(name: str) -> Strategy:
    return STRATEGY_REGISTRY[name]()


def build_click_profile(
    cps: float, click_target: str | None, world: World
) -> ClickProfile | None:
    if cps <= 0:
        return None
    if click_target:
        return ClickProfile(targets={click_target: cps})
    if world.generators:
        return ClickProfile(targets={world.generators[0].name: cps})
    return None


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "simulate":
        world = load_world(args.world_module)
        if world.get_currency(args.wallet) is None:
            print(f"Error: world has no currency named {args.wallet!r}")
            sys.exit(1)

        sim = Simulation(
            world=world,
            strategy=build_strategy(args.strategy),
            wallet=args.wallet,
            duration=args.duration,
            tick_resolution=args.tick_resolution,
            click_profile=build_click_profile(args.cps, args.click_target, world),
        )
        report = sim.run()
        print(format_text_report(report))

        if args.plot:
            from clickerengine.visualization import plot_simulation
            plot_simulation(report, args.plot)
            print(f"\nPlot saved to {args.plot}")


if __name__ == "__main__":
    main()
