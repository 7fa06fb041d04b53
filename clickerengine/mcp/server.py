"""MCP server wrapping a World for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from mcp.server.fastmcp import FastMCP

from clickerengine._types import amount_str
from clickerengine.automator import Automator
from clickerengine.modifier import GeneratorModifier, WorldModifier
from clickerengine.world import World

# Maximum seconds per wait() call (24 hours)
_MAX_WAIT = 86400
# Maximum cycles per process() call
_MAX_PROCESS = 1000


@dataclass
class _WorldHolder:
    """Holds the world factory and the live world."""

    factory: Callable[[], World]
    world: World
    automators: list[Automator] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.automators = list(self.world.automators)

    def reset(self) -> None:
        self.world = self.factory()
        self.automators = list(self.world.automators)


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_world_info(holder: _WorldHolder) -> dict[str, Any]:
    world = holder.world
    modifiers = []
    for m in world.modifiers:
        entry: dict[str, Any] = {"name": m.name, "kind": m.kind.name}
        if isinstance(m, WorldModifier):
            entry["speed_multiplier"] = m.speed_multiplier
            entry["disable_automation"] = m.disable_automation
        elif isinstance(m, GeneratorModifier):
            entry["generator"] = m.generator.name
            entry["multiplier"] = m.multiplier
        modifiers.append(entry)
    return {
        "name": world.name,
        "currencies": [c.name for c in world.currencies],
        "generators": [
            {
                "name": g.name,
                "description": g.description,
                "currency": g.currency.name,
                "base_amount": amount_str(g.base_amount),
                "amount_multiplier": g.amount_multiplier,
                "probability": g.probability if g.use_probability else None,
                "max_level": g.max_item_level,
            }
            for g in world.generators
        ],
        "automators": [
            {
                "name": a.name,
                "generator": a.generator.name,
                "tick_rate": a.tick_rate,
                "tick_rate_multiplier": a.tick_rate_multiplier,
            }
            for a in world.automators
        ],
        "modifiers": modifiers,
    }


def _tool_get_world_state(holder: _WorldHolder) -> dict[str, Any]:
    world = holder.world
    generators = {}
    for g in world.generators:
        generators[g.name] = {
            "level": g.item_level,
            "price": amount_str(g.price),
            "per_cycle": amount_str(g.expected_amount()),
            "times_processed": g.times_processed,
        }
    automators = {}
    for a in world.automators:
        rate = a.effective_tick_rate
        automators[a.name] = {
            "level": a.item_level,
            "price": amount_str(a.price),
            "enabled": a.enabled,
            "effective_tick_rate": round(rate, 4) if rate is not None else None,
            "timer_percentage": round(a.timer_percentage, 4),
        }
    return {
        "speed_multiplier": world.speed_multiplier,
        "automation_enabled": world.automation_enabled,
        "currencies": {c.name: c.amount_as_string() for c in world.currencies},
        "generators": generators,
        "automators": automators,
        "active_modifiers": [m.name for m in world.active_modifiers()],
    }


def _tool_process(holder: _WorldHolder, generator: str, count: int = 1) -> dict[str, Any]:
    if count < 1:
        return {"error": "Count must be at least 1"}
    if count > _MAX_PROCESS:
        return {"error": f"Count cannot exceed {_MAX_PROCESS}"}

    gen = holder.world.get_generator(generator)
    if gen is None:
        return {"error": f"Unknown generator: {generator!r}"}

    before = gen.currency.value
    for _ in range(count):
        gen.process()
    return {
        "generator": generator,
        "cycles": count,
        "total_earned": amount_str(gen.currency.value - before),
        "new_balance": gen.currency.amount_as_string(),
    }


def _tool_purchase(holder: _WorldHolder, item: str, currency: str) -> dict[str, Any]:
    world = holder.world
    target = world.get_generator(item) or world.get_automator(item)
    if target is None:
        return {"error": f"Unknown item: {item!r}"}
    wallet = world.get_currency(currency)
    if wallet is None:
        return {"error": f"Unknown currency: {currency!r}"}

    result = target.buy_with(wallet)
    response: dict[str, Any] = {
        "success": result.success,
        "status": result.status.name,
        "level": result.level,
        "balance": wallet.amount_as_string(),
    }
    if result.price:
        response["price"] = amount_str(result.price)
    return response


def _tool_wait(holder: _WorldHolder, seconds: float) -> dict[str, Any]:
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds (24h) per call"}

    world = holder.world
    processed_before = {g.name: g.times_processed for g in world.generators}
    world.update(seconds)

    return {
        "waited": seconds,
        "simulated": seconds * world.speed_multiplier,
        "cycles": {
            g.name: g.times_processed - processed_before.get(g.name, 0)
            for g in world.generators
        },
        "currencies": {c.name: c.amount_as_string() for c in world.currencies},
    }


def _tool_set_modifier(holder: _WorldHolder, modifier: str, enabled: bool) -> dict[str, Any]:
    world = holder.world
    target = world.get_modifier(modifier)
    if target is None:
        return {"error": f"Unknown modifier: {modifier!r}"}
    if enabled:
        target.enable()
    else:
        target.disable()
    return {
        "modifier": modifier,
        "enabled": target.enabled,
        "speed_multiplier": world.speed_multiplier,
        "automation_enabled": world.automation_enabled,
    }


def _tool_set_automator(holder: _WorldHolder, automator: str, enabled: bool) -> dict[str, Any]:
    target = _find_automator(holder, automator)
    if target is None:
        return {"error": f"Unknown automator: {automator!r}"}
    if enabled:
        target.enable()
    else:
        target.disable()
    return {"automator": automator, "enabled": target.enabled}


def _find_automator(holder: _WorldHolder, name: str) -> Automator | None:
    # Disabled automators leave the world, so look in the holder.
    for automator in holder.automators:
        if automator.name == name:
            return automator
    return None


def _tool_new_world(holder: _WorldHolder) -> dict[str, Any]:
    holder.reset()
    return {"success": True, "message": "World reset to initial state"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(factory: Callable[[], World]) -> FastMCP:
    """Create an MCP server wrapping a World built by *factory*."""
    holder = _WorldHolder(factory=factory, world=factory())

    mcp = FastMCP(
        name=f"clickerengine: {holder.world.name}",
    )

    @mcp.tool()
    def get_world_info() -> dict[str, Any]:
        """Get static world overview: currencies, generators, automators, modifiers."""
        return _tool_get_world_info(holder)

    @mcp.tool()
    def get_world_state() -> dict[str, Any]:
        """Get current balances, levels, prices, timers and active modifiers."""
        return _tool_get_world_state(holder)

    @mcp.tool()
    def process(generator: str, count: int = 1) -> dict[str, Any]:
        """Run a generator's production cycle N times (max 1000), like clicking it."""
        return _tool_process(holder, generator, count)

    @mcp.tool()
    def purchase(item: str, currency: str) -> dict[str, Any]:
        """Buy one level of a generator or automator, paying with the given currency."""
        return _tool_purchase(holder, item, currency)

    @mcp.tool()
    def wait(seconds: float) -> dict[str, Any]:
        """Advance world time by the given seconds (max 86400); automators catch up."""
        return _tool_wait(holder, seconds)

    @mcp.tool()
    def set_modifier(modifier: str, enabled: bool) -> dict[str, Any]:
        """Enable or disable a modifier by name."""
        return _tool_set_modifier(holder, modifier, enabled)

    @mcp.tool()
    def set_automator(automator: str, enabled: bool) -> dict[str, Any]:
        """Enable or disable an automator by name."""
        return _tool_set_automator(holder, automator, enabled)

    @mcp.tool()
    def new_world() -> dict[str, Any]:
        """Reset the world to its initial state."""
        return _tool_new_world(holder)

    return mcp
