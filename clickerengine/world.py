from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, TypeVar

if TYPE_CHECKING:
    from clickerengine.automator import Automator
    from clickerengine.currency import Currency
    from clickerengine.generator import Generator
    from clickerengine.item import Item
    from clickerengine.modifier import Modifier

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _add(collection: list[T], entity: T | None) -> None:
    if entity is not None and entity not in collection:
        collection.append(entity)


def _remove(collection: list[T], entity: T | None) -> None:
    if entity is not None and entity in collection:
        collection.remove(entity)


def _find(collection: list[T], name: str) -> T | None:
    for entity in collection:
        if entity.name == name:
            return entity
    return None


class World:
    """Owns every currency, generator, automator and modifier, and drives time.

    Collections keep insertion order and behave like sets: adding an entity
    twice or removing an absent one does nothing.
    """

    def __init__(self, name: str = "World") -> None:
        self.name = name
        self._currencies: list[Currency] = []
        self._generators: list[Generator] = []
        self._automators: list[Automator] = []
        self._modifiers: list[Modifier] = []
        self._speed_multiplier = 1.0
        self._automation_suspensions = 0

    # ── Core loop ────────────────────────────────────────────────────

    def update(self, seconds: float) -> None:
        """Advance the world by *seconds* of wall time.

        The elapsed time is scaled by the speed multiplier before it reaches
        the automators. Large steps (offline progress) are fine: automators
        catch up on every tick that fits.
        """
        if seconds <= 0:
            return
        scaled = seconds * self._speed_multiplier
        if not self.automation_enabled:
            return
        for automator in list(self._automators):
            automator.update(scaled)

    # ── Speed and automation ─────────────────────────────────────────

    @property
    def speed_multiplier(self) -> float:
        return self._speed_multiplier

    @property
    def automation_enabled(self) -> bool:
        return self._automation_suspensions == 0

    @property
    def automation_suspensions(self) -> int:
        return self._automation_suspensions

    def _scale_speed(self, factor: float) -> None:
        self._speed_multiplier *= factor

    def _unscale_speed(self, factor: float) -> None:
        self._speed_multiplier /= factor

    def _suspend_automation(self) -> None:
        self._automation_suspensions += 1
        if self._automation_suspensions == 1:
            logger.debug("Automation suspended in %s", self.name)

    def _resume_automation(self) -> None:
        if self._automation_suspensions == 0:
            return
        self._automation_suspensions -= 1
        if self._automation_suspensions == 0:
            logger.debug("Automation resumed in %s", self.name)

    def _restore(self, speed_multiplier: float, automation_suspensions: int) -> None:
        """Reinstate world-level state from a saved snapshot."""
        self._speed_multiplier = speed_multiplier
        self._automation_suspensions = max(automation_suspensions, 0)

    # ── Currencies ───────────────────────────────────────────────────

    @property
    def currencies(self) -> tuple[Currency, ...]:
        return tuple(self._currencies)

    def add_currency(self, currency: Currency | None) -> None:
        _add(self._currencies, currency)

    def remove_currency(self, currency: Currency | None) -> None:
        _remove(self._currencies, currency)

    def remove_all_currencies(self) -> None:
        self._currencies.clear()

    def get_currency(self, name: str) -> Currency | None:
        return _find(self._currencies, name)

    # ── Generators ───────────────────────────────────────────────────

    @property
    def generators(self) -> tuple[Generator, ...]:
        return tuple(self._generators)

    @property
    def generator_count(self) -> int:
        return len(self._generators)

    def add_generator(self, generator: Generator | None) -> None:
        _add(self._generators, generator)

    def remove_generator(self, generator: Generator | None) -> None:
        _remove(self._generators, generator)

    def remove_all_generators(self) -> None:
        self._generators.clear()

    def get_generator(self, name: str) -> Generator | None:
        return _find(self._generators, name)

    # ── Automators ───────────────────────────────────────────────────

    @property
    def automators(self) -> tuple[Automator, ...]:
        return tuple(self._automators)

    def add_automator(self, automator: Automator | None) -> None:
        _add(self._automators, automator)

    def remove_automator(self, automator: Automator | None) -> None:
        _remove(self._automators, automator)

    def get_automator(self, name: str) -> Automator | None:
        return _find(self._automators, name)

    # ── Modifiers ────────────────────────────────────────────────────

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        return tuple(self._modifiers)

    def add_modifier(self, modifier: Modifier | None) -> None:
        _add(self._modifiers, modifier)

    def remove_modifier(self, modifier: Modifier | None) -> None:
        """Unregister *modifier*, reverting its effect first if it is enabled."""
        if modifier is None or modifier not in self._modifiers:
            return
        modifier.disable()
        _remove(self._modifiers, modifier)

    def active_modifiers(self) -> tuple[Modifier, ...]:
        return tuple(m for m in self._modifiers if m.enabled)

    def get_modifier(self, name: str) -> Modifier | None:
        return _find(self._modifiers, name)

    # ── Queries ──────────────────────────────────────────────────────

    def items(self) -> Iterator[Item]:
        """Every purchasable item: generators first, then automators."""
        yield from self._generators
        yield from self._automators

    def __repr__(self) -> str:
        return (
            f"World(name={self.name!r}, currencies={len(self._currencies)}, "
            f"generators={len(self._generators)}, automators={len(self._automators)}, "
            f"modifiers={len(self._modifiers)})"
        )
