from __future__ import annotations

import logging
import weakref
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING

from clickerengine.errors import InvalidArgumentError, InvalidConfigurationError

if TYPE_CHECKING:
    from clickerengine.generator import Generator
    from clickerengine.world import World

logger = logging.getLogger(__name__)


class ModifierKind(Enum):
    WORLD = auto()
    GENERATOR = auto()


class Modifier(ABC):
    """Reversible effect on a world or a generator.

    Modifiers are built disabled and registered with their world.
    ``enable()`` applies the effect once and ``disable()`` undoes exactly
    that; repeated calls are no-ops. Subclasses implement
    ``_apply``/``_revert`` and never touch the enabled flag.
    """

    kind: ModifierKind

    def __init__(self, world: World, name: str = "") -> None:
        self._world_ref = weakref.ref(world)
        self.name = name or type(self).__name__
        self._enabled = False
        world.add_modifier(self)

    @property
    def world(self) -> World | None:
        return self._world_ref()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @abstractmethod
    def _apply(self, world: World) -> None: ...

    @abstractmethod
    def _revert(self, world: World) -> None: ...

    def enable(self) -> None:
        if self._enabled:
            return
        world = self._require_world()
        world.add_modifier(self)
        self._apply(world)
        self._enabled = True
        logger.debug("Enabled modifier %s", self.name)

    def disable(self) -> None:
        if not self._enabled:
            return
        world = self._require_world()
        self._revert(world)
        self._enabled = False
        logger.debug("Disabled modifier %s", self.name)

    def _require_world(self) -> World:
        world = self._world_ref()
        if world is None:
            raise InvalidArgumentError(f"Modifier {self.name!r} has outlived its world")
        return world

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, enabled={self._enabled})"


class WorldModifier(Modifier):
    """Scales world time and/or suspends automation while enabled."""

    kind = ModifierKind.WORLD

    def __init__(
        self,
        world: World,
        speed_multiplier: float = 1.0,
        disable_automation: bool = False,
        name: str = "",
    ) -> None:
        if speed_multiplier <= 0:
            raise InvalidConfigurationError(
                "WorldModifier",
                [f"Speed multiplier must be positive, got {speed_multiplier}"],
            )
        super().__init__(world, name)
        self.speed_multiplier = speed_multiplier
        self.disable_automation = disable_automation
        self.applied_before: float | None = None
        self.applied_after: float | None = None

    def _apply(self, world: World) -> None:
        if self.speed_multiplier != 1.0:
            self.applied_before = world.speed_multiplier
            world._scale_speed(self.speed_multiplier)
            self.applied_after = world.speed_multiplier
        if self.disable_automation:
            world._suspend_automation()

    def _revert(self, world: World) -> None:
        # Divide out only this modifier's own factor; other modifiers may
        # have changed the world's speed since we were applied.
        if self.speed_multiplier != 1.0:
            world._unscale_speed(self.speed_multiplier)
        if self.disable_automation:
            world._resume_automation()


class GeneratorModifier(Modifier):
    """Multiplies one generator's output while enabled."""

    kind = ModifierKind.GENERATOR

    def __init__(self, generator: Generator, multiplier: float = 1.0, name: str = "") -> None:
        world = generator.world
        if world is None:
            raise InvalidConfigurationError(
                "GeneratorModifier", [f"Generator {generator.name!r} has no world"]
            )
        super().__init__(world, name)
        self._generator = generator
        self.multiplier = multiplier

    @property
    def generator(self) -> Generator:
        return self._generator

    def _apply(self, world: World) -> None:
        self._generator._attach_modifier(self)

    def _revert(self, world: World) -> None:
        self._generator._detach_modifier(self)


class Modifiers:
    """Convenience constructors for common modifier patterns."""

    @staticmethod
    def speed_by(world: World, factor: float, name: str = "") -> WorldModifier:
        """Run the whole world *factor* times faster."""
        return WorldModifier(world, speed_multiplier=factor, name=name)

    @staticmethod
    def disable_automation(world: World, name: str = "") -> WorldModifier:
        """Stop every automator while enabled."""
        return WorldModifier(world, disable_automation=True, name=name)

    @staticmethod
    def multiply_output(
        generator: Generator, factor: float, name: str = ""
    ) -> GeneratorModifier:
        """Multiply what *generator* yields per cycle."""
        return GeneratorModifier(generator, multiplier=factor, name=name)
