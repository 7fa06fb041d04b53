"""Tests for automator scheduling."""
import pytest

from clickerengine.automator import MIN_TICK_RATE, Automator, AutomatorConfig
from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.errors import InvalidConfigurationError
from clickerengine.generator import Generator, GeneratorConfig
from clickerengine.world import World


def _make_world(level: int = 1) -> tuple[World, Currency, Generator]:
    world = World()
    gold = Currency(world, CurrencyConfig(name="gold"))
    gen = Generator(world, GeneratorConfig(currency=gold, name="mine", initial_level=level))
    return world, gold, gen


def test_fires_once_per_interval():
    world, gold, gen = _make_world()
    Automator(world, AutomatorConfig(generator=gen, tick_rate=1.0))
    world.update(1.0)
    assert gen.times_processed == 1
    world.update(9.0)
    assert gen.times_processed == 10
    assert gold.value == 10


def test_partial_time_accumulates():
    world, _, gen = _make_world()
    auto = Automator(world, AutomatorConfig(generator=gen, tick_rate=2.0))
    world.update(1.5)
    assert gen.times_processed == 0
    assert auto.timer_percentage == pytest.approx(0.75)
    world.update(0.5)
    assert gen.times_processed == 1
    assert auto.tick_timer == pytest.approx(0.0)


def test_large_step_catches_up():
    world, _, gen = _make_world()
    Automator(world, AutomatorConfig(generator=gen, tick_rate=0.5))
    world.update(3600.0)
    assert gen.times_processed == 7200


def test_disabled_automator_does_nothing():
    world, _, gen = _make_world()
    auto = Automator(world, AutomatorConfig(generator=gen, enabled=False))
    assert world.automators == ()
    auto.update(10.0)
    assert gen.times_processed == 0


def test_enable_and_disable_move_world_membership():
    world, _, gen = _make_world()
    auto = Automator(world, AutomatorConfig(generator=gen, name="cart"))
    assert world.get_automator("cart") is auto
    auto.disable()
    assert world.get_automator("cart") is None
    auto.disable()
    auto.enable()
    auto.enable()
    assert world.automators == (auto,)


def test_negative_tick_rate_clamped():
    world, _, gen = _make_world()
    auto = Automator(world, AutomatorConfig(generator=gen, tick_rate=-3.0))
    assert auto.tick_rate == 0.0
    world.update(5.0)
    assert gen.times_processed == 0
    assert auto.timer_percentage == 1.0


def test_level_gated_idle_at_level_zero():
    world, _, gen = _make_world()
    auto = Automator(
        world,
        AutomatorConfig(generator=gen, tick_rate=4.0, tick_rate_multiplier=2.0),
    )
    assert auto.level_gated
    assert auto.effective_tick_rate is None
    assert auto.timer_percentage == 0.0
    world.update(100.0)
    assert gen.times_processed == 0


def test_level_gated_speeds_up_with_level():
    world, _, gen = _make_world()
    auto = Automator(
        world,
        AutomatorConfig(
            generator=gen, tick_rate=4.0, tick_rate_multiplier=2.0, initial_level=1
        ),
    )
    assert auto.effective_tick_rate == pytest.approx(4.0)
    auto.upgrade()
    assert auto.effective_tick_rate == pytest.approx(2.0)
    world.update(4.0)
    assert gen.times_processed == 2


def test_level_zero_generator_ticks_without_output():
    world, gold, gen = _make_world(level=0)
    Automator(world, AutomatorConfig(generator=gen))
    world.update(5.0)
    assert gold.value == 0


def test_generator_from_other_world_rejected():
    _, _, gen = _make_world()
    with pytest.raises(InvalidConfigurationError):
        Automator(World(name="other"), AutomatorConfig(generator=gen))


def test_requires_generator():
    with pytest.raises(InvalidConfigurationError):
        Automator(World(), AutomatorConfig())


def test_tiny_fixed_rate_is_floored():
    world, _, gen = _make_world()
    auto = Automator(world, AutomatorConfig(generator=gen, tick_rate=1e-9))
    assert auto.effective_tick_rate == MIN_TICK_RATE
    world.update(1.0)
    assert 0 < gen.times_processed <= 1.0 / MIN_TICK_RATE + 1


def test_high_level_gated_rate_is_floored():
    world, _, gen = _make_world()
    auto = Automator(
        world,
        AutomatorConfig(
            generator=gen, tick_rate=1.0, tick_rate_multiplier=2.0, initial_level=60
        ),
    )
    assert auto.effective_tick_rate == MIN_TICK_RATE
    world.update(1.0)
    assert 0 < gen.times_processed <= 1.0 / MIN_TICK_RATE + 1


def test_maximized_level_gated_rate_does_not_overflow():
    world, _, gen = _make_world()
    auto = Automator(
        world,
        AutomatorConfig(generator=gen, tick_rate=1.0, tick_rate_multiplier=2.0),
    )
    auto.maximize()
    assert auto.effective_tick_rate == MIN_TICK_RATE
    world.update(1.0)
    assert 0 < gen.times_processed <= 1.0 / MIN_TICK_RATE + 1


def test_slowing_multiplier_at_high_level_never_ticks():
    world, _, gen = _make_world()
    auto = Automator(
        world,
        AutomatorConfig(
            generator=gen, tick_rate=1.0, tick_rate_multiplier=0.5, initial_level=5000
        ),
    )
    world.update(100.0)
    assert gen.times_processed == 0
    assert auto.timer_percentage == 0.0
