"""Tests for world and generator modifiers."""
import pytest

from clickerengine.automator import Automator, AutomatorConfig
from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.errors import InvalidConfigurationError
from clickerengine.generator import Generator, GeneratorConfig
from clickerengine.modifier import ModifierKind, Modifiers, WorldModifier
from clickerengine.world import World


def _make_world() -> tuple[World, Currency, Generator]:
    world = World()
    gold = Currency(world, CurrencyConfig(name="gold"))
    gen = Generator(
        world, GeneratorConfig(currency=gold, name="mine", base_amount=10, initial_level=1)
    )
    return world, gold, gen


def test_modifiers_start_disabled_and_registered():
    world, _, gen = _make_world()
    speed = Modifiers.speed_by(world, 2.0, name="rush")
    boost = Modifiers.multiply_output(gen, 3.0)
    assert not speed.enabled
    assert not boost.enabled
    assert world.modifiers == (speed, boost)
    assert world.active_modifiers() == ()
    assert world.speed_multiplier == 1.0
    assert boost.name == "GeneratorModifier"
    assert speed.kind is ModifierKind.WORLD
    assert boost.kind is ModifierKind.GENERATOR


def test_speed_modifiers_stack_and_revert():
    world, _, _ = _make_world()
    double = Modifiers.speed_by(world, 2.0)
    triple = Modifiers.speed_by(world, 3.0)
    double.enable()
    triple.enable()
    assert world.speed_multiplier == pytest.approx(6.0)
    double.disable()
    assert world.speed_multiplier == pytest.approx(3.0)
    triple.disable()
    assert world.speed_multiplier == pytest.approx(1.0)


def test_enable_is_idempotent():
    world, _, _ = _make_world()
    double = Modifiers.speed_by(world, 2.0)
    double.enable()
    double.enable()
    assert world.speed_multiplier == pytest.approx(2.0)
    double.disable()
    double.disable()
    assert world.speed_multiplier == pytest.approx(1.0)


def test_speed_modifier_scales_automation():
    world, gold, gen = _make_world()
    Automator(world, AutomatorConfig(generator=gen, tick_rate=1.0))
    Modifiers.speed_by(world, 2.0).enable()
    world.update(5.0)
    assert gen.times_processed == 10


def test_disable_automation_modifier():
    world, gold, gen = _make_world()
    Automator(world, AutomatorConfig(generator=gen, tick_rate=1.0))
    world.update(1.0)
    assert gold.value == 10

    halt = Modifiers.disable_automation(world)
    halt.enable()
    assert not world.automation_enabled
    world.update(1.0)
    assert gold.value == 10

    halt.disable()
    world.update(1.0)
    assert gold.value == 20


def test_two_automation_disablers_are_counted():
    world, _, _ = _make_world()
    first = Modifiers.disable_automation(world, name="first")
    second = Modifiers.disable_automation(world, name="second")
    first.enable()
    second.enable()
    assert world.automation_suspensions == 2
    first.disable()
    assert not world.automation_enabled
    second.disable()
    assert world.automation_enabled


def test_generator_modifier_multiplies_output():
    world, gold, gen = _make_world()
    boost = Modifiers.multiply_output(gen, 3.0)
    boost.enable()
    gen.process()
    assert gold.value == 30
    assert gen.modifiers == (boost,)

    boost.disable()
    gen.process()
    assert gold.value == 40
    assert gen.modifiers == ()


def test_generator_modifiers_compound():
    world, gold, gen = _make_world()
    Modifiers.multiply_output(gen, 2.0).enable()
    Modifiers.multiply_output(gen, 1.5).enable()
    assert gen.expected_amount() == 30


def test_world_modifier_records_speed_change():
    world, _, _ = _make_world()
    mod = WorldModifier(world, speed_multiplier=4.0)
    mod.enable()
    assert mod.applied_before == 1.0
    assert mod.applied_after == 4.0


def test_invalid_speed_rejected():
    world, _, _ = _make_world()
    with pytest.raises(InvalidConfigurationError):
        WorldModifier(world, speed_multiplier=0.0)


def test_remove_modifier_reverts_effect():
    world, _, _ = _make_world()
    double = Modifiers.speed_by(world, 2.0)
    double.enable()
    world.remove_modifier(double)
    assert world.speed_multiplier == pytest.approx(1.0)
    assert world.modifiers == ()
