"""Tests for world registries and time."""
from clickerengine.automator import Automator, AutomatorConfig
from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.generator import Generator, GeneratorConfig
from clickerengine.world import World


def _make_world() -> tuple[World, Currency, Generator, Automator]:
    world = World(name="Test")
    gold = Currency(world, CurrencyConfig(name="gold"))
    gen = Generator(world, GeneratorConfig(currency=gold, name="mine", initial_level=1))
    auto = Automator(world, AutomatorConfig(generator=gen, name="cart"))
    return world, gold, gen, auto


def test_collections_behave_like_sets():
    world, gold, gen, auto = _make_world()
    world.add_currency(gold)
    world.add_generator(gen)
    world.add_automator(auto)
    world.add_currency(None)
    assert world.currencies == (gold,)
    assert world.generators == (gen,)
    assert world.automators == (auto,)
    assert world.generator_count == 1


def test_remove_absent_is_noop():
    world, gold, _, _ = _make_world()
    world.remove_currency(gold)
    world.remove_currency(gold)
    world.remove_generator(None)
    assert world.currencies == ()


def test_remove_all():
    world, _, _, _ = _make_world()
    world.remove_all_currencies()
    world.remove_all_generators()
    assert world.currencies == ()
    assert world.generators == ()


def test_lookup_by_name():
    world, gold, gen, auto = _make_world()
    assert world.get_currency("gold") is gold
    assert world.get_generator("mine") is gen
    assert world.get_automator("cart") is auto
    assert world.get_generator("nope") is None


def test_non_positive_update_is_noop():
    world, gold, gen, auto = _make_world()
    world.update(0.0)
    world.update(-5.0)
    assert auto.tick_timer == 0.0
    assert gold.value == 0


def test_update_drives_automators():
    world, gold, _, _ = _make_world()
    world.update(3.0)
    assert gold.value == 3


def test_automator_disabling_itself_during_update():
    world = World()
    gold = Currency(world, CurrencyConfig(name="gold"))
    gen = Generator(world, GeneratorConfig(currency=gold, initial_level=1))
    auto = Automator(world, AutomatorConfig(generator=gen))
    gen.on_processed = lambda g: auto.disable()
    Automator(world, AutomatorConfig(generator=gen, name="second"))
    world.update(1.0)
    assert world.automators[0].name == "second"
    assert gold.value == 2


def test_items_lists_generators_then_automators():
    world, _, gen, auto = _make_world()
    assert list(world.items()) == [gen, auto]


def test_restore_world_state():
    world, _, _, _ = _make_world()
    world._restore(speed_multiplier=2.5, automation_suspensions=1)
    assert world.speed_multiplier == 2.5
    assert not world.automation_enabled
