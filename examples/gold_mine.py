"""Gold mine example world: a small three-tier economy."""
from __future__ import annotations

from clickerengine.automator import Automator, AutomatorConfig
from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.generator import Generator, GeneratorConfig
from clickerengine.modifier import Modifiers
from clickerengine.world import World


def define_world() -> World:
    world = World(name="Gold Mine")

    gold = Currency(world, CurrencyConfig(name="gold"))
    gems = Currency(world, CurrencyConfig(name="gems"))

    pickaxe = Generator(
        world,
        GeneratorConfig(
            currency=gold,
            name="pickaxe",
            description="Swing it yourself.",
            base_amount=1,
            amount_multiplier=1.1,
            base_price=10,
            initial_level=1,
        ),
    )
    miner = Generator(
        world,
        GeneratorConfig(
            currency=gold,
            name="miner",
            description="Digs while you are away.",
            base_amount=5,
            amount_multiplier=1.1,
            base_price=50,
            price_multiplier=1.15,
        ),
    )
    prospector = Generator(
        world,
        GeneratorConfig(
            currency=gems,
            name="prospector",
            description="Sometimes finds a gem.",
            base_amount=1,
            amount_multiplier=1.05,
            base_price=500,
            max_level=25,
            probability=0.1,
            seed=7,
        ),
    )

    Automator(
        world,
        AutomatorConfig(generator=miner, name="mine cart", tick_rate=1.0),
    )
    Automator(
        world,
        AutomatorConfig(
            generator=prospector,
            name="survey crew",
            tick_rate=10.0,
            tick_rate_multiplier=1.1,
            base_price=1000,
            max_level=20,
        ),
    )

    Modifiers.speed_by(world, 2.0, name="gold rush")
    Modifiers.multiply_output(miner, 3.0, name="dynamite")
    Modifiers.multiply_output(pickaxe, 2.0, name="steel pickaxe")
    Modifiers.disable_automation(world, name="strike")

    return world
