# clickerengine: idle/clicker economy simulation engine

from clickerengine.errors import (
    ClickerError,
    InvalidArgumentError,
    InvalidConfigurationError,
)
from clickerengine.item import Item, PurchaseResult, PurchaseStatus, scaled_price
from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.generator import Generator, GeneratorConfig
from clickerengine.automator import Automator, AutomatorConfig
from clickerengine.modifier import (
    GeneratorModifier,
    Modifier,
    ModifierKind,
    Modifiers,
    WorldModifier,
)
from clickerengine.world import World
from clickerengine.strategy import (
    ClickProfile,
    CustomStrategy,
    GreedyCheapest,
    NeverBuy,
    PriorityList,
    PurchaseOption,
    Strategy,
)
from clickerengine.metrics import MetricsCollector
from clickerengine.simulation import Simulation
from clickerengine.report import SimulationReport, build_report
from clickerengine.formatting import format_text_report

__all__ = [
    # Errors
    "ClickerError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    # Items
    "Item",
    "PurchaseResult",
    "PurchaseStatus",
    "scaled_price",
    # Entities
    "Currency",
    "CurrencyConfig",
    "Generator",
    "GeneratorConfig",
    "Automator",
    "AutomatorConfig",
    # Modifiers
    "Modifier",
    "ModifierKind",
    "Modifiers",
    "WorldModifier",
    "GeneratorModifier",
    # World
    "World",
    # Strategy
    "Strategy",
    "ClickProfile",
    "PurchaseOption",
    "NeverBuy",
    "GreedyCheapest",
    "PriorityList",
    "CustomStrategy",
    # Simulation
    "MetricsCollector",
    "Simulation",
    "SimulationReport",
    "build_report",
    # Formatting
    "format_text_report",
]
