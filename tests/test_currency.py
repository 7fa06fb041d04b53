"""Tests for currency module."""
import pytest

from clickerengine.currency import Currency, CurrencyConfig
from clickerengine.errors import InvalidArgumentError, InvalidConfigurationError
from clickerengine.world import World


def test_defaults():
    world = World()
    gold = Currency(world)
    assert gold.name == "Gold"
    assert gold.value == 0
    assert world.currencies == (gold,)


def test_add_and_sub():
    gold = Currency(World(), CurrencyConfig(name="gold"))
    gold.add(100)
    gold.sub(30)
    assert gold.value == 70


def test_sub_can_go_negative():
    gold = Currency(World(), CurrencyConfig(name="gold"))
    gold.sub(5)
    assert gold.value == -5


def test_multiply_truncates():
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value=200))
    gold.multiply(1.145)
    assert gold.value == 229


def test_huge_values_are_exact():
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value="9" * 40))
    gold.add(1)
    assert gold.amount_as_string() == "1" + "0" * 40


def test_add_rejects_float():
    gold = Currency(World(), CurrencyConfig(name="gold"))
    with pytest.raises(InvalidArgumentError):
        gold.add(1.5)


def test_invalid_config():
    with pytest.raises(InvalidConfigurationError) as exc:
        Currency(World(), CurrencyConfig(name=""))
    assert exc.value.kind == "CurrencyConfig"
    assert exc.value.errors


def test_str():
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value=12))
    assert str(gold) == "gold: 12"


def test_multiply_by_one_is_identity():
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value=10**30 + 7))
    gold.multiply(1.0)
    assert gold.value == 10**30 + 7


@pytest.mark.parametrize(
    "amount",
    [0, 1, 12345, 10**40, 10**5000],
    ids=["zero", "one", "small", "large", "past_digit_limit"],
)
def test_add_then_sub_round_trips(amount):
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value=99))
    gold.add(amount)
    gold.sub(amount)
    assert gold.value == 99


def test_amount_as_string_past_int_digit_limit():
    gold = Currency(World(), CurrencyConfig(name="gold"))
    gold.add(10**5000)
    text = gold.amount_as_string()
    assert text == "1" + "0" * 5000
    assert str(gold) == "gold: " + text
    assert text in repr(gold)


def test_huge_initial_value_from_string():
    digits = "7" * 5000
    gold = Currency(World(), CurrencyConfig(name="gold", initial_value=digits))
    assert gold.amount_as_string() == digits
