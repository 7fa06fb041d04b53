"""Tests for _types module."""
from decimal import Decimal

import pytest

from clickerengine._types import (
    amount_str,
    as_amount,
    fraction,
    growth,
    plus,
    product,
    truncate,
)
from clickerengine.errors import InvalidArgumentError


def test_as_amount_int():
    assert as_amount(42) == 42


def test_as_amount_string():
    assert as_amount(" 1000000000000000000000000 ") == 10**24


def test_as_amount_integral_decimal():
    assert as_amount(Decimal("12.000")) == 12


def test_as_amount_rejects_float():
    with pytest.raises(InvalidArgumentError):
        as_amount(1.5)


def test_as_amount_rejects_bool():
    with pytest.raises(InvalidArgumentError):
        as_amount(True)


def test_as_amount_rejects_fractional_decimal():
    with pytest.raises(InvalidArgumentError):
        as_amount(Decimal("1.5"))


def test_as_amount_rejects_garbage_string():
    with pytest.raises(InvalidArgumentError):
        as_amount("lots")


def test_growth_within_float_range():
    assert float(growth(1.5, 2)) == pytest.approx(2.25)


def test_growth_past_float_range():
    big = growth(10.0, 400)
    assert big > Decimal(10) ** 399


def test_product_keeps_all_digits():
    value = 10**60 + 1
    assert truncate(product(value, 2)) == 2 * 10**60 + 2


def test_plus_keeps_all_digits():
    value = Decimal(10**70)
    assert truncate(plus(value, 1)) == 10**70 + 1


def test_fraction_of_huge_value():
    value = product(10**60, Decimal("1.5"))
    assert fraction(value) == 0.0
    assert fraction(Decimal("7.25")) == pytest.approx(0.25)


def test_truncate_rounds_toward_zero():
    assert truncate(Decimal("572.9")) == 572


def test_amount_str_past_int_digit_limit():
    assert amount_str(10**5000) == "1" + "0" * 5000
    assert amount_str(-42) == "-42"


def test_growth_out_of_decimal_range():
    with pytest.raises(InvalidArgumentError):
        growth(2.0, 10**18)
