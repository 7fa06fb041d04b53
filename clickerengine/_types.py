from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, InvalidOperation, Overflow, localcontext

from clickerengine.errors import InvalidArgumentError

AmountLike = int | str | Decimal

# Floor for Decimal precision; products widen it to stay exact.
_MIN_PRECISION = 50


def as_amount(value: AmountLike) -> int:
    """Coerce an int, numeric string or integral Decimal to an exact integer."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Amount must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        # Parsed through Decimal so long digit strings bypass int()'s digit limit.
        try:
            value = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidArgumentError(f"Amount is not an integer: {value!r}") from None
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidArgumentError(f"Amount is not an integer: {value!r}")
        return int(value)
    raise InvalidArgumentError(
        f"Amount must be an int, str or Decimal, got {type(value).__name__}"
    )


def _precision(*operands: Decimal) -> int:
    digits = sum(len(op.as_tuple().digits) for op in operands)
    return max(_MIN_PRECISION, digits + 2)


def growth(multiplier: float, exponent: int) -> Decimal:
    """Return ``multiplier ** exponent`` as a Decimal.

    The float power is used while it stays in range so results match the
    usual ``base * mult ** level`` formulas; past float range the power is
    taken in Decimal instead. Raises InvalidArgumentError once the result
    leaves the Decimal exponent range, e.g. for a maximized unlimited item.
    """
    try:
        return Decimal(multiplier ** exponent)
    except OverflowError:
        pass
    with localcontext() as ctx:
        ctx.prec = _MIN_PRECISION
        try:
            return Decimal(multiplier) ** exponent
        except Overflow:
            raise InvalidArgumentError(
                f"{multiplier} ** {exponent} is out of range"
            ) from None


def product(value: int | Decimal, factor: float | Decimal) -> Decimal:
    """Multiply without losing digits of either operand."""
    left = Decimal(value)
    right = Decimal(factor)
    with localcontext() as ctx:
        ctx.prec = _precision(left, right)
        try:
            return left * right
        except Overflow:
            raise InvalidArgumentError("Product is out of range") from None


def plus(value: Decimal, amount: int) -> Decimal:
    """Exact ``value + amount``."""
    right = Decimal(amount)
    with localcontext() as ctx:
        ctx.prec = _precision(value, right)
        return value + right


def fraction(value: Decimal) -> float:
    """Fractional part of a non-negative Decimal."""
    whole = value.to_integral_value(rounding=ROUND_DOWN)
    with localcontext() as ctx:
        ctx.prec = _precision(value)
        return float(value - whole)


def truncate(value: Decimal) -> int:
    """Drop the fractional part, rounding toward zero."""
    return int(value)


def amount_str(value: int) -> str:
    """Exact base-10 digits of *value*.

    Goes through Decimal, which is not bound by the int-to-str digit limit.
    """
    return format(Decimal(value), "f")
