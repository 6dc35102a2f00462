"""
Exact amount values and boundary coercion.

Callers hand us reserves and trade sizes as ints, floats or decimal strings.
Each one is coerced exactly once, at the public boundary, into an `Amount`
(a `fractions.Fraction`), so every formula downstream runs on exact rationals
and matches the contract's integer math bit for bit.

Failure model:
- `InvalidInput` is raised by the coercion helpers and by domain guards.
- `fail_closed` turns `InvalidInput` into `None` at the public boundary.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation, localcontext
from fractions import Fraction
from functools import wraps
from typing import Any, Callable, Optional, Union


logger = logging.getLogger(__name__)

# Type aliases
Amount = Fraction  # Exact non-negative rational (arbitrary precision)
NumericInput = Union[int, float, str, Decimal, Fraction]

# Significant digits kept when an exact result is handed back as a Decimal.
RESULT_PRECISION = 60

# Decimal exponents (and token decimals) beyond this are rejected before any
# power of ten is materialized.
MAX_EXPONENT = 10_000


class InvalidInput(ValueError):
    """A numeric argument failed coercion or a domain precondition."""


def _from_decimal(parsed: Decimal, value: object, name: str) -> Amount:
    if not parsed.is_finite():
        raise InvalidInput(f"{name} must be finite: {value!r}")
    if abs(parsed.adjusted()) > MAX_EXPONENT:
        raise InvalidInput(f"{name} exponent out of range: {value!r}")
    return Fraction(parsed)


def to_amount(value: NumericInput, name: str = "value") -> Amount:
    """
    Coerce an int, float, decimal string, Decimal or Fraction into an exact Amount.

    Floats go through their shortest repr, so `0.1` becomes exactly 1/10.

    Raises:
        InvalidInput: If the value is not a finite number, or its decimal
            exponent exceeds MAX_EXPONENT
    """
    if isinstance(value, bool):
        raise InvalidInput(f"{name} must be numeric, got bool")
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInput(f"{name} must be finite: {value!r}")
        return Fraction(Decimal(repr(value)))
    if isinstance(value, Decimal):
        return _from_decimal(value, value, name)
    if isinstance(value, str):
        try:
            parsed = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidInput(f"{name} is not a decimal number: {value!r}") from exc
        return _from_decimal(parsed, value, name)
    raise InvalidInput(f"{name} must be int, float, str or Decimal, got {type(value).__name__}")


def to_decimals(value: NumericInput, name: str = "decimals") -> int:
    """Coerce a token precision into an int in [0, MAX_EXPONENT]."""
    amount = to_amount(value, name)
    if amount.denominator != 1:
        raise InvalidInput(f"{name} must be a whole number: {value!r}")
    if amount < 0:
        raise InvalidInput(f"{name} must be non-negative: {value!r}")
    if amount > MAX_EXPONENT:
        raise InvalidInput(f"{name} must be at most {MAX_EXPONENT}: {value!r}")
    return amount.numerator


def to_tolerance(value: NumericInput, name: str = "allowed_slippage") -> Amount:
    """Coerce a slippage tolerance, which must lie in [0, 1]."""
    amount = to_amount(value, name)
    if not (0 <= amount <= 1):
        raise InvalidInput(f"{name} must be in [0, 1]: {value!r}")
    return amount


def to_percent(value: NumericInput, name: str = "percent") -> Amount:
    """Coerce a fee or burn percentage, which must lie in [0, 100]."""
    amount = to_amount(value, name)
    if not (0 <= amount <= 100):
        raise InvalidInput(f"{name} must be in [0, 100]: {value!r}")
    return amount


def to_result(value: Amount, rounding: str = ROUND_HALF_EVEN) -> Decimal:
    """
    Render an exact result as a Decimal with RESULT_PRECISION significant digits.

    Args:
        value: Exact result
        rounding: Direction for the last digit (a `decimal` ROUND_* constant)

    Returns:
        The rounded Decimal. Its floor always equals the floor of `value`:
        when rounding would cross an integer, precision is extended until it
        does not.
    """
    floor = math.floor(value)
    prec = RESULT_PRECISION
    while True:
        with localcontext() as ctx:
            ctx.prec = prec
            ctx.rounding = rounding
            result = Decimal(value.numerator) / Decimal(value.denominator)
        if math.floor(result) == floor:
            return result
        prec += RESULT_PRECISION


def fail_closed(func: Callable[..., Any]) -> Callable[..., Optional[Any]]:
    """
    Wrap a public calculation so that invalid input yields `None`.

    Exact `Amount` results are converted to `Decimal`; anything else is
    returned as is. Only `InvalidInput` is absorbed.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Optional[Any]:
        try:
            result = func(*args, **kwargs)
        except InvalidInput as exc:
            logger.debug("%s rejected input: %s", func.__name__, exc)
            return None
        if isinstance(result, Fraction):
            return to_result(result)
        return result

    return wrapper
