"""
Fixed-point primitives shared by every calculator.

The exchange contracts do all of their math on naturals:
- fee and burn rates are multipliers out of 1000 (0.1% resolution),
- the two rates combine into a multiplier out of 1_000_000,
- slippage tolerances are fixed-point out of 100_000,
- division truncates, except where a deposit requirement must round up.

Everything here operates on exact `Amount` values; no float tolerance is used.
"""

from __future__ import annotations

import math
from fractions import Fraction

from ..state.amounts import Amount, InvalidInput, NumericInput, to_amount


# Liquidity baking credits this many mutez to the XTZ pool every block.
SUBSIDY = 2_500_000

FEE_DENOMINATOR = 1_000
MULTIPLIER_DENOMINATOR = FEE_DENOMINATOR * FEE_DENOMINATOR
SLIPPAGE_DENOMINATOR = 100_000

XTZ_DECIMALS = 6


def is_positive(x: Amount) -> bool:
    return x > 0


def is_non_negative(x: Amount) -> bool:
    return x >= 0


def is_zero(x: Amount) -> bool:
    return x == 0


def is_non_positive(x: Amount) -> bool:
    return x <= 0


def require_positive(name: str, value: NumericInput) -> Amount:
    """Coerce `value` and require it to be strictly positive."""
    amount = to_amount(value, name)
    if not is_positive(amount):
        raise InvalidInput(f"{name} must be positive: {value!r}")
    return amount


def require_non_negative(name: str, value: NumericInput) -> Amount:
    """Coerce `value` and require it to be zero or positive."""
    amount = to_amount(value, name)
    if not is_non_negative(amount):
        raise InvalidInput(f"{name} must be non-negative: {value!r}")
    return amount


def truncating_divide(x: Amount, y: Amount) -> Amount:
    """
    Integer quotient of x / y, truncated toward zero (Michelson `EDIV` on naturals).

    Raises:
        InvalidInput: If y is zero
    """
    if is_zero(y):
        raise InvalidInput("division by zero")
    return Fraction(math.trunc(x / y))


def ceiling_divide(x: Amount, y: Amount) -> Amount:
    """
    Ceiling division for non-negative operands: the truncated quotient, plus one
    when the remainder is positive.

    Used where the contract rounds a required deposit up, against the depositor.
    """
    if is_non_positive(y):
        raise InvalidInput(f"divisor must be positive: {y}")
    if not is_non_negative(x):
        raise InvalidInput(f"dividend must be non-negative: {x}")
    quotient = truncating_divide(x, y)
    if is_positive(x - quotient * y):
        return quotient + 1
    return quotient


def credit_subsidy(xtz_pool: Amount) -> Amount:
    """Return `xtz_pool + SUBSIDY`."""
    return xtz_pool + SUBSIDY


def percent_multiplier(percent: Amount) -> int:
    """
    Convert a fee or burn percentage into the contract multiplier out of 1000.

    multiplier = 1000 - floor(percent * 10)
    """
    return FEE_DENOMINATOR - math.floor(percent * 10)


def slippage_multiplier(tolerance: Amount) -> int:
    """floor(tolerance * 100_000)"""
    return math.floor(tolerance * SLIPPAGE_DENOMINATOR)


def scale_down(amount: Amount, decimals: int) -> Amount:
    """Shift an on-chain integer amount into display units: amount * 10**-decimals."""
    return amount / (10 ** decimals)
