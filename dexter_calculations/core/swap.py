"""
Swap quoting for the xtzToToken and tokenToXtz entrypoints.

Both directions share the CPMM shape; only the roles of the reserves differ.
With `fm = fee * burn` (out of 1_000_000):

    xtz -> token:  token_out = xtz_in * token_pool * fm
                               / (xtz_pool * 1_000_000 + xtz_in * fm)

    token -> xtz:  xtz_out = token_in * xtz_pool * fee * burn
                             / (token_pool * 1_000_000 + token_in * fee * 1000)

The token -> xtz direction burns on the XTZ leg, so only the fee scales the
input term of the denominator. The asymmetry is the contract's and must stay.

Outputs are exact rationals, not floor-truncated: the contract would deliver
`floor(output)`, and callers that need that integer floor the result.

Forward outputs and inverse inputs are rendered with ROUND_CEILING, so the
inverse of a reported output never comes back below the original input.
Rendering never changes the integer part (see `to_result`).

Every public function:
1. coerces its arguments once,
2. credits the subsidy to the XTZ pool once (if the exchange credits it),
3. validates the domain,
4. evaluates the formula exactly, returning a Decimal, or None on invalid input.
"""

from __future__ import annotations

import math
from decimal import ROUND_CEILING, Decimal
from fractions import Fraction
from typing import Optional

from ..state.amounts import (
    Amount,
    InvalidInput,
    NumericInput,
    fail_closed,
    to_decimals,
    to_result,
    to_tolerance,
)
from .arith import (
    FEE_DENOMINATOR,
    MULTIPLIER_DENOMINATOR,
    SLIPPAGE_DENOMINATOR,
    XTZ_DECIMALS,
    is_non_positive,
    is_positive,
    require_positive,
    scale_down,
    slippage_multiplier,
)
from .config import FEE_FREE, ExchangeConfig, require_xtz_pool


# =============================================================================
# Formulas on already-validated, already-credited amounts
# =============================================================================


def exact_token_output(xtz_in: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig) -> Amount:
    fm = config.fee_multiplier
    numerator = xtz_in * token_pool * fm
    denominator = xtz_pool * MULTIPLIER_DENOMINATOR + xtz_in * fm
    return numerator / denominator


def exact_xtz_output(token_in: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig) -> Amount:
    numerator = token_in * xtz_pool * config.fee_multiplier
    denominator = token_pool * MULTIPLIER_DENOMINATOR + token_in * config.fee_only_multiplier
    return numerator / denominator


def _xtz_input(token_out: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig) -> Amount:
    # Inverse of exact_token_output solved for xtz_in.
    denominator = (token_pool - token_out) * config.fee_multiplier
    if is_non_positive(denominator):
        raise InvalidInput(f"token_out {token_out} cannot be provided by token_pool {token_pool}")
    result = xtz_pool * token_out * MULTIPLIER_DENOMINATOR / denominator
    if not is_positive(result):
        raise InvalidInput("required xtz input is not positive")
    return result


def _token_input(xtz_out: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig) -> Amount:
    # Inverse of exact_xtz_output solved for token_in.
    denominator = xtz_pool * config.fee_multiplier - xtz_out * config.fee_only_multiplier
    if is_non_positive(denominator):
        raise InvalidInput(f"xtz_out {xtz_out} cannot be provided by xtz_pool {xtz_pool}")
    result = token_pool * xtz_out * MULTIPLIER_DENOMINATOR / denominator
    if not is_positive(result):
        raise InvalidInput("required token input is not positive")
    return result


def exact_xtz_to_token_impact(
    xtz_in: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig
) -> Amount:
    # Burn comes off the XTZ sold.
    xtz_in_net_burn = xtz_in * config.burn / FEE_DENOMINATOR
    tokens_bought = xtz_in_net_burn * token_pool / (xtz_in_net_burn + xtz_pool)
    if is_non_positive(tokens_bought):
        return Fraction(0)
    # Reserve-ratio quote; the tokenPool * xtzPool * xtz_in product form is not a price.
    exact_quote = xtz_in * token_pool / xtz_pool
    return (exact_quote - tokens_bought) / exact_quote


def exact_token_to_xtz_impact(
    token_in: Amount, xtz_pool: Amount, token_pool: Amount, config: ExchangeConfig
) -> Amount:
    # Burn comes off the XTZ bought.
    xtz_bought = token_in * xtz_pool / (token_in + token_pool)
    xtz_bought_net_burn = xtz_bought * config.burn / FEE_DENOMINATOR
    if is_non_positive(xtz_bought_net_burn):
        return Fraction(0)
    exact_quote = token_in * xtz_pool / token_pool
    return (exact_quote - xtz_bought_net_burn) / exact_quote


def exact_minimum_output(amount_out: Amount, tolerance: Amount) -> Amount:
    # ((out * 1000) - (out * 1000) * floor(s * 100000) / 100000) / 1000, floored, at least 1
    scaled = amount_out * FEE_DENOMINATOR
    degraded = scaled - scaled * slippage_multiplier(tolerance) / SLIPPAGE_DENOMINATOR
    return max(Fraction(math.floor(degraded / FEE_DENOMINATOR)), Fraction(1))


# =============================================================================
# xtzToToken entrypoint functions
# =============================================================================


@fail_closed
def xtz_to_token_token_output(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Amount of token the exchange sends for `xtz_in` in xtzToToken.

    Args:
        xtz_in: XTZ the sender sells (mutez), > 0
        xtz_pool: XTZ held by the exchange (mutez), > 0 after any subsidy credit
        token_pool: Token held by the exchange, > 0
        config: Fee, burn and subsidy settings of the exchange

    Returns:
        Exact token output, or None on invalid input
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return to_result(exact_token_output(xtz_in_, xtz_pool_, token_pool_, config), ROUND_CEILING)


@fail_closed
def xtz_to_token_xtz_input(
    token_out: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    XTZ the sender must pay to receive `token_out` in xtzToToken.

    Returns None when `token_out` is at or beyond what the token pool can
    provide (the formula's denominator is then non-positive).
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_out_ = require_positive("token_out", token_out)
    token_pool_ = require_positive("token_pool", token_pool)
    # 10**decimals cancels out under exact arithmetic; the argument is validated only.
    to_decimals(decimals)
    return to_result(_xtz_input(token_out_, xtz_pool_, token_pool_, config), ROUND_CEILING)


@fail_closed
def xtz_to_token_exchange_rate(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """Token received per XTZ sold, fees and trade size penalty included."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return exact_token_output(xtz_in_, xtz_pool_, token_pool_, config) / xtz_in_


@fail_closed
def xtz_to_token_exchange_rate_for_display(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """Same as xtz_to_token_exchange_rate, in display units of both assets."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)
    decimals_ = to_decimals(decimals)
    token_out = exact_token_output(xtz_in_, xtz_pool_, token_pool_, config)
    return scale_down(token_out, decimals_) / scale_down(xtz_in_, XTZ_DECIMALS)


@fail_closed
def xtz_to_token_market_rate(
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Ideal token-per-XTZ rate in display units, without fees or trade size penalty.

    It cannot be executed; it is shown before the user picks an amount.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_pool_ = require_positive("token_pool", token_pool)
    decimals_ = to_decimals(decimals)
    return scale_down(token_pool_, decimals_) / scale_down(xtz_pool_, XTZ_DECIMALS)


@fail_closed
def xtz_to_token_price_impact(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Fraction by which the trade's realized price falls short of the reserve ratio.

    The burn is taken off the XTZ sold before pricing. If nothing would be
    bought the impact is exactly 0.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)

    return exact_xtz_to_token_impact(xtz_in_, xtz_pool_, token_pool_, config)


@fail_closed
def xtz_to_token_minimum_token_output(token_out: NumericInput, allowed_slippage: NumericInput) -> Optional[Decimal]:
    """
    Minimum token amount to pass to xtzToToken for a quoted `token_out`.

    If the rate degrades by more than `allowed_slippage` (in [0, 1]) before
    execution, the contract rejects the trade. Never below 1.
    """
    return exact_minimum_output(require_positive("token_out", token_out), to_tolerance(allowed_slippage))


# =============================================================================
# tokenToXtz entrypoint functions
# =============================================================================


@fail_closed
def token_to_xtz_xtz_output(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Amount of XTZ the exchange sends for `token_in` in tokenToXtz.

    Args:
        token_in: Token the sender sells, > 0
        xtz_pool: XTZ held by the exchange (mutez), > 0 after any subsidy credit
        token_pool: Token held by the exchange, > 0
        config: Fee, burn and subsidy settings of the exchange

    Returns:
        Exact XTZ output (mutez), or None on invalid input
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return to_result(exact_xtz_output(token_in_, xtz_pool_, token_pool_, config), ROUND_CEILING)


@fail_closed
def token_to_xtz_token_input(
    xtz_out: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Token the sender must pay to receive `xtz_out` in tokenToXtz.

    Returns None when `xtz_out` is at or beyond what the XTZ pool can provide.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_out_ = require_positive("xtz_out", xtz_out)
    token_pool_ = require_positive("token_pool", token_pool)
    # 10**decimals cancels out under exact arithmetic; the argument is validated only.
    to_decimals(decimals)
    return to_result(_token_input(xtz_out_, xtz_pool_, token_pool_, config), ROUND_CEILING)


@fail_closed
def token_to_xtz_exchange_rate(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """XTZ received per token sold, fees and trade size penalty included."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return exact_xtz_output(token_in_, xtz_pool_, token_pool_, config) / token_in_


@fail_closed
def token_to_xtz_exchange_rate_for_display(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """Same as token_to_xtz_exchange_rate, in display units of both assets."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)
    decimals_ = to_decimals(decimals)
    xtz_out = exact_xtz_output(token_in_, xtz_pool_, token_pool_, config)
    return scale_down(xtz_out, XTZ_DECIMALS) / scale_down(token_in_, decimals_)


@fail_closed
def token_to_xtz_market_rate(
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    decimals: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """Ideal XTZ-per-token rate in display units, without fees or trade size penalty."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_pool_ = require_positive("token_pool", token_pool)
    decimals_ = to_decimals(decimals)
    return scale_down(xtz_pool_, XTZ_DECIMALS) / scale_down(token_pool_, decimals_)


@fail_closed
def token_to_xtz_price_impact(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Fraction by which the trade's realized price falls short of the reserve ratio.

    Here the burn is taken off the XTZ bought, not the token sold.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)

    return exact_token_to_xtz_impact(token_in_, xtz_pool_, token_pool_, config)


@fail_closed
def token_to_xtz_minimum_xtz_output(xtz_out: NumericInput, allowed_slippage: NumericInput) -> Optional[Decimal]:
    """Minimum XTZ amount to pass to tokenToXtz for a quoted `xtz_out`. Never below 1."""
    return exact_minimum_output(require_positive("xtz_out", xtz_out), to_tolerance(allowed_slippage))


@fail_closed
def minimum_output(amount_out: NumericInput, allowed_slippage: NumericInput) -> Optional[Decimal]:
    """Direction-agnostic form of the two minimum-output functions."""
    return exact_minimum_output(require_positive("amount_out", amount_out), to_tolerance(allowed_slippage))
