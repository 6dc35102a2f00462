"""
Liquidity operations: the addLiquidity and removeLiquidity entrypoints.

Rounding follows the contract: the token side of a deposit rounds up
(ceiling division) and everything else truncates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..state.amounts import Amount, InvalidInput, NumericInput, fail_closed
from .arith import (
    ceiling_divide,
    is_zero,
    require_non_negative,
    require_positive,
    truncating_divide,
)
from .config import FEE_FREE, ExchangeConfig, require_xtz_pool


def _bootstrap_liquidity(xtz_in: Amount) -> Amount:
    # First deposit into an empty exchange mints one liquidity unit per mutez.
    return truncating_divide(xtz_in, 1)


# =============================================================================
# addLiquidity entrypoint functions
# =============================================================================


@fail_closed
def add_liquidity_liquidity_created(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    total_liquidity: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Liquidity minted for depositing `xtz_in` (the token amount does not matter).

    For an outstanding supply `total_liquidity > 0`:
        minted = floor(xtz_in * total_liquidity / xtz_pool)

    For `total_liquidity == 0` the proportional formula would always mint
    nothing, so the first deposit is treated as a bootstrap and mints
    `bootstrap_liquidity(xtz_in)` instead.

    Args:
        xtz_in: XTZ deposited (mutez), > 0
        xtz_pool: XTZ held by the exchange (mutez), > 0 after any subsidy credit
        total_liquidity: Liquidity outstanding, >= 0
        config: Subsidy setting of the exchange

    Returns:
        Liquidity minted, or None on invalid input
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    total_liquidity_ = require_non_negative("total_liquidity", total_liquidity)
    if is_zero(total_liquidity_):
        return _bootstrap_liquidity(xtz_in_)
    return truncating_divide(xtz_in_ * total_liquidity_, xtz_pool_)


@fail_closed
def bootstrap_liquidity(xtz_in: NumericInput) -> Optional[Decimal]:
    """Liquidity minted by the first deposit into an empty exchange: one unit per mutez."""
    return _bootstrap_liquidity(require_positive("xtz_in", xtz_in))


@fail_closed
def add_liquidity_token_in(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    Token that must accompany a deposit of `xtz_in`.

    token_in = ceil(xtz_in * token_pool / xtz_pool)
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return ceiling_divide(xtz_in_ * token_pool_, xtz_pool_)


@fail_closed
def add_liquidity_xtz_in(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    XTZ that must accompany a deposit of `token_in`.

    xtz_in = floor(token_in * xtz_pool / token_pool)
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)
    return truncating_divide(token_in_ * xtz_pool_, token_pool_)


# =============================================================================
# removeLiquidity entrypoint functions
# =============================================================================


def _burn_share(liquidity_burned: Amount, total_liquidity: Amount, reserve: Amount) -> Amount:
    if liquidity_burned > total_liquidity:
        raise InvalidInput(f"cannot burn more liquidity than outstanding: {liquidity_burned} > {total_liquidity}")
    return truncating_divide(reserve * liquidity_burned, total_liquidity)


@fail_closed
def remove_liquidity_xtz_out(
    liquidity_burned: NumericInput,
    total_liquidity: NumericInput,
    xtz_pool: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[Decimal]:
    """
    XTZ returned for burning `liquidity_burned` out of `total_liquidity`.

    xtz_out = floor(xtz_pool * liquidity_burned / total_liquidity)

    Returns None on invalid input, including `liquidity_burned > total_liquidity`.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    liquidity_burned_ = require_positive("liquidity_burned", liquidity_burned)
    total_liquidity_ = require_positive("total_liquidity", total_liquidity)
    return _burn_share(liquidity_burned_, total_liquidity_, xtz_pool_)


@fail_closed
def remove_liquidity_token_out(
    liquidity_burned: NumericInput,
    total_liquidity: NumericInput,
    token_pool: NumericInput,
) -> Optional[Decimal]:
    """
    Token returned for burning `liquidity_burned` out of `total_liquidity`.

    token_out = floor(token_pool * liquidity_burned / total_liquidity)

    Returns None on invalid input, including `liquidity_burned > total_liquidity`.
    """
    liquidity_burned_ = require_positive("liquidity_burned", liquidity_burned)
    total_liquidity_ = require_positive("total_liquidity", total_liquidity)
    token_pool_ = require_positive("token_pool", token_pool)
    return _burn_share(liquidity_burned_, total_liquidity_, token_pool_)
