"""
Trade previews: everything a wallet shows for one swap, from one pool snapshot.

The subsidy is credited once per preview, and every figure in the preview is
derived from the same credited pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal
from fractions import Fraction
from typing import Optional

from ..state.amounts import NumericInput, fail_closed, to_result, to_tolerance
from .arith import require_positive, truncating_divide
from .config import FEE_FREE, ExchangeConfig, require_xtz_pool
from .swap import (
    exact_minimum_output,
    exact_token_output,
    exact_token_to_xtz_impact,
    exact_xtz_output,
    exact_xtz_to_token_impact,
)


@dataclass(frozen=True)
class SwapQuote:
    amount_in: Decimal
    amount_out: Decimal
    minimum_out: Decimal
    exchange_rate: Decimal
    price_impact: Decimal


def _build(amount_in: Fraction, amount_out: Fraction, tolerance: Fraction, price_impact: Fraction) -> SwapQuote:
    # The contract delivers floor(amount_out); the minimum is derived from that.
    delivered = truncating_divide(amount_out, 1)
    return SwapQuote(
        amount_in=to_result(amount_in),
        amount_out=to_result(amount_out, ROUND_CEILING),
        minimum_out=to_result(exact_minimum_output(require_positive("amount_out", delivered), tolerance)),
        exchange_rate=to_result(amount_out / amount_in),
        price_impact=to_result(price_impact),
    )


@fail_closed
def quote_xtz_to_token(
    xtz_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    allowed_slippage: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[SwapQuote]:
    """
    Preview an xtzToToken trade.

    Returns None on invalid input, including trades too small to deliver a
    single token unit.
    """
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    xtz_in_ = require_positive("xtz_in", xtz_in)
    token_pool_ = require_positive("token_pool", token_pool)
    tolerance = to_tolerance(allowed_slippage)

    token_out = exact_token_output(xtz_in_, xtz_pool_, token_pool_, config)
    impact = exact_xtz_to_token_impact(xtz_in_, xtz_pool_, token_pool_, config)
    return _build(xtz_in_, token_out, tolerance, impact)


@fail_closed
def quote_token_to_xtz(
    token_in: NumericInput,
    xtz_pool: NumericInput,
    token_pool: NumericInput,
    allowed_slippage: NumericInput,
    config: ExchangeConfig = FEE_FREE,
) -> Optional[SwapQuote]:
    """Preview a tokenToXtz trade. Same failure rules as quote_xtz_to_token."""
    xtz_pool_ = require_xtz_pool(xtz_pool, config)
    token_in_ = require_positive("token_in", token_in)
    token_pool_ = require_positive("token_pool", token_pool)
    tolerance = to_tolerance(allowed_slippage)

    xtz_out = exact_xtz_output(token_in_, xtz_pool_, token_pool_, config)
    impact = exact_token_to_xtz_impact(token_in_, xtz_pool_, token_pool_, config)
    return _build(token_in_, xtz_out, tolerance, impact)
