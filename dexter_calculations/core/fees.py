"""
Liquidity-provider fee accounting.

The liquidity providers, as a whole, keep a fixed 0.1% of the XTZ traded.
This is their retained share, not the fee charged by the quoting formulas,
and it does not depend on the exchange's fee or burn rates.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..state.amounts import Amount, NumericInput, fail_closed
from .arith import FEE_DENOMINATOR, require_positive


def _total_fee(xtz_in: Amount) -> Amount:
    return xtz_in / FEE_DENOMINATOR


@fail_closed
def total_liquidity_provider_fee(xtz_in: NumericInput) -> Optional[Decimal]:
    """Fee all liquidity providers together receive for `xtz_in` sold: xtz_in / 1000."""
    return _total_fee(require_positive("xtz_in", xtz_in))


@fail_closed
def liquidity_provider_fee(
    xtz_in: NumericInput,
    total_liquidity: NumericInput,
    user_liquidity: NumericInput,
) -> Optional[Decimal]:
    """
    Fee a single provider holding `user_liquidity` receives for `xtz_in` sold.

    The total fee pro-rated by the provider's share:
        total_fee / (total_liquidity / user_liquidity)
    """
    xtz_in_ = require_positive("xtz_in", xtz_in)
    total_liquidity_ = require_positive("total_liquidity", total_liquidity)
    user_liquidity_ = require_positive("user_liquidity", user_liquidity)
    return _total_fee(xtz_in_) / (total_liquidity_ / user_liquidity_)
