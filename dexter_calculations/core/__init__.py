"""
Core CPMM calculators
"""

from .arith import (
    SUBSIDY,
    ceiling_divide,
    credit_subsidy,
    is_non_negative,
    is_non_positive,
    is_positive,
    is_zero,
    truncating_divide,
)
from .config import FEE_FREE, ExchangeConfig, load_presets, preset
from .exchange import Exchange
from .fees import liquidity_provider_fee, total_liquidity_provider_fee
from .liquidity import (
    add_liquidity_liquidity_created,
    add_liquidity_token_in,
    add_liquidity_xtz_in,
    bootstrap_liquidity,
    remove_liquidity_token_out,
    remove_liquidity_xtz_out,
)
from .quote import SwapQuote, quote_token_to_xtz, quote_xtz_to_token
from .swap import (
    minimum_output,
    token_to_xtz_exchange_rate,
    token_to_xtz_exchange_rate_for_display,
    token_to_xtz_market_rate,
    token_to_xtz_minimum_xtz_output,
    token_to_xtz_price_impact,
    token_to_xtz_token_input,
    token_to_xtz_xtz_output,
    xtz_to_token_exchange_rate,
    xtz_to_token_exchange_rate_for_display,
    xtz_to_token_market_rate,
    xtz_to_token_minimum_token_output,
    xtz_to_token_price_impact,
    xtz_to_token_token_output,
    xtz_to_token_xtz_input,
)

__all__ = [
    "SUBSIDY",
    "ceiling_divide",
    "credit_subsidy",
    "is_non_negative",
    "is_non_positive",
    "is_positive",
    "is_zero",
    "truncating_divide",
    "FEE_FREE",
    "ExchangeConfig",
    "load_presets",
    "preset",
    "Exchange",
    "liquidity_provider_fee",
    "total_liquidity_provider_fee",
    "add_liquidity_liquidity_created",
    "add_liquidity_token_in",
    "add_liquidity_xtz_in",
    "bootstrap_liquidity",
    "remove_liquidity_token_out",
    "remove_liquidity_xtz_out",
    "SwapQuote",
    "quote_token_to_xtz",
    "quote_xtz_to_token",
    "minimum_output",
    "token_to_xtz_exchange_rate",
    "token_to_xtz_exchange_rate_for_display",
    "token_to_xtz_market_rate",
    "token_to_xtz_minimum_xtz_output",
    "token_to_xtz_price_impact",
    "token_to_xtz_token_input",
    "token_to_xtz_xtz_output",
    "xtz_to_token_exchange_rate",
    "xtz_to_token_exchange_rate_for_display",
    "xtz_to_token_market_rate",
    "xtz_to_token_minimum_token_output",
    "xtz_to_token_price_impact",
    "xtz_to_token_token_output",
    "xtz_to_token_xtz_input",
]
