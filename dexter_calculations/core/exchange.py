"""
Exchange instances: one configuration, every calculator.

An `Exchange` binds an `ExchangeConfig` once, so every quote in a trade uses
the same fee, burn and subsidy settings:

    lb = Exchange.from_preset("liquidity_baking")
    out = lb.xtz_to_token_token_output(xtz_in, xtz_pool, token_pool)
    minimum = lb.xtz_to_token_minimum_token_output(out, 0.005)
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..state.amounts import NumericInput
from . import fees, liquidity, quote, swap
from .config import FEE_FREE, ExchangeConfig, preset


@dataclass(frozen=True)
class Exchange:
    config: ExchangeConfig = FEE_FREE

    @classmethod
    def from_preset(cls, name: str) -> "Exchange":
        return cls(config=preset(name))

    # --- xtzToToken ---

    def xtz_to_token_token_output(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_token_output(xtz_in, xtz_pool, token_pool, self.config)

    def xtz_to_token_xtz_input(
        self, token_out: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_xtz_input(token_out, xtz_pool, token_pool, decimals, self.config)

    def xtz_to_token_exchange_rate(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_exchange_rate(xtz_in, xtz_pool, token_pool, self.config)

    def xtz_to_token_exchange_rate_for_display(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_exchange_rate_for_display(xtz_in, xtz_pool, token_pool, decimals, self.config)

    def xtz_to_token_market_rate(
        self, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_market_rate(xtz_pool, token_pool, decimals, self.config)

    def xtz_to_token_price_impact(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_price_impact(xtz_in, xtz_pool, token_pool, self.config)

    def xtz_to_token_minimum_token_output(
        self, token_out: NumericInput, allowed_slippage: NumericInput
    ) -> Optional[Decimal]:
        return swap.xtz_to_token_minimum_token_output(token_out, allowed_slippage)

    def quote_xtz_to_token(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, allowed_slippage: NumericInput
    ) -> Optional[quote.SwapQuote]:
        return quote.quote_xtz_to_token(xtz_in, xtz_pool, token_pool, allowed_slippage, self.config)

    # --- tokenToXtz ---

    def token_to_xtz_xtz_output(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_xtz_output(token_in, xtz_pool, token_pool, self.config)

    def token_to_xtz_token_input(
        self, xtz_out: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_token_input(xtz_out, xtz_pool, token_pool, decimals, self.config)

    def token_to_xtz_exchange_rate(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_exchange_rate(token_in, xtz_pool, token_pool, self.config)

    def token_to_xtz_exchange_rate_for_display(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_exchange_rate_for_display(token_in, xtz_pool, token_pool, decimals, self.config)

    def token_to_xtz_market_rate(
        self, xtz_pool: NumericInput, token_pool: NumericInput, decimals: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_market_rate(xtz_pool, token_pool, decimals, self.config)

    def token_to_xtz_price_impact(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_price_impact(token_in, xtz_pool, token_pool, self.config)

    def token_to_xtz_minimum_xtz_output(
        self, xtz_out: NumericInput, allowed_slippage: NumericInput
    ) -> Optional[Decimal]:
        return swap.token_to_xtz_minimum_xtz_output(xtz_out, allowed_slippage)

    def quote_token_to_xtz(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput, allowed_slippage: NumericInput
    ) -> Optional[quote.SwapQuote]:
        return quote.quote_token_to_xtz(token_in, xtz_pool, token_pool, allowed_slippage, self.config)

    # --- addLiquidity ---

    def add_liquidity_liquidity_created(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, total_liquidity: NumericInput
    ) -> Optional[Decimal]:
        return liquidity.add_liquidity_liquidity_created(xtz_in, xtz_pool, total_liquidity, self.config)

    def add_liquidity_token_in(
        self, xtz_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return liquidity.add_liquidity_token_in(xtz_in, xtz_pool, token_pool, self.config)

    def add_liquidity_xtz_in(
        self, token_in: NumericInput, xtz_pool: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return liquidity.add_liquidity_xtz_in(token_in, xtz_pool, token_pool, self.config)

    # --- removeLiquidity ---

    def remove_liquidity_xtz_out(
        self, liquidity_burned: NumericInput, total_liquidity: NumericInput, xtz_pool: NumericInput
    ) -> Optional[Decimal]:
        return liquidity.remove_liquidity_xtz_out(liquidity_burned, total_liquidity, xtz_pool, self.config)

    def remove_liquidity_token_out(
        self, liquidity_burned: NumericInput, total_liquidity: NumericInput, token_pool: NumericInput
    ) -> Optional[Decimal]:
        return liquidity.remove_liquidity_token_out(liquidity_burned, total_liquidity, token_pool)

    # --- fees ---

    def total_liquidity_provider_fee(self, xtz_in: NumericInput) -> Optional[Decimal]:
        return fees.total_liquidity_provider_fee(xtz_in)

    def liquidity_provider_fee(
        self, xtz_in: NumericInput, total_liquidity: NumericInput, user_liquidity: NumericInput
    ) -> Optional[Decimal]:
        return fees.liquidity_provider_fee(xtz_in, total_liquidity, user_liquidity)
