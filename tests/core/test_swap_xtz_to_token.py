# [TESTER] v1

from __future__ import annotations

from decimal import ROUND_CEILING, Decimal
from fractions import Fraction

import pytest

from dexter_calculations.core.config import FEE_FREE, ExchangeConfig, preset
from dexter_calculations.core.swap import (
    minimum_output,
    xtz_to_token_exchange_rate,
    xtz_to_token_exchange_rate_for_display,
    xtz_to_token_market_rate,
    xtz_to_token_minimum_token_output,
    xtz_to_token_price_impact,
    xtz_to_token_token_output,
    xtz_to_token_xtz_input,
)
from dexter_calculations.state.amounts import to_result


def test_token_output_is_exact() -> None:
    assert xtz_to_token_token_output(2_000_000, 8_000_000, 1_000) == Decimal(200)
    assert xtz_to_token_token_output(1, 1, 1) == Decimal("0.5")


def test_token_output_accepts_strings_floats_and_decimals() -> None:
    expected = xtz_to_token_token_output(2_000_000, 8_000_000, 1_000)
    assert xtz_to_token_token_output("2000000", "8000000", "1000") == expected
    assert xtz_to_token_token_output(2e6, 8e6, 1e3) == expected
    assert xtz_to_token_token_output(Decimal("2000000"), 8_000_000, "1e3") == expected


def test_token_output_is_not_truncated_but_floors_to_contract_amounts() -> None:
    # 250_000 * 1_000_000 / 1_001_000_000 = 249.75...
    out = xtz_to_token_token_output(1_000_000, 1_000_000_000, 250_000)
    assert Decimal(249) < out < Decimal(250)
    assert int(out) == 249


@pytest.mark.parametrize("xtz_in", [5, 5_000, 10_000])
def test_dust_trades_floor_to_zero_tokens(xtz_in: int) -> None:
    out = xtz_to_token_token_output(xtz_in, 100_000, 10)
    assert out > 0
    assert int(out) == 0


def test_token_output_with_fee_and_burn() -> None:
    lb_rates = ExchangeConfig(fee_percent="0.1", burn_percent="0.1")
    # 1e6 * 1e6 * 998001 / (1e7 * 1e6 + 1e6 * 998001)
    expected = to_result(Fraction(10**6 * 10**6 * 998_001, 10**7 * 10**6 + 10**6 * 998_001), ROUND_CEILING)
    assert xtz_to_token_token_output(1_000_000, 10_000_000, 1_000_000, lb_rates) == expected
    assert xtz_to_token_token_output(1_000_000, 10_000_000, 1_000_000) > expected


def test_token_output_credits_subsidy_once() -> None:
    lb = preset("liquidity_baking")
    plain = ExchangeConfig(fee_percent="0.1", burn_percent="0.1")
    assert xtz_to_token_token_output(1_000_000, 7_500_000, 1_000_000, lb) == xtz_to_token_token_output(
        1_000_000, 10_000_000, 1_000_000, plain
    )
    # An empty XTZ pool is still priceable once the subsidy is credited.
    assert xtz_to_token_token_output(1_000_000, 0, 1_000_000, lb) is not None


@pytest.mark.parametrize(
    "args",
    [
        (0, 8_000_000, 1_000),
        (1, 0, 1_000),
        (1, 8_000_000, 0),
        (-1, 8_000_000, 1_000),
        ("abc", 8_000_000, 1_000),
        (float("nan"), 8_000_000, 1_000),
        (None, 8_000_000, 1_000),
    ],
)
def test_token_output_invalid_input_returns_none(args) -> None:
    assert xtz_to_token_token_output(*args) is None


def test_xtz_input_inverts_token_output() -> None:
    assert xtz_to_token_xtz_input(200, 8_000_000, 1_000, 6) == Decimal(2_000_000)
    lb = preset("liquidity_baking")
    out = xtz_to_token_token_output(3_000_000, 40_000_000, 5_000_000, lb)
    back = xtz_to_token_xtz_input(out, 40_000_000, 5_000_000, 8, lb)
    assert back >= Decimal(3_000_000)
    assert back - Decimal(3_000_000) < Decimal("1e-40")


@pytest.mark.parametrize("config", [FEE_FREE, preset("liquidity_baking")])
def test_xtz_input_of_reported_output_never_undercuts_input(config: ExchangeConfig) -> None:
    for k in range(100):
        xtz_in = 1_000_000 + k * 7919
        out = xtz_to_token_token_output(xtz_in, 29_757_960_047, 351_953_939_000, config)
        back = xtz_to_token_xtz_input(out, 29_757_960_047, 351_953_939_000, 8, config)
        assert back >= Decimal(xtz_in), xtz_in


def test_token_output_rounds_up_without_changing_the_delivered_amount() -> None:
    exact = Fraction(250_000 * 1_000_000, 1_001_000_000)
    out = xtz_to_token_token_output(1_000_000, 1_000_000_000, 250_000)
    assert Fraction(out) >= exact
    assert int(out) == int(exact) == 249


@pytest.mark.parametrize("token_out", [1_000, 1_500])
def test_xtz_input_fails_when_pool_cannot_provide(token_out: int) -> None:
    assert xtz_to_token_xtz_input(token_out, 8_000_000, 1_000, 6) is None


def test_xtz_input_validates_decimals() -> None:
    assert xtz_to_token_xtz_input(200, 8_000_000, 1_000, -1) is None
    assert xtz_to_token_xtz_input(200, 8_000_000, 1_000, "abc") is None
    assert xtz_to_token_xtz_input(200, 8_000_000, 1_000, "0") == Decimal(2_000_000)


def test_xtz_input_fails_for_full_fee() -> None:
    assert xtz_to_token_xtz_input(200, 8_000_000, 1_000, 6, ExchangeConfig(fee_percent=100)) is None


def test_exchange_rates() -> None:
    assert xtz_to_token_exchange_rate(2_000_000, 8_000_000, 1_000) == Decimal("0.0001")
    # (200 * 10**-3) / (2_000_000 * 10**-6)
    assert xtz_to_token_exchange_rate_for_display(2_000_000, 8_000_000, 1_000, 3) == Decimal("0.1")
    assert xtz_to_token_exchange_rate_for_display(2_000_000, 8_000_000, 1_000, -3) is None


def test_market_rate() -> None:
    assert xtz_to_token_market_rate(8_000_000, 1_000, 3) == Decimal("0.125")
    rate = xtz_to_token_market_rate("144621788919", "961208019", "8")
    assert abs(rate - Decimal("0.000066463568607795")) < Decimal("1e-17")
    assert xtz_to_token_market_rate(0, 1_000, 3) is None


def test_price_impact() -> None:
    # ideal 1000/9 tokens, bought 100
    assert xtz_to_token_price_impact(1_000_000, 9_000_000, 1_000) == Decimal("0.1")
    # burn 10% of the XTZ sold: bought 1000/11, impact 2/11
    burned = ExchangeConfig(burn_percent=10)
    assert xtz_to_token_price_impact(1_000_000, 9_000_000, 1_000, burned) == to_result(Fraction(2, 11))


def test_price_impact_is_zero_when_nothing_is_bought() -> None:
    assert xtz_to_token_price_impact(1_000_000, 9_000_000, 1_000, ExchangeConfig(burn_percent=100)) == 0


def test_price_impact_is_small_for_small_trades() -> None:
    impact = xtz_to_token_price_impact(1_000_000, 29_757_960_047, 351_953_939)
    assert Decimal(0) < impact < Decimal("0.0001")


@pytest.mark.parametrize(
    ("token_out", "slippage", "expected"),
    [
        (10_000, 0.05, 9_500),
        (10_000, 0.01, 9_900),
        (330_000, 0.005, 328_350),
        (1_000, 0.01, 990),
        (5_000, 0.2, 4_000),
        (100, 0.055, 94),
        (100_000, 0.29, 71_000),
        (5_846_941_182, 0.3142, 4_009_832_262),
    ],
)
def test_minimum_token_output(token_out: int, slippage: float, expected: int) -> None:
    assert xtz_to_token_minimum_token_output(token_out, slippage) == Decimal(expected)


def test_minimum_output_never_below_one() -> None:
    assert xtz_to_token_minimum_token_output(1, 0.5) == 1
    assert xtz_to_token_minimum_token_output("0.5", 0) == 1
    assert minimum_output(10_000, 1) == 1


@pytest.mark.parametrize(("token_out", "slippage"), [(0, 0.01), (-5, 0.01), (100, 1.5), (100, -0.1), ("x", 0.1)])
def test_minimum_output_invalid_input_returns_none(token_out, slippage) -> None:
    assert xtz_to_token_minimum_token_output(token_out, slippage) is None


def test_huge_exponents_are_rejected_before_any_arithmetic() -> None:
    assert xtz_to_token_token_output("1e999999999", 8_000_000, 1_000) is None
    assert xtz_to_token_exchange_rate_for_display(2_000_000, 8_000_000, 1_000, 10**9) is None
    assert xtz_to_token_market_rate(8_000_000, 1_000, "1e9") is None
