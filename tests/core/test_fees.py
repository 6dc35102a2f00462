# [TESTER] v1

from __future__ import annotations

from decimal import Decimal

import pytest

from dexter_calculations.core.fees import liquidity_provider_fee, total_liquidity_provider_fee


@pytest.mark.parametrize(
    ("xtz_in", "expected"),
    [
        (1_000_000, Decimal(1_000)),
        (2_000_000, Decimal(2_000)),
        (1_000_000_000, Decimal(1_000_000)),
        (2_500_000_000, Decimal(2_500_000)),
        (1_500, Decimal("1.5")),
    ],
)
def test_total_fee_is_a_tenth_of_a_percent(xtz_in: int, expected: Decimal) -> None:
    assert total_liquidity_provider_fee(xtz_in) == expected


def test_provider_fee_is_pro_rated_by_share() -> None:
    assert liquidity_provider_fee(1_000_000, 100, 50) == Decimal(500)
    assert liquidity_provider_fee(1_000_000, 1_000, 100) == Decimal(100)
    assert liquidity_provider_fee(1_000_000, 100, 100) == total_liquidity_provider_fee(1_000_000)


def test_fee_invalid_input_returns_none() -> None:
    assert total_liquidity_provider_fee(0) is None
    assert total_liquidity_provider_fee("abc") is None
    assert liquidity_provider_fee(0, 100, 50) is None
    assert liquidity_provider_fee(1_000_000, 0, 50) is None
    assert liquidity_provider_fee(1_000_000, 100, 0) is None
