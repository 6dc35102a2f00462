"""
Value types shared by the calculators
"""

from .amounts import (
    Amount,
    InvalidInput,
    MAX_EXPONENT,
    NumericInput,
    RESULT_PRECISION,
    fail_closed,
    to_amount,
    to_decimals,
    to_percent,
    to_result,
    to_tolerance,
)

__all__ = [
    "Amount",
    "InvalidInput",
    "MAX_EXPONENT",
    "NumericInput",
    "RESULT_PRECISION",
    "fail_closed",
    "to_amount",
    "to_decimals",
    "to_percent",
    "to_result",
    "to_tolerance",
]
