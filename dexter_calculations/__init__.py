"""
Stateless calculators for the Dexter / liquidity-baking constant-product exchanges.
"""

from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all
from .state import InvalidInput, to_amount

__all__ = [*_core_all, "InvalidInput", "to_amount"]
