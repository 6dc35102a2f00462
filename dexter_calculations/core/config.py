"""
Per-exchange configuration: fee rate, burn rate and the liquidity-baking subsidy.

An `ExchangeConfig` is attached once to an exchange instance and reused for
every quote against it, so the rates and the subsidy flag cannot drift between
the calls that make up one trade.

Known exchanges are declared in `exchanges.yaml` next to this module.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Mapping

import yaml

from ..state.amounts import Amount, NumericInput, to_amount, to_percent
from .arith import FEE_DENOMINATOR, credit_subsidy, percent_multiplier, require_positive


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeConfig:
    """
    Fee and burn percentages in [0, 100] (0.1% resolution) plus the subsidy flag.

    Raises:
        ValueError: If a percentage is not a number in [0, 100]
        TypeError: If credits_subsidy is not a bool
    """

    fee_percent: NumericInput = 0
    burn_percent: NumericInput = 0
    credits_subsidy: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.credits_subsidy, bool):
            raise TypeError("credits_subsidy must be a bool")
        to_percent(self.fee_percent, "fee_percent")
        to_percent(self.burn_percent, "burn_percent")

    @property
    def fee(self) -> int:
        """Fee multiplier out of 1000."""
        return percent_multiplier(to_amount(self.fee_percent))

    @property
    def burn(self) -> int:
        """Burn multiplier out of 1000."""
        return percent_multiplier(to_amount(self.burn_percent))

    @property
    def fee_multiplier(self) -> int:
        """fee * burn, out of 1_000_000."""
        return self.fee * self.burn

    @property
    def fee_only_multiplier(self) -> int:
        """fee * 1000, out of 1_000_000 (the burn-free leg of token->xtz)."""
        return self.fee * FEE_DENOMINATOR

    def effective_xtz_pool(self, xtz_pool: Amount) -> Amount:
        """The XTZ pool as the contract sees it, subsidy included when credited."""
        if self.credits_subsidy:
            return credit_subsidy(xtz_pool)
        return xtz_pool


FEE_FREE = ExchangeConfig()


def require_xtz_pool(xtz_pool: NumericInput, config: ExchangeConfig) -> Amount:
    """Coerce the XTZ pool, credit the subsidy once, then require it to be positive."""
    return require_positive("xtz_pool", config.effective_xtz_pool(to_amount(xtz_pool, "xtz_pool")))


def _presets_path() -> Path:
    # dexter_calculations/core/config.py -> dexter_calculations/core/exchanges.yaml
    return Path(__file__).resolve().parent / "exchanges.yaml"


def _parse_preset(name: str, raw: object) -> ExchangeConfig:
    if not isinstance(raw, Mapping):
        raise TypeError(f"preset {name!r} must be a mapping")
    unknown = set(raw) - {"fee_percent", "burn_percent", "credits_subsidy"}
    if unknown:
        raise ValueError(f"preset {name!r} has unknown keys: {sorted(unknown)}")
    return ExchangeConfig(
        fee_percent=raw.get("fee_percent", 0),
        burn_percent=raw.get("burn_percent", 0),
        credits_subsidy=raw.get("credits_subsidy", False),
    )


@lru_cache(maxsize=1)
def _load_presets_cached() -> Dict[str, ExchangeConfig]:
    path = _presets_path()
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(obj, Mapping):
        raise TypeError("exchange presets YAML must be a mapping")
    presets = {str(name): _parse_preset(str(name), raw) for name, raw in obj.items()}
    logger.debug("loaded %d exchange presets from %s", len(presets), path)
    return presets


def load_presets() -> Dict[str, ExchangeConfig]:
    """Return every known exchange preset keyed by name."""
    return dict(_load_presets_cached())


def preset(name: str) -> ExchangeConfig:
    """
    Look up a known exchange by name (e.g. "liquidity_baking").

    Raises:
        KeyError: If no preset has that name
    """
    presets = _load_presets_cached()
    if name not in presets:
        raise KeyError(f"unknown exchange preset {name!r}; known: {sorted(presets)}")
    return presets[name]
