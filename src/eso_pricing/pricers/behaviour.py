"""Exercise-behaviour presets.

Two common assumptions about how holders exercise vested options:

- optimal: exercise only when it beats holding on (no trigger multiple);
- non-optimal: also exercise once the share price reaches a multiple of strike.

Both take the step count as a float ``n`` (as spreadsheet-style callers supply
it) and truncate it to an integer.
"""

from __future__ import annotations

import math

from ..config import DEFAULT_LATTICE_CONFIG, LatticeConfig
from .lattice import binomial_option_value


def _steps_from_float(n: float) -> int:
    if not math.isfinite(n):
        return 0
    return int(n)


def option_value_optimal(
    share_price: float,
    strike_price: float,
    time_to_maturity: float,
    vesting_period: float,
    risk_free: float,
    sigma: float,
    div_rate: float,
    exit_pre_vesting: float,
    exit_post_vesting: float,
    n: float,
    *,
    config: LatticeConfig | None = None,
) -> list[float]:
    """``[value, expected life]`` for a holder who exercises only when optimal."""
    cfg = config or DEFAULT_LATTICE_CONFIG
    return binomial_option_value(
        share_price,
        strike_price,
        time_to_maturity,
        vesting_period,
        risk_free,
        sigma,
        div_rate,
        exit_pre_vesting,
        exit_post_vesting,
        cfg.optimal_multiple,
        _steps_from_float(n),
        config=cfg,
    )


def option_value_non_optimal(
    share_price: float,
    strike_price: float,
    time_to_maturity: float,
    vesting_period: float,
    risk_free: float,
    sigma: float,
    div_rate: float,
    exit_pre_vesting: float,
    exit_post_vesting: float,
    multiple: float,
    n: float,
    *,
    config: LatticeConfig | None = None,
) -> list[float]:
    """``[value, expected life]`` for a holder who exercises at ``multiple * strike``."""
    return binomial_option_value(
        share_price,
        strike_price,
        time_to_maturity,
        vesting_period,
        risk_free,
        sigma,
        div_rate,
        exit_pre_vesting,
        exit_post_vesting,
        multiple,
        _steps_from_float(n),
        config=config,
    )
