from __future__ import annotations

import sys
from dataclasses import dataclass

_MACHINE_EPS = sys.float_info.epsilon


@dataclass(frozen=True, slots=True)
class LatticeConfig:
    zero_strike_eps: float = 1e-3  # stands in for a strike of exactly 0
    vest_step_eps: float = 1e-3  # floor(vesting / dt + eps)
    vesting_tol: float = _MACHINE_EPS  # |vesting - maturity| below this is European
    zero_vol_tol: float = _MACHINE_EPS  # |u - d| below this forces p* = 1
    optimal_multiple: float = 1e7  # trigger that never binds

    def __post_init__(self) -> None:
        if self.zero_strike_eps <= 0:
            raise ValueError("zero_strike_eps must be > 0")
        if self.vest_step_eps < 0:
            raise ValueError("vest_step_eps must be >= 0")
        if self.vesting_tol <= 0 or self.zero_vol_tol <= 0:
            raise ValueError("vesting_tol and zero_vol_tol must be > 0")
        if self.optimal_multiple <= 0:
            raise ValueError("optimal_multiple must be > 0")


DEFAULT_LATTICE_CONFIG = LatticeConfig()
