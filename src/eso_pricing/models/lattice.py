from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_LATTICE_CONFIG, LatticeConfig


def vesting_step(vesting_period: float, dt: float, eps: float) -> int:
    """First step index at which exercise is allowed, ``floor(vesting/dt + eps)``.

    The epsilon keeps an exact multiple of ``dt`` from rounding down a step.
    Non-finite or negative ratios map to step 0.
    """
    x = vesting_period / dt + eps
    if not math.isfinite(x) or x <= 0.0:
        return 0
    return int(x)


@dataclass(frozen=True, slots=True)
class EsoLatticeModel:
    S0: float  # share price at grant
    u: float  # up factor
    d: float  # down factor
    r: float  # risk-free rate (cc)
    q: float  # dividend yield (cc)
    T: float  # time to maturity
    n_steps: int
    vest_step: int  # first step index where exercise is allowed
    px: float  # per-step survival, post-vesting
    px_pre: float  # per-step survival, pre-vesting
    zero_vol_tol: float = DEFAULT_LATTICE_CONFIG.zero_vol_tol

    @classmethod
    def from_crr(
        cls,
        *,
        S0: float,
        r: float,
        q: float,
        sigma: float,
        T: float,
        vesting_period: float,
        exit_pre_vesting: float,
        exit_post_vesting: float,
        n_steps: int,
        config: LatticeConfig | None = None,
    ) -> EsoLatticeModel:
        """Cox-Ross-Rubinstein factors plus per-step vesting and exit terms.

        Inputs are not range-checked; out-of-domain values give NaN factors.
        """
        if n_steps <= 0:
            raise ValueError("n_steps must be positive")
        if T == 0.0:
            raise ValueError("T must be non-zero")
        cfg = config or DEFAULT_LATTICE_CONFIG

        dt = T / n_steps
        with np.errstate(invalid="ignore", over="ignore"):
            u = float(np.exp(sigma * np.sqrt(dt)))
            px = float(np.power(1.0 - exit_post_vesting, dt))
            px_pre = float(np.power(1.0 - exit_pre_vesting, dt))
        d = 1.0 / u if u != 0.0 else math.inf

        return cls(
            S0=S0,
            u=u,
            d=d,
            r=r,
            q=q,
            T=T,
            n_steps=n_steps,
            vest_step=vesting_step(vesting_period, dt, cfg.vest_step_eps),
            px=px,
            px_pre=px_pre,
            zero_vol_tol=cfg.zero_vol_tol,
        )

    @property
    def dt(self) -> float:
        return self.T / self.n_steps

    @property
    def qx(self) -> float:
        # per-step exit probability, post-vesting
        return 1.0 - self.px

    @property
    def growth(self) -> float:
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.exp((self.r - self.q) * self.dt))

    @property
    def disc_step(self) -> float:
        # one-period accumulation factor; continuation values are divided by it
        with np.errstate(over="ignore", invalid="ignore"):
            return float(np.exp(self.r * self.dt))

    @property
    def p_star(self) -> float:
        # A zero-volatility lattice has u == d: every path moves "up" by 1.
        if abs(self.u - self.d) < self.zero_vol_tol:
            return 1.0
        return (self.growth - self.d) / (self.u - self.d)
