from __future__ import annotations

import numpy as np

from ..config import DEFAULT_LATTICE_CONFIG, LatticeConfig
from ..numerics.normal import normal_cdf


def discount_factor(rate: float, tau: float) -> float:
    return float(np.exp(-rate * tau))


def d1_d2(
    *, spot: float, strike: float, r: float, q: float, sigma: float, tau: float
) -> tuple[float, float]:
    # No validation: a zero spot gives d1 = d2 = -inf and a zero-value call.
    with np.errstate(divide="ignore", invalid="ignore"):
        vol_sqrt_t = sigma * np.sqrt(tau)
        num = np.log(spot / strike) + (r - q + 0.5 * sigma * sigma) * tau
        d1 = num / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    return float(d1), float(d2)


def black_scholes_call_option_value(
    share_price: float,
    strike_price: float,
    time_to_maturity: float,
    risk_free: float,
    div_rate: float,
    sigma: float,
    *,
    config: LatticeConfig | None = None,
) -> float:
    """
    Black–Scholes European call with continuous dividend yield.

    A strike of exactly zero is replaced by ``config.zero_strike_eps``. With
    ``sigma == 0`` the payoff is deterministic and the value is
    ``max(S*exp(-q*T) - K*exp(-r*T), 0)``.
    """
    cfg = config or DEFAULT_LATTICE_CONFIG
    strike = cfg.zero_strike_eps if strike_price == 0.0 else strike_price

    with np.errstate(over="ignore", invalid="ignore"):
        df_q = discount_factor(div_rate, time_to_maturity)
        df_r = discount_factor(risk_free, time_to_maturity)

        if sigma == 0.0:
            return float(np.fmax(share_price * df_q - strike * df_r, 0.0))

        d1, d2 = d1_d2(
            spot=share_price,
            strike=strike,
            r=risk_free,
            q=div_rate,
            sigma=sigma,
            tau=time_to_maturity,
        )
        return float(share_price * df_q * normal_cdf(d1) - df_r * strike * normal_cdf(d2))
