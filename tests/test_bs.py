import math

import numpy as np
import pytest
from scipy.stats import norm

from eso_pricing.models.bs import black_scholes_call_option_value, d1_d2
from eso_pricing.pricers.black_scholes import bs_price


def _scipy_call(S, K, T, r, q, sigma):
    d1, d2 = d1_d2(spot=S, strike=K, r=r, q=q, sigma=sigma, tau=T)
    return S * math.exp(-q * T) * norm.cdf(d1) - K * math.exp(-r * T) * norm.cdf(d2)


def test_matches_textbook_formula():
    v = black_scholes_call_option_value(100.0, 105.0, 1.2, 0.03, 0.01, 0.25)
    assert v == pytest.approx(_scipy_call(100.0, 105.0, 1.2, 0.03, 0.01, 0.25), abs=5e-5)


def test_call_bounds():
    """max(S*e^{-qT} - K*e^{-rT}, 0) <= C <= S*e^{-qT}."""
    S, K, T, r, q, sigma = 120.0, 100.0, 0.75, 0.04, 0.02, 0.3
    C = black_scholes_call_option_value(S, K, T, r, q, sigma)
    lower = max(S * math.exp(-q * T) - K * math.exp(-r * T), 0.0)
    assert lower - 1e-4 <= C <= S * math.exp(-q * T) + 1e-4


def test_zero_volatility_is_discounted_payoff():
    v = black_scholes_call_option_value(100.0, 90.0, 2.0, 0.05, 0.01, 0.0)
    expected = 100.0 * math.exp(-0.01 * 2.0) - 90.0 * math.exp(-0.05 * 2.0)
    assert v == pytest.approx(expected, rel=1e-14)
    assert black_scholes_call_option_value(50.0, 90.0, 2.0, 0.05, 0.01, 0.0) == 0.0


def test_zero_strike_uses_small_epsilon():
    v = black_scholes_call_option_value(100.0, 0.0, 1.0, 0.05, 0.0, 0.3)
    assert math.isfinite(v)
    assert v == pytest.approx(100.0 - 0.001 * math.exp(-0.05), abs=1e-9)


def test_zero_share_price_is_worthless():
    assert black_scholes_call_option_value(0.0, 100.0, 1.0, 0.05, 0.0, 0.3) == 0.0


def test_call_monotone_decreasing_in_strike():
    strikes = np.array([60, 80, 100, 120, 140], dtype=float)
    prices = np.array(
        [black_scholes_call_option_value(100.0, K, 1.0, 0.05, 0.0, 0.2) for K in strikes]
    )
    assert np.all(np.diff(prices) <= 1e-10)


def test_bs_price_from_parameters(make_params):
    p = make_params()
    assert bs_price(p) == black_scholes_call_option_value(
        p.S, p.K, p.T, p.r, p.q, p.vol
    )
