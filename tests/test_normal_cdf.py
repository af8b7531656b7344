import numpy as np
import pytest
from scipy.stats import norm

from eso_pricing.numerics import normal_cdf


def test_cdf_at_zero_is_one_half():
    assert normal_cdf(0.0) == pytest.approx(0.5, abs=1e-8)


@pytest.mark.parametrize("x", [0.1, 0.5, 1.0, 1.96, 3.0, 7.5])
def test_cdf_symmetry(x):
    assert normal_cdf(-x) == pytest.approx(1.0 - normal_cdf(x), abs=1e-15)


def test_cdf_monotone_and_bounded():
    x = np.linspace(-8.0, 8.0, 4001)
    y = normal_cdf(x)
    assert np.all(np.diff(y) >= -1e-15)
    assert np.all((y >= 0.0) & (y <= 1.0))


def test_cdf_matches_scipy_within_approximation_error():
    x = np.linspace(-6.0, 6.0, 601)
    err = np.abs(normal_cdf(x) - norm.cdf(x))
    assert float(err.max()) < 1.5e-7


def test_scalar_in_scalar_out():
    assert isinstance(normal_cdf(1.0), float)
    assert normal_cdf(np.array([0.0, 1.0])).shape == (2,)
