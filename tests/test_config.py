import pytest

from eso_pricing.config import DEFAULT_LATTICE_CONFIG, LatticeConfig


def test_defaults():
    assert DEFAULT_LATTICE_CONFIG.zero_strike_eps == 1e-3
    assert DEFAULT_LATTICE_CONFIG.vest_step_eps == 1e-3
    assert DEFAULT_LATTICE_CONFIG.optimal_multiple == 1e7


@pytest.mark.parametrize(
    "kw",
    [
        {"zero_strike_eps": 0.0},
        {"vest_step_eps": -1e-3},
        {"vesting_tol": -1.0},
        {"zero_vol_tol": 0.0},
        {"optimal_multiple": 0.0},
    ],
)
def test_config_validation(kw):
    with pytest.raises(ValueError):
        LatticeConfig(**kw)
