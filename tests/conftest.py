"""Pytest helpers for the eso_pricing library."""

from __future__ import annotations

import pytest

from eso_pricing.types import OptionParameters


@pytest.fixture
def base_params() -> dict:
    """Canonical raw inputs, in host order, used across tests."""
    return {
        "share_price": 100.0,
        "strike_price": 90.0,
        "time_to_maturity": 1.0,
        "vesting_period": 0.25,
        "risk_free": 0.05,
        "sigma": 0.3,
        "div_rate": 0.0,
        "exit_pre_vesting": 0.1,
        "exit_post_vesting": 0.1,
        "multiple": 2.0,
        "steps": 100,
    }


@pytest.fixture
def make_params():
    """Factory fixture for validated OptionParameters with overridable fields."""

    def _make(**overrides) -> OptionParameters:
        raw = {
            "share_price": 100.0,
            "strike_price": 100.0,
            "time_to_maturity": 5.0,
            "vesting_period": 2.0,
            "risk_free": 0.05,
            "sigma": 0.3,
            "div_rate": 0.02,
            "exit_pre_vesting": 0.1,
            "exit_post_vesting": 0.05,
            "multiple": 2.5,
            "steps": 100,
        }
        raw.update(overrides)
        return OptionParameters.new(**raw)

    return _make
