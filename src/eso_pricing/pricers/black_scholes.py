from __future__ import annotations

from ..config import LatticeConfig
from ..models import bs as bs_model
from ..types import OptionParameters


def bs_price(p: OptionParameters, *, config: LatticeConfig | None = None) -> float:
    """Closed-form European value of the option, ignoring vesting and exits.

    This is the value the lattice reproduces when vesting equals maturity and
    the reference it converges toward as the step count grows.
    """
    return bs_model.black_scholes_call_option_value(
        p.S,
        p.K,
        p.T,
        p.r,
        p.q,
        p.vol,
        config=config,
    )
