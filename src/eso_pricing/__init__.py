"""
eso_pricing

Employee stock option valuation with vesting, exit rates and a
multiple-of-strike exercise trigger.

This package exposes the main user-facing functions at the top level, so you
can write, for example:

    from eso_pricing import OptionParameters, binomial_option_value, eso_price
"""

# Re-export pricing entrypoints (nice public names)
from .config import DEFAULT_LATTICE_CONFIG, LatticeConfig
from .exceptions import (
    InvalidNonNegativeValueError,
    InvalidRateError,
    InvalidStepCountError,
    InvalidVolatilityError,
    ParameterError,
)
from .models.bs import black_scholes_call_option_value
from .numerics.normal import normal_cdf
from .pricers.behaviour import option_value_non_optimal, option_value_optimal
from .pricers.black_scholes import bs_price
from .pricers.lattice import binomial_option_value, eso_price
from .types import (
    EsoValuation,
    NonNegativeFloat,
    OptionParameters,
    PositiveInt,
    Rate,
    Volatility,
)

__all__ = [
    # Types
    "NonNegativeFloat",
    "PositiveInt",
    "Rate",
    "Volatility",
    "OptionParameters",
    "EsoValuation",
    # Errors
    "ParameterError",
    "InvalidNonNegativeValueError",
    "InvalidStepCountError",
    "InvalidVolatilityError",
    "InvalidRateError",
    # Config
    "LatticeConfig",
    "DEFAULT_LATTICE_CONFIG",
    # Pricers
    "normal_cdf",
    "black_scholes_call_option_value",
    "bs_price",
    "binomial_option_value",
    "eso_price",
    "option_value_optimal",
    "option_value_non_optimal",
]
