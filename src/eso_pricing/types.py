from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import NamedTuple

from .exceptions import (
    InvalidNonNegativeValueError,
    InvalidRateError,
    InvalidStepCountError,
    InvalidVolatilityError,
)

# ----------------------------
# Validated scalars
# ----------------------------


@dataclass(frozen=True, slots=True, order=True)
class NonNegativeFloat:
    """A finite float that is ``>= 0`` (prices, times, trigger multiples).

    Parameters
    ----------
    value : float
        The wrapped number.
    parameter : str, default "value"
        Name reported in :class:`InvalidNonNegativeValueError` on failure.

    Raises
    ------
    InvalidNonNegativeValueError
        If ``value`` is negative, NaN or infinite.
    """

    value: float
    parameter: str = "value"

    def __post_init__(self) -> None:
        if not (math.isfinite(self.value) and self.value >= 0.0):
            raise InvalidNonNegativeValueError(self.parameter, self.value)

    def __float__(self) -> float:
        return float(self.value)

    def min(self, other: NonNegativeFloat) -> NonNegativeFloat:
        """Smaller of the two values, reported under this value's parameter name."""
        if self.value <= other.value:
            return self
        return NonNegativeFloat(other.value, self.parameter)

    def min_float(self, other: float) -> NonNegativeFloat:
        """Like :meth:`min` for a raw float, which must itself be valid."""
        return self.min(NonNegativeFloat(other, "comparison_value"))


@dataclass(frozen=True, slots=True)
class PositiveInt:
    """An integer count that is ``> 0`` (lattice steps)."""

    value: int
    parameter: str = "steps"

    def __post_init__(self) -> None:
        try:
            n = operator.index(self.value)
        except TypeError:
            raise InvalidStepCountError(self.parameter, self.value) from None
        if n <= 0:
            raise InvalidStepCountError(self.parameter, n)

    def __int__(self) -> int:
        return int(self.value)


@dataclass(frozen=True, slots=True)
class Rate:
    """An annualised rate strictly inside ``(0, 1)``."""

    value: float
    parameter: str = "rate"

    def __post_init__(self) -> None:
        if not (math.isfinite(self.value) and 0.0 < self.value < 1.0):
            raise InvalidRateError(self.parameter, self.value)

    def __float__(self) -> float:
        return float(self.value)


@dataclass(frozen=True, slots=True)
class Volatility:
    """A finite, strictly positive annualised volatility."""

    value: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.value) and self.value > 0.0):
            raise InvalidVolatilityError(self.value)

    def __float__(self) -> float:
        return float(self.value)


# ----------------------------
# Aggregates
# ----------------------------


@dataclass(frozen=True, slots=True)
class OptionParameters:
    """Validated inputs for one employee stock option valuation.

    Build it with :meth:`new`, which takes the eleven raw values in host order
    and validates each one. The vesting period is clamped so it never exceeds
    the time to maturity.

    Attributes
    ----------
    S, K, T : float
        Aliases for share price, strike price and time to maturity.
    r, q, sigma : float
        Aliases for risk-free rate, dividend yield and volatility.

    Notes
    -----
    Dividend yield and both exit rates are :class:`Rate` values, so a value of
    exactly zero is rejected here even though the permissive pricer accepts it.
    """

    share_price: NonNegativeFloat
    strike_price: NonNegativeFloat
    time_to_maturity: NonNegativeFloat
    vesting_period: NonNegativeFloat
    risk_free: Rate
    sigma: Volatility
    div_rate: Rate
    exit_pre_vesting: Rate
    exit_post_vesting: Rate
    multiple: NonNegativeFloat
    steps: PositiveInt

    @classmethod
    def new(
        cls,
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
        steps: int,
    ) -> OptionParameters:
        """Validate raw inputs; the first invalid one (in argument order) raises.

        Raises
        ------
        ParameterError
            The matching subclass for the first rejected parameter.
        """
        return cls(
            share_price=NonNegativeFloat(share_price, "share_price"),
            strike_price=NonNegativeFloat(strike_price, "strike_price"),
            time_to_maturity=NonNegativeFloat(time_to_maturity, "time_to_maturity"),
            vesting_period=NonNegativeFloat(vesting_period, "vesting_period").min_float(
                time_to_maturity
            ),
            risk_free=Rate(risk_free, "risk_free"),
            sigma=Volatility(sigma),
            div_rate=Rate(div_rate, "div_rate"),
            exit_pre_vesting=Rate(exit_pre_vesting, "exit_pre_vesting"),
            exit_post_vesting=Rate(exit_post_vesting, "exit_post_vesting"),
            multiple=NonNegativeFloat(multiple, "multiple"),
            steps=PositiveInt(steps, "steps"),
        )

    @property
    def S(self) -> float:
        return self.share_price.value

    @property
    def K(self) -> float:
        return self.strike_price.value

    @property
    def T(self) -> float:
        return self.time_to_maturity.value

    @property
    def r(self) -> float:
        return self.risk_free.value

    @property
    def q(self) -> float:
        return self.div_rate.value

    @property
    def vol(self) -> float:
        return self.sigma.value

    def raw(self) -> tuple[float, ...]:
        """The eleven values in host order, ready for the permissive pricer."""
        return (
            self.share_price.value,
            self.strike_price.value,
            self.time_to_maturity.value,
            self.vesting_period.value,
            self.risk_free.value,
            self.sigma.value,
            self.div_rate.value,
            self.exit_pre_vesting.value,
            self.exit_post_vesting.value,
            self.multiple.value,
            self.steps.value,
        )


class EsoValuation(NamedTuple):
    """Fair value and expected life (years) of an employee stock option."""

    value: float
    expected_life: float
