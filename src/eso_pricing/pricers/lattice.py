from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Literal, overload

import numpy as np

from ..config import DEFAULT_LATTICE_CONFIG, LatticeConfig
from ..exceptions import InvalidStepCountError
from ..models.bs import black_scholes_call_option_value
from ..models.lattice import EsoLatticeModel
from ..types import EsoValuation, OptionParameters
from ..typing import FloatArray, FloatDType

logger = logging.getLogger(__name__)

# ----------------------------
# Lattice storage
# ----------------------------


@dataclass(frozen=True, slots=True)
class LatticeNode:
    step: int
    index: int
    share_price: float
    intrinsic_value: float
    option_value: float
    duration_numerator: float
    duration_denominator: float


@dataclass(slots=True)
class EsoLattice:
    """Triangular lattice stored as flat ``(n_steps+1)**2`` arrays.

    Node ``(i, j)`` (time step ``i``, ``j`` up-moves, ``0 <= j <= i``) lives at
    offset :meth:`idx`. Cells with ``j > i`` are never read.
    """

    n_steps: int
    share_price: FloatArray
    intrinsic_value: FloatArray
    option_value: FloatArray
    duration_numerator: FloatArray
    duration_denominator: FloatArray

    @classmethod
    def allocate(cls, n_steps: int) -> EsoLattice:
        size = (n_steps + 1) * (n_steps + 1)
        return cls(
            n_steps=n_steps,
            share_price=np.zeros(size, dtype=FloatDType),
            intrinsic_value=np.zeros(size, dtype=FloatDType),
            option_value=np.zeros(size, dtype=FloatDType),
            duration_numerator=np.zeros(size, dtype=FloatDType),
            duration_denominator=np.zeros(size, dtype=FloatDType),
        )

    def idx(self, i: int, j: int) -> int:
        return i * (self.n_steps + 1) + j

    def row(self, i: int) -> slice:
        """Nodes ``(i, 0) .. (i, i)``."""
        start = self.idx(i, 0)
        return slice(start, start + i + 1)

    def up_children(self, i: int) -> slice:
        """Nodes ``(i+1, j+1)`` for ``j = 0 .. i``."""
        start = self.idx(i + 1, 1)
        return slice(start, start + i + 1)

    def down_children(self, i: int) -> slice:
        """Nodes ``(i+1, j)`` for ``j = 0 .. i``."""
        start = self.idx(i + 1, 0)
        return slice(start, start + i + 1)

    def node(self, i: int, j: int) -> LatticeNode:
        if not (0 <= j <= i <= self.n_steps):
            raise IndexError(f"No lattice node at ({i}, {j})")
        k = self.idx(i, j)
        return LatticeNode(
            step=i,
            index=j,
            share_price=float(self.share_price[k]),
            intrinsic_value=float(self.intrinsic_value[k]),
            option_value=float(self.option_value[k]),
            duration_numerator=float(self.duration_numerator[k]),
            duration_denominator=float(self.duration_denominator[k]),
        )

    @property
    def root(self) -> LatticeNode:
        return self.node(0, 0)

    @property
    def value(self) -> float:
        return float(self.option_value[self.idx(0, 0)])

    @property
    def expected_life(self) -> float:
        """Macaulay duration at the root; 0 when nothing is ever paid out."""
        k = self.idx(0, 0)
        den = float(self.duration_denominator[k])
        if den == 0.0:
            return 0.0
        return float(self.duration_numerator[k]) / den


def build_lattice(model: EsoLatticeModel, strike: float) -> EsoLattice:
    """Allocate a lattice and fill share prices and intrinsic values."""
    n = model.n_steps
    lat = EsoLattice.allocate(n)

    powers = np.arange(n + 1, dtype=FloatDType)
    u_pow = np.power(model.u, powers)
    d_pow = np.power(model.d, powers)

    for i in range(n, -1, -1):
        row = lat.row(i)
        # price at (i, j) = S0 * u**j * d**(i-j)
        lat.share_price[row] = model.S0 * u_pow[: i + 1] * d_pow[i::-1]
        lat.intrinsic_value[row] = np.fmax(lat.share_price[row] - strike, 0.0)

    return lat


# ----------------------------
# Backward induction
# ----------------------------


def _backward_induction(
    lat: EsoLattice, model: EsoLatticeModel, *, strike: float, multiple: float
) -> None:
    n = model.n_steps
    p = model.p_star
    disc = model.disc_step
    dt = model.dt
    px, qx, px_pre = model.px, model.qx, model.px_pre
    trigger = strike * multiple

    V = lat.option_value
    num = lat.duration_numerator
    den = lat.duration_denominator
    iv = lat.intrinsic_value

    last = lat.row(n)
    V[last] = iv[last]
    den[last] = iv[last]
    num[last] = iv[last] * model.T

    for i in range(n - 1, -1, -1):
        row, up, dn = lat.row(i), lat.up_children(i), lat.down_children(i)

        cont = (p * V[up] + (1.0 - p) * V[dn]) / disc
        num_next = p * num[up] + (1.0 - p) * num[dn]
        den_next = p * den[up] + (1.0 - p) * den[dn]

        if i >= model.vest_step:
            iv_i = iv[row]
            exercise = (iv_i > cont) | (lat.share_price[row] >= trigger)

            V[row] = np.where(exercise, iv_i, px * cont + qx * iv_i)
            den[row] = np.where(exercise, iv_i, px * den_next + (1.0 - px) * iv_i)
            num[row] = np.where(
                exercise, iv_i * i * dt, px * num_next + (1.0 - px) * iv_i * i * dt
            )
        else:
            # Unvested: no exercise, exit forfeits everything. The duration
            # terms carry no survival weighting here.
            V[row] = px_pre * cont
            den[row] = den_next
            num[row] = num_next


@overload
def price_eso_tree(
    model: EsoLatticeModel,
    *,
    strike: float,
    multiple: float,
    return_lattice: Literal[False] = False,
) -> EsoValuation: ...


@overload
def price_eso_tree(
    model: EsoLatticeModel,
    *,
    strike: float,
    multiple: float,
    return_lattice: Literal[True],
) -> EsoLattice: ...


def price_eso_tree(
    model: EsoLatticeModel,
    *,
    strike: float,
    multiple: float,
    return_lattice: bool = False,
) -> EsoValuation | EsoLattice:
    """
    Employee stock option value and expected life by backward induction.

    Value and Macaulay-duration accumulators are propagated in one pass so
    they share the same exercise and exit decisions at every node.
    """
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        lat = build_lattice(model, strike)
        _backward_induction(lat, model, strike=strike, multiple=multiple)

    if return_lattice:
        return lat
    return EsoValuation(lat.value, lat.expected_life)


# ----------------------------
# Entry points
# ----------------------------


def _as_step_count(steps: int) -> int:
    try:
        n = operator.index(steps)
    except TypeError:
        raise InvalidStepCountError("steps", steps) from None
    if n < 0:
        raise InvalidStepCountError("steps", n)
    return n


def binomial_option_value(
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
    *,
    config: LatticeConfig | None = None,
) -> list[float]:
    """Value an employee stock option on a binomial lattice.

    This is the permissive entry point: inputs are not validated, and
    out-of-domain values come back as NaN or meaningless numbers rather than
    errors. Use :meth:`OptionParameters.new` first for fail-fast checking.

    Parameters
    ----------
    share_price : float
        Share price at the valuation date.
    strike_price : float
        Exercise price. Exactly zero is replaced by ``config.zero_strike_eps``.
    time_to_maturity : float
        Years until the option expires.
    vesting_period : float
        Years until the option vests; clamped to ``time_to_maturity``.
    risk_free : float
        Continuously-compounded risk-free rate.
    sigma : float
        Share volatility.
    div_rate : float
        Continuous dividend yield.
    exit_pre_vesting, exit_post_vesting : float
        Annual probability that the holder leaves before / after vesting.
    multiple : float
        Vested options are exercised once the share price reaches
        ``multiple * strike_price``.
    steps : int
        Number of lattice time steps.
    config : LatticeConfig, optional
        Numerical tolerances; defaults to ``DEFAULT_LATTICE_CONFIG``.

    Returns
    -------
    list[float]
        ``[fair value, expected life in years]``.

    Raises
    ------
    InvalidStepCountError
        If ``steps`` is negative or not an integer. Zero steps values the
        root as a terminal node.
    """
    cfg = config or DEFAULT_LATTICE_CONFIG
    strike = cfg.zero_strike_eps if strike_price == 0.0 else strike_price
    vesting = float(np.fmin(vesting_period, time_to_maturity))

    if time_to_maturity == 0.0:
        logger.debug("Zero maturity: returning intrinsic value")
        return [float(np.fmax(share_price - strike, 0.0)), 0.0]

    if abs(vesting - time_to_maturity) < cfg.vesting_tol:
        logger.debug("Vesting equals maturity: using closed-form European value")
        value = black_scholes_call_option_value(
            share_price,
            strike,
            time_to_maturity,
            risk_free,
            div_rate,
            sigma,
            config=cfg,
        )
        return [value, time_to_maturity]

    n_steps = _as_step_count(steps)
    if n_steps == 0:
        # The lattice is the root alone, and the root is terminal.
        logger.debug("Zero steps: valuing the root as a terminal node")
        iv = float(np.fmax(share_price - strike, 0.0))
        if iv == 0.0:
            return [iv, 0.0]
        return [iv, iv * time_to_maturity / iv]

    model = EsoLatticeModel.from_crr(
        S0=share_price,
        r=risk_free,
        q=div_rate,
        sigma=sigma,
        T=time_to_maturity,
        vesting_period=vesting,
        exit_pre_vesting=exit_pre_vesting,
        exit_post_vesting=exit_post_vesting,
        n_steps=n_steps,
        config=cfg,
    )
    logger.debug(
        "Lattice: n_steps=%d dt=%.6g u=%.6g p=%.6g vest_step=%d",
        model.n_steps,
        model.dt,
        model.u,
        model.p_star,
        model.vest_step,
    )

    res = price_eso_tree(model, strike=strike, multiple=multiple)
    return [res.value, res.expected_life]


def eso_price(p: OptionParameters, *, config: LatticeConfig | None = None) -> EsoValuation:
    """Lattice valuation of an already-validated parameter bundle."""
    value, life = binomial_option_value(*p.raw(), config=config)
    return EsoValuation(value, life)
