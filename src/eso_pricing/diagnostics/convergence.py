"""Step-count convergence of the lattice value and expected life."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

import numpy as np
import pandas as pd

from ..config import LatticeConfig
from ..pricers.black_scholes import bs_price
from ..pricers.lattice import eso_price
from ..types import OptionParameters, PositiveInt

logger = logging.getLogger(__name__)


def _step_grid(n_steps: int | Sequence[int]) -> np.ndarray:
    # An int means "max steps": every N up to 500, otherwise ~80 geometric points.
    if isinstance(n_steps, (int, np.integer)):
        max_n = int(n_steps)
        if max_n <= 0:
            raise ValueError("n_steps must be a positive integer")
        if max_n <= 500:
            return np.arange(1, max_n + 1, dtype=int)
        grid = np.unique(np.round(np.geomspace(1, max_n, num=80)).astype(int))
        if grid[-1] != max_n:
            grid = np.append(grid, max_n)
        return grid

    grid = np.asarray(list(n_steps), dtype=int)
    if grid.size == 0:
        raise ValueError("n_steps must be non-empty")
    if np.any(grid <= 0):
        raise ValueError("n_steps must be positive integers")
    return np.unique(grid)


def eso_convergence_series(
    p: OptionParameters,
    n_steps: int | Sequence[int],
    *,
    config: LatticeConfig | None = None,
) -> dict[str, np.ndarray]:
    """Lattice value and expected life of ``p`` across step counts.

    The step count stored in ``p`` is ignored; each N in the grid replaces it.

    Returns
    -------
    dict
        ``n_steps``, ``value``, ``expected_life``, ``bs`` (one-element array
        with the European benchmark) and ``abs_change`` (|V_N - V_prev|, NaN
        for the first N).
    """
    grid = _step_grid(n_steps)
    logger.debug("Convergence sweep over %d step counts (max N=%d)", grid.size, grid[-1])

    values = np.empty(grid.size, dtype=float)
    lives = np.empty(grid.size, dtype=float)
    for k, n in enumerate(grid):
        res = eso_price(replace(p, steps=PositiveInt(int(n))), config=config)
        values[k] = res.value
        lives[k] = res.expected_life

    abs_change = np.full(grid.size, np.nan)
    abs_change[1:] = np.abs(np.diff(values))

    return {
        "n_steps": grid,
        "value": values,
        "expected_life": lives,
        "bs": np.asarray([bs_price(p, config=config)], dtype=float),
        "abs_change": abs_change,
    }


def convergence_table(
    p: OptionParameters,
    n_steps: int | Sequence[int],
    *,
    config: LatticeConfig | None = None,
) -> pd.DataFrame:
    """Tabular form of :func:`eso_convergence_series`, one row per N."""
    data = eso_convergence_series(p, n_steps, config=config)
    bs_val = float(data["bs"][0])
    return pd.DataFrame(
        {
            "N": data["n_steps"],
            "value": data["value"],
            "expected_life": data["expected_life"],
            "abs_change": data["abs_change"],
            "bs": bs_val,
            "value/bs": data["value"] / bs_val if bs_val != 0.0 else np.nan,
        }
    )


def european_check_table(
    cases: Sequence[tuple[str, OptionParameters]],
    *,
    config: LatticeConfig | None = None,
) -> pd.DataFrame:
    """Compare lattice and closed form with vesting forced to maturity.

    Both columns should agree exactly, and expected life should equal maturity.
    """
    rows = []
    for name, p in cases:
        euro = replace(p, vesting_period=p.time_to_maturity)
        res = eso_price(euro, config=config)
        bs_val = bs_price(euro, config=config)
        rows.append(
            {
                "case": name,
                "T": euro.T,
                "lattice": res.value,
                "bs": bs_val,
                "abs_diff": abs(res.value - bs_val),
                "expected_life": res.expected_life,
            }
        )
    return pd.DataFrame(rows)
