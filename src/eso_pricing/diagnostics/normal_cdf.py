from __future__ import annotations

import numpy as np
import pandas as pd
from scipy.stats import norm

from ..numerics.normal import normal_cdf


def normal_cdf_error_table(x: np.ndarray | None = None) -> pd.DataFrame:
    """Rational approximation against ``scipy.stats.norm.cdf`` on a grid."""
    if x is None:
        x = np.linspace(-6.0, 6.0, 25)
    x = np.asarray(x, dtype=float)

    approx = normal_cdf(x)
    exact = norm.cdf(x)
    return pd.DataFrame(
        {
            "x": x,
            "approx": approx,
            "scipy": exact,
            "abs_error": np.abs(approx - exact),
        }
    )
