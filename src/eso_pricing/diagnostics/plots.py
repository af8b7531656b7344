from __future__ import annotations

from collections.abc import Sequence

from ..config import LatticeConfig
from ..types import OptionParameters
from ._mpl import get_plt, require_columns, style_ax
from .convergence import convergence_table


def plot_eso_convergence(
    p: OptionParameters,
    n_steps: int | Sequence[int],
    *,
    config: LatticeConfig | None = None,
    figsize=(12, 5),
):
    """Plot lattice value and expected life against the number of steps."""
    df = convergence_table(p, n_steps, config=config)
    require_columns(df, ["N", "value", "expected_life", "bs"])

    plt = get_plt()
    fig, (ax_value, ax_life) = plt.subplots(
        1, 2, figsize=figsize, constrained_layout=True
    )

    ax_value.plot(df["N"], df["value"], marker="o", ms=3, label="Lattice")
    ax_value.axhline(float(df["bs"].iloc[0]), ls="--", label="European (BS)")
    style_ax(ax_value, xlabel="Number of steps N", ylabel="Value", title="Fair value")

    ax_life.plot(df["N"], df["expected_life"], marker="o", ms=3, label="Lattice")
    ax_life.axhline(p.T, ls=":", color="grey", label="Maturity")
    style_ax(
        ax_life,
        xlabel="Number of steps N",
        ylabel="Years",
        title="Expected life",
    )

    return fig, (ax_value, ax_life), df
