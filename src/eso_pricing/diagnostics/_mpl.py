"""Matplotlib helpers shared by the diagnostics plots."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd
    from matplotlib.axes import Axes


def get_plt():
    """Import and return matplotlib.pyplot with a helpful error if missing."""
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "Plotting requires matplotlib. Install it with: pip install matplotlib"
        ) from e
    return plt


def style_ax(ax: Axes, *, xlabel: str, ylabel: str, title: str) -> None:
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(axis="both", alpha=0.25)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    if ax.get_legend_handles_labels()[0]:
        ax.legend(framealpha=0.95)


def require_columns(df: pd.DataFrame, cols: Iterable[str]) -> None:
    """Raise ValueError if DataFrame is missing any required columns."""
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}")
