from .convergence import convergence_table, eso_convergence_series, european_check_table
from .normal_cdf import normal_cdf_error_table
from .plots import plot_eso_convergence

__all__ = [
    "convergence_table",
    "eso_convergence_series",
    "european_check_table",
    "normal_cdf_error_table",
    "plot_eso_convergence",
]
