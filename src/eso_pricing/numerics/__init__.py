"""
Numerical building blocks.

Top-level package `eso_pricing` exposes the everyday pricing API.
This subpackage exposes reusable numerical primitives.
"""

from .normal import normal_cdf

__all__ = ["normal_cdf"]
