from .behaviour import option_value_non_optimal, option_value_optimal
from .black_scholes import bs_price
from .lattice import (
    EsoLattice,
    LatticeNode,
    binomial_option_value,
    build_lattice,
    eso_price,
    price_eso_tree,
)

__all__ = [
    "EsoLattice",
    "LatticeNode",
    "binomial_option_value",
    "bs_price",
    "build_lattice",
    "eso_price",
    "option_value_non_optimal",
    "option_value_optimal",
    "price_eso_tree",
]
