"""Pure model math: closed-form Black-Scholes and lattice parameters."""
