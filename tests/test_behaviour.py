
from eso_pricing.config import LatticeConfig
from eso_pricing.pricers.behaviour import option_value_non_optimal, option_value_optimal
from eso_pricing.pricers.lattice import binomial_option_value

ARGS = (100.0, 100.0, 5.0, 2.0, 0.05, 0.3, 0.02, 0.1, 0.05)


def test_optimal_uses_a_trigger_that_never_binds():
    assert option_value_optimal(*ARGS, 200.0) == binomial_option_value(*ARGS, 1e7, 200)


def test_optimal_is_worth_at_least_non_optimal():
    opt = option_value_optimal(*ARGS, 200.0)
    non_opt = option_value_non_optimal(*ARGS, 2.0, 200.0)
    assert opt[0] >= non_opt[0]


def test_float_step_count_is_truncated():
    assert option_value_non_optimal(*ARGS, 2.0, 150.9) == binomial_option_value(
        *ARGS, 2.0, 150
    )


def test_optimal_respects_configured_multiple():
    cfg = LatticeConfig(optimal_multiple=1.5)
    assert option_value_optimal(*ARGS, 100.0, config=cfg) == binomial_option_value(
        *ARGS, 1.5, 100
    )
