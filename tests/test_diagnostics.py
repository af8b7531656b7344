import numpy as np
import pytest

from eso_pricing.diagnostics import (
    convergence_table,
    eso_convergence_series,
    european_check_table,
    normal_cdf_error_table,
)
from eso_pricing.pricers.black_scholes import bs_price
from eso_pricing.pricers.lattice import eso_price


def test_convergence_series_shapes(make_params):
    p = make_params()
    data = eso_convergence_series(p, [100, 25, 50, 50])

    np.testing.assert_array_equal(data["n_steps"], [25, 50, 100])
    assert data["value"].shape == (3,)
    assert np.isnan(data["abs_change"][0])
    assert data["bs"][0] == pytest.approx(bs_price(p))
    assert data["value"][-1] == eso_price(p).value


def test_convergence_series_int_means_max_steps(make_params):
    data = eso_convergence_series(make_params(), 5)
    np.testing.assert_array_equal(data["n_steps"], [1, 2, 3, 4, 5])


@pytest.mark.parametrize("bad", [0, [], [10, -1]])
def test_convergence_series_rejects_bad_grids(make_params, bad):
    with pytest.raises(ValueError):
        eso_convergence_series(make_params(), bad)


def test_convergence_table_columns(make_params):
    df = convergence_table(make_params(), [20, 40])
    assert list(df.columns) == ["N", "value", "expected_life", "abs_change", "bs", "value/bs"]
    assert (df["expected_life"] <= 5.0).all()
    # vesting, exits and the trigger all take value away from the European benchmark
    assert (df["value/bs"] < 1.0).all()


def test_european_check_table_agrees_exactly(make_params):
    cases = [("atm", make_params()), ("itm", make_params(strike_price=80.0))]
    df = european_check_table(cases)
    assert (df["abs_diff"] == 0.0).all()
    assert (df["expected_life"] == df["T"]).all()


def test_normal_cdf_error_table():
    df = normal_cdf_error_table()
    assert len(df) == 25
    assert df["abs_error"].max() < 1.5e-7


def test_plot_eso_convergence_smoke(make_params):
    mpl = pytest.importorskip("matplotlib")
    mpl.use("Agg")
    from eso_pricing.diagnostics import plot_eso_convergence

    fig, (ax_value, ax_life), df = plot_eso_convergence(make_params(), [10, 20, 40])
    assert len(df) == 3
    assert ax_value.get_title() == "Fair value"
    assert ax_life.get_title() == "Expected life"
    mpl.pyplot.close(fig)
