import numpy as np
import pytest

from hostyield.analysis.resolver import resolve_parameters
from hostyield.analysis.sensitivity import breakeven_occupancy, occupancy_sensitivity
from hostyield.services.roi_engine import calculate_roi


def test_sweep_matches_engine_at_each_occupancy(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(), westlands, constants)

    df = occupancy_sensitivity(params, [0.4, 0.68, 0.9])

    assert list(df.columns) == [
        "occupancy",
        "monthly_revenue",
        "monthly_expenses",
        "monthly_cash_flow",
        "cash_on_cash_return",
    ]
    for occ, cf in zip(df["occupancy"], df["monthly_cash_flow"]):
        r = calculate_roi(make_inputs(occupancy=float(occ)), westlands, constants)
        assert cf == pytest.approx(r.monthly_cash_flow)


def test_cash_flow_increases_with_occupancy(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(), westlands, constants)
    df = occupancy_sensitivity(params)
    assert len(df) == 13
    assert np.all(np.diff(df["monthly_cash_flow"].to_numpy()) > 0)


def test_breakeven_occupancy_gives_zero_cash_flow(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(), westlands, constants)

    occ = breakeven_occupancy(params)

    assert occ is not None and 0 < occ < 0.68
    r = calculate_roi(make_inputs(occupancy=occ), westlands, constants)
    assert r.monthly_cash_flow == pytest.approx(0.0, abs=1e-6)


def test_breakeven_unreachable_returns_none(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(monthly_rent=500_000.0), westlands, constants)
    assert breakeven_occupancy(params) is None
