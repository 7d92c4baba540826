import pytest
from hypothesis import given, strategies as st

from hostyield.analysis.resolver import resolve_parameters
from hostyield.analysis.startup import estimate_startup_costs
from hostyield.adapters.market_static import StaticMarketProvider
from hostyield.domain.assumptions import EngineConstants
from hostyield.domain.inputs import Overrides, StrategyInputs

_westlands = StaticMarketProvider().get("nbo-westlands")
_constants = EngineConstants()


def test_sublease_startup_costs(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(strategy="sublease"), westlands, constants)

    s = estimate_startup_costs(params)

    assert s.deposit == 150_000.0       # 2 months
    assert s.advance_rent == 75_000.0   # 1 month
    assert s.acquisition == 225_000.0
    assert s.furnishing == 400_000.0
    assert s.legal_admin == 5_000.0
    assert s.utility_deposit == 7_500.0
    assert s.fixtures == 20_000.0
    assert s.total == 657_500.0


def test_buy_startup_costs_default_down_payment(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(strategy="buy"), westlands, constants)

    s = estimate_startup_costs(params)

    assert s.acquisition == pytest.approx(1_900_000.0)
    assert s.advance_rent == 0.0
    assert s.legal_admin == 150_000.0


def test_buy_zero_down_payment(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(strategy="buy", down_payment_pct=0.0), westlands, constants)

    s = estimate_startup_costs(params)

    assert s.acquisition == 0.0
    assert s.total == 400_000.0 + 150_000.0 + 7_500.0 + 20_000.0


def test_deposit_months_override(make_inputs, westlands, constants):
    params = resolve_parameters(make_inputs(deposit_months=3.0), westlands, constants)
    assert estimate_startup_costs(params).deposit == 225_000.0


@given(
    strategy=st.sampled_from(["buy", "sublease"]),
    unit=st.sampled_from(["studio", "one_bedroom", "two_bedroom", "three_bedroom"]),
    tier=st.sampled_from(["budget", "mid", "premium"]),
    rent=st.one_of(st.none(), st.floats(min_value=0.0, max_value=1e6)),
    price=st.one_of(st.none(), st.floats(min_value=0.0, max_value=1e8)),
    down=st.one_of(st.none(), st.floats(min_value=0.0, max_value=1.0)),
    furnishing=st.one_of(st.none(), st.floats(min_value=0.0, max_value=5e6)),
)
def test_total_is_exact_sum_of_components(strategy, unit, tier, rent, price, down, furnishing):
    inputs = StrategyInputs(
        region_id="nbo-westlands",
        unit_type=unit,
        strategy=strategy,
        furnishing_tier=tier,
        overrides=Overrides(
            monthly_rent=rent,
            purchase_price=price,
            down_payment_pct=down,
            furnishing_cost=furnishing,
        ),
    )
    s = estimate_startup_costs(resolve_parameters(inputs, _westlands, _constants))

    assert s.total == s.furnishing + s.acquisition + s.legal_admin + s.utility_deposit + s.fixtures
