# src/hostyield/analysis/resolver.py
from __future__ import annotations

from typing import TypeVar

from hostyield.domain.assumptions import EngineConstants
from hostyield.domain.errors import UnknownRegion
from hostyield.domain.inputs import StrategyInputs
from hostyield.domain.market import RegionMarketProfile
from hostyield.domain.results import EffectiveParameters

T = TypeVar("T")


def _pick(override: T | None, default: T) -> T:
    # explicit None check: 0 is a legitimate override
    return default if override is None else override


def resolve_parameters(
    inputs: StrategyInputs,
    profile: RegionMarketProfile | None,
    constants: EngineConstants,
) -> EffectiveParameters:
    """
    Merge overrides with the region baseline and engine defaults.

    Order per field: override -> region baseline -> constant.
    """
    if profile is None or profile.id != inputs.region_id:
        raise UnknownRegion(inputs.region_id)

    o = inputs.overrides
    unit = inputs.unit_type
    is_buy = inputs.strategy == "buy"

    furnishing_default = (
        constants.furnishing_base[unit]
        * constants.furnishing_multipliers[inputs.furnishing_tier]
    )

    return EffectiveParameters(
        region_id=profile.id,
        unit_type=unit,
        strategy=inputs.strategy,
        furnishing_tier=inputs.furnishing_tier,

        occupancy=_pick(o.occupancy, profile.avg_occupancy),
        nightly_rate=_pick(o.nightly_rate, profile.nightly_rate[unit]),
        monthly_rent=_pick(o.monthly_rent, profile.monthly_rent[unit]),
        purchase_price=_pick(o.purchase_price, profile.purchase_price[unit]),
        furnishing_cost=_pick(o.furnishing_cost, furnishing_default),

        cleaning_rate=_pick(o.cleaning_rate, constants.cleaning_per_day[unit]),
        internet_cost=_pick(o.internet_cost, constants.internet_monthly),
        electricity_cost=_pick(o.electricity_cost, constants.electricity_monthly[unit]),
        water_cost=_pick(o.water_cost, constants.water_monthly[unit]),
        entertainment_cost=_pick(o.entertainment_cost, constants.entertainment_monthly),
        days_per_month=constants.days_per_month,

        management_fee_pct=_pick(o.management_fee_pct, constants.management_fee_pct),
        platform_fee_pct=constants.platform_fee_pct,
        maintenance_reserve_pct=_pick(o.maintenance_reserve_pct, constants.maintenance_reserve_pct),

        down_payment_pct=_pick(o.down_payment_pct, constants.down_payment_pct),
        interest_rate_annual=_pick(o.interest_rate_annual, constants.mortgage_rate_annual),
        loan_term_years=_pick(o.loan_term_years, constants.loan_term_years),

        deposit_months=_pick(o.deposit_months, constants.deposit_months),
        advance_rent_months=constants.advance_rent_months,
        legal_admin_fee=(
            constants.buy_legal_admin_fee if is_buy else constants.sublease_legal_admin_fee
        ),
        utility_deposit=constants.utility_deposit,
        fixtures_fee=constants.fixtures_fee,
    )
