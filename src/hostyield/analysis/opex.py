# src/hostyield/analysis/opex.py
from hostyield.domain.results import EffectiveParameters, MonthlyOpexBreakdown


def gross_monthly_revenue(nightly_rate: float, occupancy: float) -> float:
    return nightly_rate * 365.0 * occupancy / 12.0


def monthly_operating_expenses(
    params: EffectiveParameters,
    monthly_revenue: float,
    mortgage_installment: float,
) -> MonthlyOpexBreakdown:
    """
    Recurring monthly costs.

    Cleaning scales with occupied days. Management, platform and maintenance
    are fractions of GROSS revenue, never of a net figure.
    Rent and mortgage are mutually exclusive: only one applies per strategy.
    """
    days_occupied = params.days_per_month * params.occupancy
    cleaning = days_occupied * params.cleaning_rate

    if params.strategy == "buy":
        rent, mortgage = 0.0, mortgage_installment
    else:
        rent, mortgage = params.monthly_rent, 0.0

    return MonthlyOpexBreakdown(
        rent=rent,
        mortgage=mortgage,
        cleaning=cleaning,
        internet=params.internet_cost,
        electricity=params.electricity_cost,
        water=params.water_cost,
        entertainment=params.entertainment_cost,
        management=monthly_revenue * params.management_fee_pct,
        platform=monthly_revenue * params.platform_fee_pct,
        maintenance=monthly_revenue * params.maintenance_reserve_pct,
    )
