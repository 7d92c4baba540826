# src/hostyield/analysis/startup.py
from hostyield.domain.results import EffectiveParameters, StartupCostBreakdown


def estimate_startup_costs(params: EffectiveParameters) -> StartupCostBreakdown:
    """
    One-time capital needed before the first guest checks in.

    buy:      down payment + closing estimate
    sublease: deposit months + advance rent months + admin fee
    Both add furnishing, utility deposit and fixtures. Total is the plain sum.
    """
    if params.strategy == "buy":
        deposit = params.purchase_price * params.down_payment_pct
        advance_rent = 0.0
    else:
        deposit = params.monthly_rent * params.deposit_months
        advance_rent = params.monthly_rent * params.advance_rent_months

    acquisition = deposit + advance_rent

    total = (
        params.furnishing_cost
        + acquisition
        + params.legal_admin_fee
        + params.utility_deposit
        + params.fixtures_fee
    )

    return StartupCostBreakdown(
        furnishing=params.furnishing_cost,
        acquisition=acquisition,
        deposit=deposit,
        advance_rent=advance_rent,
        legal_admin=params.legal_admin_fee,
        utility_deposit=params.utility_deposit,
        fixtures=params.fixtures_fee,
        total=total,
    )
