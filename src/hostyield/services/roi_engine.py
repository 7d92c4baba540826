# src/hostyield/services/roi_engine.py
from __future__ import annotations

from hostyield.adapters.logging_utils import get_logger
from hostyield.analysis.cashflow import simulate_cash_flow
from hostyield.analysis.debt import debt_service
from hostyield.analysis.opex import gross_monthly_revenue, monthly_operating_expenses
from hostyield.analysis.resolver import resolve_parameters
from hostyield.analysis.startup import estimate_startup_costs
from hostyield.analysis.yields import compute_yield_metrics
from hostyield.domain.assumptions import EngineConstants
from hostyield.domain.inputs import StrategyInputs
from hostyield.domain.market import RegionMarketProfile
from hostyield.domain.ports import MarketBaselineProvider
from hostyield.domain.results import (
    CalculationResult,
    ExpenseCategory,
    MonthlyOpexBreakdown,
)

logger = get_logger(__name__)


def _expense_breakdown(opex: MonthlyOpexBreakdown, strategy: str) -> list[ExpenseCategory]:
    rows = [
        ("Mortgage" if strategy == "buy" else "Rent", opex.fixed_occupancy_cost),
        ("Cleaning", opex.cleaning),
        ("Management", opex.management),
        ("Platform Fees", opex.platform),
        ("Electricity", opex.electricity),
        ("Water", opex.water),
        ("Internet / WiFi", opex.internet),
        ("Entertainment", opex.entertainment),
        ("Maintenance", opex.maintenance),
    ]
    return [ExpenseCategory(label=label, annual_amount=m * 12.0) for label, m in rows if m > 0]


def calculate_roi(
    inputs: StrategyInputs,
    profile: RegionMarketProfile | None,
    constants: EngineConstants | None = None,
) -> CalculationResult:
    """
    Full ROI pipeline for one strategy in one region.

    Pure: same inputs, profile and constants always give the same result.
    Raises UnknownRegion when the profile does not match inputs.region_id.
    """
    constants = constants or EngineConstants()

    # --- resolve ---
    params = resolve_parameters(inputs, profile, constants)

    # --- startup capital ---
    startup = estimate_startup_costs(params)

    # --- financing ---
    debt = debt_service(params)

    # --- revenue / opex ---
    monthly_revenue = gross_monthly_revenue(params.nightly_rate, params.occupancy)
    opex = monthly_operating_expenses(params, monthly_revenue, debt.installment)
    monthly_cash_flow = monthly_revenue - opex.total

    # --- projection ---
    projection = simulate_cash_flow(
        strategy=params.strategy,
        initial_investment=startup.total,
        monthly_cash_flow=monthly_cash_flow,
        mortgage_installment=debt.installment,
        loan_term_months=debt.term_months,
        min_display_months=constants.min_display_months,
        display_tail_months=constants.display_tail_months,
        max_horizon_months=constants.max_horizon_months,
    )

    # --- yields ---
    metrics = compute_yield_metrics(
        strategy=params.strategy,
        monthly_revenue=monthly_revenue,
        monthly_expenses=opex.total,
        mortgage_installment=debt.installment,
        initial_investment=startup.total,
        purchase_price=params.purchase_price,
        payback_month=projection.payback_month,
    )

    logger.debug(
        "roi calculated",
        extra={
            "context": {
                "region_id": params.region_id,
                "unit_type": params.unit_type,
                "strategy": params.strategy,
                "initial_investment": startup.total,
                "monthly_cash_flow": monthly_cash_flow,
                "payback_month": projection.payback_month,
            }
        },
    )

    return CalculationResult(
        parameters=params,
        startup_costs=startup,
        monthly_opex=opex,
        initial_investment=startup.total,
        monthly_revenue=monthly_revenue,
        annual_revenue=metrics.annual_revenue,
        monthly_cash_flow=monthly_cash_flow,
        annual_expenses=metrics.annual_expenses,
        net_operating_income=metrics.net_operating_income,
        cash_on_cash_return=metrics.cash_on_cash_return,
        cap_rate=metrics.cap_rate,
        payback_month=metrics.payback_month,
        loan_payoff_month=projection.loan_payoff_month,
        horizon_months=projection.horizon_months,
        simulated_months=projection.simulated_months,
        monthly_breakdown=projection.points,
        expense_breakdown=_expense_breakdown(opex, params.strategy),
    )


def calculate_for_region(
    inputs: StrategyInputs,
    provider: MarketBaselineProvider,
    constants: EngineConstants | None = None,
) -> CalculationResult:
    """Look the region up first; an unknown id surfaces as UnknownRegion."""
    return calculate_roi(inputs, provider.get(inputs.region_id), constants)
