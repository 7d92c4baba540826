# src/hostyield/analysis/sensitivity.py

from __future__ import annotations

import numpy as np
import pandas as pd

from hostyield.analysis.debt import debt_service
from hostyield.analysis.startup import estimate_startup_costs
from hostyield.domain.results import EffectiveParameters


def _linear_terms(params: EffectiveParameters) -> tuple[float, float]:
    """
    Monthly cash flow is linear in occupancy: cf(occ) = slope * occ - fixed.

    slope = net revenue per unit of occupancy minus cleaning per unit of occupancy
    fixed = utilities + rent or mortgage
    """
    fee_pct = (
        params.management_fee_pct
        + params.platform_fee_pct
        + params.maintenance_reserve_pct
    )
    revenue_per_occ = params.nightly_rate * 365.0 / 12.0
    cleaning_per_occ = params.days_per_month * params.cleaning_rate
    slope = revenue_per_occ * (1.0 - fee_pct) - cleaning_per_occ

    installment = debt_service(params).installment
    fixed_occupancy = installment if params.strategy == "buy" else params.monthly_rent
    fixed = (
        fixed_occupancy
        + params.internet_cost
        + params.electricity_cost
        + params.water_cost
        + params.entertainment_cost
    )
    return slope, fixed


def breakeven_occupancy(params: EffectiveParameters) -> float | None:
    """
    Occupancy at which monthly cash flow is exactly zero.

    None when even a fully booked month cannot cover the fixed costs.
    """
    slope, fixed = _linear_terms(params)
    if fixed <= 0:
        return 0.0
    if slope <= 0:
        return None
    occ = fixed / slope
    if occ > 1.0:
        return None
    return occ


def occupancy_sensitivity(
    params: EffectiveParameters,
    occupancies: np.ndarray | list[float] | None = None,
) -> pd.DataFrame:
    """
    Vectorized sweep of monthly economics across occupancy levels.

    Columns: occupancy, monthly_revenue, monthly_expenses, monthly_cash_flow,
    cash_on_cash_return (percent, NaN when nothing is invested).
    """
    if occupancies is None:
        occupancies = np.linspace(0.30, 0.90, 13)
    occ = np.clip(np.asarray(occupancies, dtype=float), 0.0, 1.0)

    slope, fixed = _linear_terms(params)

    revenue = params.nightly_rate * 365.0 * occ / 12.0
    cash_flow = slope * occ - fixed
    expenses = revenue - cash_flow

    invested = estimate_startup_costs(params).total
    if invested > 0:
        coc = cash_flow * 12.0 / invested * 100.0
    else:
        coc = np.full_like(occ, np.nan)

    return pd.DataFrame(
        {
            "occupancy": occ,
            "monthly_revenue": revenue,
            "monthly_expenses": expenses,
            "monthly_cash_flow": cash_flow,
            "cash_on_cash_return": coc,
        }
    )
