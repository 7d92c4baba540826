# src/hostyield/analysis/yields.py
from __future__ import annotations

from dataclasses import dataclass

from hostyield.domain.market import Strategy


@dataclass(frozen=True)
class YieldMetrics:
    annual_revenue: float
    annual_expenses: float
    net_operating_income: float
    annual_cash_flow: float
    cash_on_cash_return: float | None  # percent
    cap_rate: float | None             # percent, buy only
    payback_month: int | None


def compute_yield_metrics(
    *,
    strategy: Strategy,
    monthly_revenue: float,
    monthly_expenses: float,
    mortgage_installment: float,
    initial_investment: float,
    purchase_price: float,
    payback_month: int | None,
) -> YieldMetrics:
    """
    Summary ratios investors look at first.

    `monthly_expenses` already includes rent or mortgage, so NOI here is the
    cash the investor actually keeps. Cap rate adds debt service back to get
    the unleveraged NOI, and only exists for `buy`.

    Ratios with a zero denominator come back as None rather than 0, since
    0% is a real answer.
    """
    annual_revenue = monthly_revenue * 12.0
    annual_expenses = monthly_expenses * 12.0
    noi = annual_revenue - annual_expenses

    # First-year cash flow; the mortgage is still running in year one.
    annual_cash_flow = noi

    coc: float | None = None
    if initial_investment > 0:
        coc = annual_cash_flow / initial_investment * 100.0

    cap_rate: float | None = None
    if strategy == "buy" and purchase_price > 0:
        noi_pre_debt = noi + mortgage_installment * 12.0
        cap_rate = noi_pre_debt / purchase_price * 100.0

    return YieldMetrics(
        annual_revenue=annual_revenue,
        annual_expenses=annual_expenses,
        net_operating_income=noi,
        annual_cash_flow=annual_cash_flow,
        cash_on_cash_return=coc,
        cap_rate=cap_rate,
        payback_month=payback_month,
    )
