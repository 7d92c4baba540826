# src/hostyield/analysis/cashflow.py
from __future__ import annotations

from dataclasses import dataclass

from hostyield.domain.market import Strategy
from hostyield.domain.results import MonthlyCashFlowPoint


@dataclass(frozen=True)
class CashFlowProjection:
    points: list[MonthlyCashFlowPoint]  # display window, months 1..horizon_months
    payback_month: int | None
    horizon_months: int
    simulated_months: int               # payback searched over this many months
    loan_payoff_month: int | None


def display_horizon(
    *,
    strategy: Strategy,
    payback_month: int | None,
    loan_term_months: int,
    min_months: int = 60,
    tail_months: int = 24,
    max_months: int = 360,
) -> int:
    horizon = min_months
    if payback_month is not None:
        horizon = max(horizon, payback_month + tail_months)
    if strategy == "buy" and loan_term_months > 0:
        horizon = max(horizon, loan_term_months + tail_months)
    return min(horizon, max_months)


def simulate_cash_flow(
    *,
    strategy: Strategy,
    initial_investment: float,
    monthly_cash_flow: float,
    mortgage_installment: float = 0.0,
    loan_term_months: int = 0,
    min_display_months: int = 60,
    display_tail_months: int = 24,
    max_horizon_months: int = 360,
) -> CashFlowProjection:
    """
    Walk month 1..max_horizon_months once.

    `monthly_cash_flow` already has the mortgage (buy) or rent (sublease)
    taken out. After the loan term the installment stops, so each later
    month nets exactly `mortgage_installment` more.

    The whole horizon is simulated so payback and loan payoff are found even
    when the returned window is shorter.
    """
    is_buy = strategy == "buy" and mortgage_installment > 0 and loan_term_months > 0

    cumulative = -initial_investment
    payback: int | None = 0 if initial_investment <= 0 else None
    payoff: int | None = None
    points: list[MonthlyCashFlowPoint] = []

    for month in range(1, max_horizon_months + 1):
        net = monthly_cash_flow
        if is_buy and month > loan_term_months:
            net += mortgage_installment
            if payoff is None:
                payoff = month

        cumulative += net
        points.append(MonthlyCashFlowPoint(month=month, cumulative=cumulative))

        if payback is None and cumulative >= 0:
            payback = month

    horizon = display_horizon(
        strategy=strategy,
        payback_month=payback,
        loan_term_months=loan_term_months if is_buy else 0,
        min_months=min_display_months,
        tail_months=display_tail_months,
        max_months=max_horizon_months,
    )

    return CashFlowProjection(
        points=points[:horizon],
        payback_month=payback,
        horizon_months=horizon,
        simulated_months=max_horizon_months,
        loan_payoff_month=payoff,
    )
