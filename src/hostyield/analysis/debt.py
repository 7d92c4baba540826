# src/hostyield/analysis/debt.py
from __future__ import annotations

from dataclasses import dataclass

from hostyield.domain.results import EffectiveParameters


@dataclass(frozen=True)
class DebtService:
    principal: float
    installment: float  # monthly
    term_months: int    # 0 when there is no loan


def monthly_installment(principal: float, annual_rate: float, years: int) -> float:
    """
    Standard fixed-rate amortization formula:
    M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    P = loan principal
    r = monthly interest rate
    n = number of payments (months)
    """
    if principal <= 0:
        return 0.0

    r = annual_rate / 12.0
    n = years * 12

    if r == 0:
        return principal / n

    growth = (1 + r) ** n
    return principal * (r * growth) / (growth - 1)


def mortgage_principal(params: EffectiveParameters) -> float:
    if params.strategy != "buy":
        return 0.0
    return params.purchase_price - params.purchase_price * params.down_payment_pct


def debt_service(params: EffectiveParameters) -> DebtService:
    principal = mortgage_principal(params)
    installment = monthly_installment(
        principal=principal,
        annual_rate=params.interest_rate_annual,
        years=params.loan_term_years,
    )
    term_months = params.loan_term_years * 12 if installment > 0 else 0
    return DebtService(principal=max(principal, 0.0), installment=installment, term_months=term_months)
