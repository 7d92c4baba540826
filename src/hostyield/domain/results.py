# src/hostyield/domain/results.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from hostyield.domain.market import FurnishingTier, Strategy, UnitType


@dataclass(frozen=True)
class EffectiveParameters:
    """Every input with a concrete value after override/baseline/default resolution."""
    region_id: str
    unit_type: UnitType
    strategy: Strategy
    furnishing_tier: FurnishingTier

    occupancy: float
    nightly_rate: float
    monthly_rent: float
    purchase_price: float
    furnishing_cost: float

    cleaning_rate: float
    internet_cost: float
    electricity_cost: float
    water_cost: float
    entertainment_cost: float
    days_per_month: float

    management_fee_pct: float
    platform_fee_pct: float
    maintenance_reserve_pct: float

    down_payment_pct: float
    interest_rate_annual: float
    loan_term_years: int

    deposit_months: float
    advance_rent_months: float
    legal_admin_fee: float
    utility_deposit: float
    fixtures_fee: float


@dataclass(frozen=True)
class StartupCostBreakdown:
    furnishing: float
    acquisition: float     # down payment (buy) or deposit + advance rent (sublease)
    deposit: float         # down payment under buy
    advance_rent: float    # 0 under buy
    legal_admin: float
    utility_deposit: float
    fixtures: float
    total: float


@dataclass(frozen=True)
class MonthlyOpexBreakdown:
    rent: float
    mortgage: float
    cleaning: float
    internet: float
    electricity: float
    water: float
    entertainment: float
    management: float
    platform: float
    maintenance: float

    @property
    def fixed_occupancy_cost(self) -> float:
        return self.rent + self.mortgage

    @property
    def utilities(self) -> float:
        return self.internet + self.electricity + self.water + self.entertainment

    @property
    def total(self) -> float:
        return (
            self.fixed_occupancy_cost
            + self.cleaning
            + self.utilities
            + self.management
            + self.platform
            + self.maintenance
        )


@dataclass(frozen=True)
class MonthlyCashFlowPoint:
    month: int
    cumulative: float


@dataclass(frozen=True)
class ExpenseCategory:
    label: str
    annual_amount: float


@dataclass(frozen=True)
class CalculationResult:
    parameters: EffectiveParameters
    startup_costs: StartupCostBreakdown
    monthly_opex: MonthlyOpexBreakdown

    initial_investment: float
    monthly_revenue: float
    annual_revenue: float
    monthly_cash_flow: float      # after rent / mortgage
    annual_expenses: float
    net_operating_income: float

    cash_on_cash_return: float | None   # percent; None when nothing was invested
    cap_rate: float | None              # percent; buy only
    payback_month: int | None           # None = not recovered within the horizon
    loan_payoff_month: int | None
    horizon_months: int
    simulated_months: int               # payback searched over this many months

    monthly_breakdown: list[MonthlyCashFlowPoint] = field(default_factory=list)
    expense_breakdown: list[ExpenseCategory] = field(default_factory=list)

    @property
    def strategy(self) -> Strategy:
        return self.parameters.strategy

    def to_dict(self) -> dict[str, Any]:
        out = asdict(self)
        out["monthly_opex"]["total"] = self.monthly_opex.total
        return out
