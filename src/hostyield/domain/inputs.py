# src/hostyield/domain/inputs.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hostyield.domain.market import FurnishingTier, Strategy, UnitType


class Overrides(BaseModel):
    """
    Optional user overrides.

    None means "not set, use the market baseline or engine default".
    An explicit 0 is honored as a real value (e.g. 0% down payment).
    Percentages are fractions: 0.20 means 20%.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    occupancy: float | None = Field(default=None, ge=0.0, le=1.0)
    nightly_rate: float | None = Field(default=None, ge=0.0)
    monthly_rent: float | None = Field(default=None, ge=0.0)
    purchase_price: float | None = Field(default=None, ge=0.0)
    furnishing_cost: float | None = Field(default=None, ge=0.0)

    # per occupied day
    cleaning_rate: float | None = Field(default=None, ge=0.0)
    internet_cost: float | None = Field(default=None, ge=0.0)
    electricity_cost: float | None = Field(default=None, ge=0.0)
    water_cost: float | None = Field(default=None, ge=0.0)
    entertainment_cost: float | None = Field(default=None, ge=0.0)

    management_fee_pct: float | None = Field(default=None, ge=0.0, le=1.0)
    maintenance_reserve_pct: float | None = Field(default=None, ge=0.0, le=1.0)

    # buy
    down_payment_pct: float | None = Field(default=None, ge=0.0, le=1.0)
    interest_rate_annual: float | None = Field(default=None, ge=0.0, le=1.0)
    loan_term_years: int | None = Field(default=None, ge=1, le=50)

    # sublease
    deposit_months: float | None = Field(default=None, ge=0.0)


class StrategyInputs(BaseModel):
    model_config = ConfigDict(frozen=True)

    region_id: str
    unit_type: UnitType
    strategy: Strategy
    furnishing_tier: FurnishingTier = "mid"
    overrides: Overrides = Field(default_factory=Overrides)
