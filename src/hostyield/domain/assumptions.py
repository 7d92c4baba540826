# src/hostyield/domain/assumptions.py
from pydantic import BaseModel, ConfigDict, Field

from hostyield.domain.market import FurnishingTier, UnitType


class EngineConstants(BaseModel):
    """
    Default cost assumptions injected into the engine at call time.

    Monetary values are in the market currency (KES for the bundled regions).
    Percentages are fractions.
    """
    model_config = ConfigDict(frozen=True)

    # Furnishing
    furnishing_base: dict[UnitType, float] = Field(default_factory=lambda: {
        "studio": 250_000.0,
        "one_bedroom": 400_000.0,
        "two_bedroom": 650_000.0,
        "three_bedroom": 900_000.0,
    })
    furnishing_multipliers: dict[FurnishingTier, float] = Field(default_factory=lambda: {
        "budget": 0.7,
        "mid": 1.0,
        "premium": 1.6,
    })

    # Operating
    cleaning_per_day: dict[UnitType, float] = Field(default_factory=lambda: {
        "studio": 250.0,
        "one_bedroom": 750.0,
        "two_bedroom": 750.0,
        "three_bedroom": 500.0,
    })
    internet_monthly: float = 3_000.0
    electricity_monthly: dict[UnitType, float] = Field(default_factory=lambda: {
        "studio": 2_500.0,
        "one_bedroom": 3_500.0,
        "two_bedroom": 5_000.0,
        "three_bedroom": 7_000.0,
    })
    water_monthly: dict[UnitType, float] = Field(default_factory=lambda: {
        "studio": 500.0,
        "one_bedroom": 1_000.0,
        "two_bedroom": 1_500.0,
        "three_bedroom": 2_000.0,
    })
    entertainment_monthly: float = 0.0
    days_per_month: float = 30.5

    management_fee_pct: float = 0.0  # self-managed
    platform_fee_pct: float = 0.03
    maintenance_reserve_pct: float = 0.0

    # Startup
    deposit_months: float = 2.0
    advance_rent_months: float = 1.0
    sublease_legal_admin_fee: float = 5_000.0
    buy_legal_admin_fee: float = 150_000.0  # closing cost estimate
    utility_deposit: float = 7_500.0
    fixtures_fee: float = 20_000.0

    # Financing
    down_payment_pct: float = 0.20
    mortgage_rate_annual: float = 0.145
    loan_term_years: int = 15

    # Projection window
    min_display_months: int = 60
    display_tail_months: int = 24
    max_horizon_months: int = 360
