# src/hostyield/domain/market.py
from __future__ import annotations

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Closed enumerations used across the engine
UnitType = Literal["studio", "one_bedroom", "two_bedroom", "three_bedroom"]
Strategy = Literal["buy", "sublease"]
FurnishingTier = Literal["budget", "mid", "premium"]

UNIT_TYPES: tuple[str, ...] = get_args(UnitType)
STRATEGIES: tuple[str, ...] = get_args(Strategy)
FURNISHING_TIERS: tuple[str, ...] = get_args(FurnishingTier)

UNIT_TYPE_LABELS: dict[str, str] = {
    "studio": "Studio",
    "one_bedroom": "1 Bedroom",
    "two_bedroom": "2 Bedroom",
    "three_bedroom": "3 Bedroom",
}


class RegionMarketProfile(BaseModel):
    """
    Market baseline for one region.

    Reference data: supplied by a MarketBaselineProvider and never mutated
    by the engine.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    county: str
    demand_score: float = Field(..., ge=0.0, le=10.0)
    avg_occupancy: float = Field(..., ge=0.0, le=1.0)

    nightly_rate: dict[UnitType, float]
    monthly_rent: dict[UnitType, float]
    purchase_price: dict[UnitType, float]

    @field_validator("nightly_rate", "monthly_rent", "purchase_price")
    @classmethod
    def _covers_all_unit_types(cls, v: dict[str, float]) -> dict[str, float]:
        missing = [u for u in UNIT_TYPES if u not in v]
        if missing:
            raise ValueError(f"missing unit types: {', '.join(missing)}")
        if any(x < 0 for x in v.values()):
            raise ValueError("market values must be non-negative")
        return v
