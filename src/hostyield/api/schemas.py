# src/hostyield/api/schemas.py
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


# --------------------------------------------
# Calculate
# --------------------------------------------

class CalculateRequest(BaseModel):
    """
    Request for /calculate, /insight and /sensitivity.

    Kept loose on purpose: labels ("1 Bedroom"), percent strings ("20%")
    and flat override fields are normalized by services.validation.
    """
    model_config = ConfigDict(extra="allow")

    region_id: str
    unit_type: str
    strategy: str
    furnishing_tier: str = "mid"
    overrides: dict[str, Any] = Field(default_factory=dict)


class CalculateResponse(BaseModel):
    """Mirrors CalculationResult.to_dict(); permissive so new fields pass through."""
    model_config = ConfigDict(extra="allow")

    region_name: str
    initial_investment: float
    monthly_cash_flow: float
    payback_month: int | None = None
    cap_rate: float | None = None
    cash_on_cash_return: float | None = None


# --------------------------------------------
# Regions
# --------------------------------------------

class RegionItem(BaseModel):
    id: str
    name: str
    county: str
    demand_score: float
    avg_occupancy: float


# --------------------------------------------
# Insight / sensitivity
# --------------------------------------------

class InsightBulletItem(BaseModel):
    icon: Literal["trending-up", "wallet", "alert", "check", "lightbulb"]
    text: str


class InsightResponse(BaseModel):
    headline: str
    sentiment: Literal["positive", "neutral", "caution"]
    bullet_points: list[InsightBulletItem]


class SensitivityResponse(BaseModel):
    breakeven_occupancy: float | None = None
    rows: list[dict[str, float | None]]
