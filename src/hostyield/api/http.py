# src/hostyield/api/http.py
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Literal

from fastapi import FastAPI, HTTPException, Query

from hostyield.adapters.config import config, constants_from_config
from hostyield.adapters.logging_utils import get_logger
from hostyield.adapters.market_static import StaticMarketProvider
from hostyield.analysis.resolver import resolve_parameters
from hostyield.analysis.sensitivity import breakeven_occupancy, occupancy_sensitivity
from hostyield.domain.errors import InvalidOverride, UnknownRegion
from hostyield.domain.inputs import StrategyInputs
from hostyield.domain.market import RegionMarketProfile
from hostyield.services.insights import generate_insight
from hostyield.services.roi_engine import calculate_roi
from hostyield.services.validation import prepare_inputs
from .schemas import (
    CalculateRequest,
    CalculateResponse,
    InsightResponse,
    RegionItem,
    SensitivityResponse,
)

logger = get_logger(__name__)

app = FastAPI(title="hostyield")

_provider = StaticMarketProvider()
_constants = constants_from_config(config)

ValidationMode = Literal["strict", "clamp"]


def _region_item(p: RegionMarketProfile) -> RegionItem:
    return RegionItem(
        id=p.id,
        name=p.name,
        county=p.county,
        demand_score=p.demand_score,
        avg_occupancy=p.avg_occupancy,
    )


def _prepare(payload: CalculateRequest, mode: ValidationMode) -> tuple[StrategyInputs, RegionMarketProfile]:
    """Validate the payload and look the region up, mapping engine errors to HTTP."""
    try:
        inputs = prepare_inputs(payload.model_dump(), mode=mode)
    except InvalidOverride as e:
        raise HTTPException(status_code=400, detail=e.errors) from e

    profile = _provider.get(inputs.region_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=str(UnknownRegion(inputs.region_id)))
    return inputs, profile


@app.get("/regions", response_model=list[RegionItem])
def list_regions() -> list[RegionItem]:
    return [_region_item(p) for p in _provider.list_regions()]


@app.get("/regions/{region_id}", response_model=RegionMarketProfile)
def get_region(region_id: str) -> RegionMarketProfile:
    profile = _provider.get(region_id)
    if profile is None:
        raise HTTPException(status_code=404, detail=str(UnknownRegion(region_id)))
    return profile


@app.post("/calculate", response_model=CalculateResponse)
def calculate_endpoint(
    payload: CalculateRequest,
    mode: ValidationMode = Query("strict", description="strict|clamp input validation"),
) -> CalculateResponse:
    inputs, profile = _prepare(payload, mode)
    result = calculate_roi(inputs, profile, _constants)
    logger.info(
        "calculate",
        extra={"context": {"region_id": inputs.region_id, "strategy": inputs.strategy}},
    )
    return CalculateResponse(region_name=profile.name, **result.to_dict())


@app.post("/insight", response_model=InsightResponse)
def insight_endpoint(
    payload: CalculateRequest,
    mode: ValidationMode = Query("strict"),
) -> InsightResponse:
    inputs, profile = _prepare(payload, mode)
    result = calculate_roi(inputs, profile, _constants)
    insight = generate_insight(result, profile.name, currency=config.CURRENCY)
    return InsightResponse(**asdict(insight))


@app.post("/sensitivity", response_model=SensitivityResponse)
def sensitivity_endpoint(
    payload: CalculateRequest,
    mode: ValidationMode = Query("strict"),
    steps: int = Query(13, ge=2, le=101),
) -> SensitivityResponse:
    inputs, profile = _prepare(payload, mode)
    params = resolve_parameters(inputs, profile, _constants)

    occupancies = [0.30 + i * (0.60 / (steps - 1)) for i in range(steps)]
    df = occupancy_sensitivity(params, occupancies)

    # NaN is not valid JSON
    rows = [
        {k: (None if isinstance(v, float) and math.isnan(v) else float(v)) for k, v in rec.items()}
        for rec in df.to_dict(orient="records")
    ]
    return SensitivityResponse(breakeven_occupancy=breakeven_occupancy(params), rows=rows)
