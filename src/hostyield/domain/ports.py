# src/hostyield/domain/ports.py
from __future__ import annotations

from typing import Protocol

from hostyield.domain.market import RegionMarketProfile


# ----------------------------
# Market baselines
# ----------------------------

class MarketBaselineProvider(Protocol):
    """
    Anything that can hand the engine a resolved RegionMarketProfile:
    a static table, a live-data service or a simulated generator.
    """

    def get(self, region_id: str) -> RegionMarketProfile | None:
        ...

    def list_regions(self) -> list[RegionMarketProfile]:
        ...
