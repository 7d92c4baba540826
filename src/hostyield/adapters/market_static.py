# src/hostyield/adapters/market_static.py
from __future__ import annotations

from collections.abc import Iterable

from hostyield.domain.market import RegionMarketProfile

# Curated short-term-rental baselines (KES).
DEFAULT_REGIONS: tuple[RegionMarketProfile, ...] = (
    RegionMarketProfile(
        id="nbo-kilimani",
        name="Kilimani / Kileleshwa",
        county="Nairobi",
        demand_score=9.2,
        avg_occupancy=0.72,
        nightly_rate={
            "studio": 3_500.0,
            "one_bedroom": 5_500.0,
            "two_bedroom": 8_500.0,
            "three_bedroom": 12_000.0,
        },
        monthly_rent={
            "studio": 35_000.0,
            "one_bedroom": 60_000.0,
            "two_bedroom": 85_000.0,
            "three_bedroom": 120_000.0,
        },
        purchase_price={
            "studio": 4_500_000.0,
            "one_bedroom": 7_500_000.0,
            "two_bedroom": 13_000_000.0,
            "three_bedroom": 18_000_000.0,
        },
    ),
    RegionMarketProfile(
        id="nbo-westlands",
        name="Westlands / Parklands",
        county="Nairobi",
        demand_score=8.8,
        avg_occupancy=0.68,
        nightly_rate={
            "studio": 4_000.0,
            "one_bedroom": 6_500.0,
            "two_bedroom": 10_000.0,
            "three_bedroom": 15_000.0,
        },
        monthly_rent={
            "studio": 45_000.0,
            "one_bedroom": 75_000.0,
            "two_bedroom": 110_000.0,
            "three_bedroom": 150_000.0,
        },
        purchase_price={
            "studio": 5_500_000.0,
            "one_bedroom": 9_500_000.0,
            "two_bedroom": 16_000_000.0,
            "three_bedroom": 24_000_000.0,
        },
    ),
    RegionMarketProfile(
        id="msa-nyali",
        name="Nyali / Bamburi",
        county="Mombasa",
        demand_score=8.5,
        avg_occupancy=0.55,  # seasonal
        nightly_rate={
            "studio": 3_000.0,
            "one_bedroom": 5_000.0,
            "two_bedroom": 9_000.0,
            "three_bedroom": 14_000.0,
        },
        monthly_rent={
            "studio": 25_000.0,
            "one_bedroom": 40_000.0,
            "two_bedroom": 65_000.0,
            "three_bedroom": 90_000.0,
        },
        purchase_price={
            "studio": 3_500_000.0,
            "one_bedroom": 6_000_000.0,
            "two_bedroom": 11_000_000.0,
            "three_bedroom": 16_000_000.0,
        },
    ),
)


class StaticMarketProvider:
    """In-memory region table. Lookup only; profiles are immutable."""

    def __init__(self, regions: Iterable[RegionMarketProfile] = DEFAULT_REGIONS) -> None:
        self._regions: dict[str, RegionMarketProfile] = {r.id: r for r in regions}

    def get(self, region_id: str) -> RegionMarketProfile | None:
        return self._regions.get(region_id)

    def list_regions(self) -> list[RegionMarketProfile]:
        return list(self._regions.values())
