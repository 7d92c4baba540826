from datetime import date

import pytest
from pydantic import ValidationError

from hostyield.adapters.market_smart import SmartMarketProvider
from hostyield.adapters.market_static import StaticMarketProvider
from hostyield.domain.market import RegionMarketProfile


def test_static_lookup(provider):
    assert {p.id for p in provider.list_regions()} == {"nbo-kilimani", "nbo-westlands", "msa-nyali"}
    assert provider.get("nbo-westlands").avg_occupancy == 0.68
    assert provider.get("nope") is None


def test_profiles_are_immutable(westlands):
    with pytest.raises(ValidationError):
        westlands.avg_occupancy = 0.9


def test_profile_requires_every_unit_type():
    with pytest.raises(ValidationError):
        RegionMarketProfile(
            id="x",
            name="X",
            county="Y",
            demand_score=5,
            avg_occupancy=0.5,
            nightly_rate={"studio": 1.0},
            monthly_rent={"studio": 1.0},
            purchase_price={"studio": 1.0},
        )


def test_smart_provider_is_deterministic_for_seed():
    base = StaticMarketProvider()
    a = SmartMarketProvider(base, today=date(2026, 3, 1), seed=7)
    b = SmartMarketProvider(base, today=date(2026, 3, 1), seed=7)
    assert a.get("nbo-westlands") == b.get("nbo-westlands")


def test_smart_variance_is_small():
    base = StaticMarketProvider()
    smart = SmartMarketProvider(base, today=date(2026, 3, 1), seed=1)
    for p in smart.list_regions():
        ref = base.get(p.id)
        for unit, rent in p.monthly_rent.items():
            assert rent == pytest.approx(ref.monthly_rent[unit], rel=0.031)
        assert p.nightly_rate == ref.nightly_rate


def test_coastal_peak_season_raises_rent():
    base = StaticMarketProvider()
    off = SmartMarketProvider(base, today=date(2026, 3, 1), seed=3).get("msa-nyali")
    peak = SmartMarketProvider(base, today=date(2026, 12, 1), seed=3).get("msa-nyali")
    assert peak.monthly_rent["studio"] > off.monthly_rent["studio"]
    assert peak.purchase_price == off.purchase_price


def test_snapshot_range(make_inputs):
    smart = SmartMarketProvider(StaticMarketProvider(), today=date(2026, 3, 1), seed=11)

    snap = smart.snapshot(make_inputs(strategy="buy"))

    assert snap.listing_type == "sale"
    assert snap.location == "Westlands / Parklands"
    assert snap.min_price < snap.average_price < snap.max_price
    assert 105 <= snap.sample_size < 125


def test_snapshot_unknown_region_is_empty(make_inputs):
    smart = SmartMarketProvider(StaticMarketProvider(), seed=1)
    snap = smart.snapshot(make_inputs(region_id="nowhere"))
    assert snap.sample_size == 0
    assert snap.listing_type == "rent"
