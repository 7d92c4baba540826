# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from hostyield.adapters.market_static import StaticMarketProvider
from hostyield.api.http import app  # ensures imports resolve; run tests from repo root
from hostyield.domain.assumptions import EngineConstants
from hostyield.domain.inputs import Overrides, StrategyInputs


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture
def provider():
    return StaticMarketProvider()


@pytest.fixture
def constants():
    return EngineConstants()


@pytest.fixture
def westlands(provider):
    return provider.get("nbo-westlands")


@pytest.fixture
def make_inputs():
    def _make(strategy="sublease", unit_type="one_bedroom", tier="mid", region_id="nbo-westlands", **overrides):
        return StrategyInputs(
            region_id=region_id,
            unit_type=unit_type,
            strategy=strategy,
            furnishing_tier=tier,
            overrides=Overrides(**overrides),
        )
    return _make
