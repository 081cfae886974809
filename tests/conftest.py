"""Shared test fixtures — the default 2026 planning inputs plus small hand-checkable cases."""

from __future__ import annotations

import pytest

from frandy_simulator.config import (
    BracketDistribution,
    Scenario,
    SimulationConfig,
    Tier,
    TierAllocation,
)
from frandy_simulator.config.defaults import (
    DEFAULT_TIER_RATIOS,
    default_brand_distribution,
    default_onboarding_costs,
    default_tiers,
)
from frandy_simulator.engine.allocation import rebalance_allocation


@pytest.fixture
def distribution() -> list[BracketDistribution]:
    return default_brand_distribution()


@pytest.fixture
def tiers() -> list[Tier]:
    return default_tiers()


@pytest.fixture
def onboarding_costs() -> dict:
    return default_onboarding_costs()


@pytest.fixture
def allocation(distribution) -> list[TierAllocation]:
    """Default ratio table applied to the default distribution (45 brands)."""
    return rebalance_allocation(distribution, DEFAULT_TIER_RATIOS)


@pytest.fixture
def scenario() -> Scenario:
    return Scenario()


@pytest.fixture
def july_tier() -> Tier:
    """Single tier launching in July at 1,000,000 per brand per month."""
    return Tier(
        id="pro3",
        price_by_bracket={"101-200": 1_000_000},
        launch_month=7,
    )


@pytest.fixture
def july_allocation() -> list[TierAllocation]:
    """Ten brands in the 101-200 bracket on the July tier."""
    return [TierAllocation(tier_id="pro3", count_by_bracket={"101-200": 10})]


@pytest.fixture
def july_distribution() -> list[BracketDistribution]:
    return [BracketDistribution(bracket="101-200", brand_count=10, avg_stores_per_brand=150)]


@pytest.fixture
def onboarding_scenario() -> Scenario:
    return Scenario(simulation=SimulationConfig(include_onboarding=True))
