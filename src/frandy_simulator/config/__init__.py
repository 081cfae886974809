"""Configuration models — every simulation input type."""

from frandy_simulator.config.brackets import (
    BRACKETS,
    QUARTERS,
    TIER_IDS,
    Bracket,
    Quarter,
    TierId,
)
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.onboarding import OnboardingCostTable
from frandy_simulator.config.options import StrategyOption
from frandy_simulator.config.scenario import Scenario, SimulationConfig

__all__ = [
    "BRACKETS",
    "QUARTERS",
    "TIER_IDS",
    "Bracket",
    "Quarter",
    "TierId",
    "BracketDistribution",
    "Tier",
    "TierAllocation",
    "OnboardingCostTable",
    "StrategyOption",
    "SimulationConfig",
    "Scenario",
]
