"""Top-level scenario — bundles every simulation input."""

from typing import Literal

from pydantic import BaseModel, Field, NonNegativeFloat, field_validator, model_validator

from frandy_simulator.config.brackets import TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier
from frandy_simulator.config.allocation import TierAllocation
from frandy_simulator.config.onboarding import OnboardingCostTable
from frandy_simulator.config.defaults import (
    DEFAULT_MONTHLY_INFLUX,
    DEFAULT_TARGET_REVENUE,
    DEFAULT_TIER_RATIOS,
    default_brand_distribution,
    default_onboarding_costs,
    default_tiers,
)


class SimulationConfig(BaseModel):
    """Simulation-level settings.

    ``time_base`` picks one of two materially different revenue models;
    the two are never blended inside a single run.
    """

    include_onboarding: bool = Field(
        default=False,
        description="Add one-time onboarding fees at each brand's activation.",
    )
    time_base: Literal["monthly_activation", "quarterly_influx"] = Field(
        default="monthly_activation",
        description="'monthly_activation': each tier's allocated brands go live in full "
                    "at the tier's launch month. "
                    "'quarterly_influx': brands sign up along the influx curve and tiers "
                    "earn a proportional share of their run-rate each quarter.",
    )
    target_revenue: int = Field(
        default=DEFAULT_TARGET_REVENUE, ge=0,
        description="Annual revenue target (KRW) used for achievement rates.",
    )
    tier_ratios: dict[TierId, NonNegativeFloat] = Field(
        default_factory=lambda: dict(DEFAULT_TIER_RATIOS),
        description="Per-tier share of each bracket. Seeds a scenario's allocation "
                    "when none is given and drives explicit rebalancing.",
    )
    monthly_influx: list[NonNegativeFloat] = Field(
        default_factory=lambda: list(DEFAULT_MONTHLY_INFLUX),
        min_length=12, max_length=12,
        description="Share of brands signing per month, summing to at most 1. "
                    "Quarterly influx mode only.",
    )

    @field_validator("monthly_influx")
    @classmethod
    def _influx_at_most_whole_year(cls, v: list[float]) -> list[float]:
        if sum(v) > 1.0 + 1e-6:
            raise ValueError(f"monthly influx shares sum to {sum(v):.4f}, must be at most 1")
        return v


class Scenario(BaseModel):
    """Complete input bundle for one simulation run.

    When ``allocation`` is not supplied it is rebalanced from
    ``brand_distribution`` by ``simulation.tier_ratios``.  A supplied
    allocation, even an empty one, is kept as given.
    """

    brand_distribution: list[BracketDistribution] = Field(default_factory=default_brand_distribution)
    tiers: list[Tier] = Field(default_factory=default_tiers)
    onboarding_costs: OnboardingCostTable = Field(default_factory=default_onboarding_costs)
    allocation: list[TierAllocation] = Field(default_factory=list)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    @model_validator(mode="after")
    def _seed_allocation(self) -> "Scenario":
        if "allocation" not in self.model_fields_set:
            # Deferred: the engine package imports this module.
            from frandy_simulator.engine.allocation import initial_allocation

            self.allocation = initial_allocation(self.brand_distribution, self.simulation.tier_ratios)
        return self
