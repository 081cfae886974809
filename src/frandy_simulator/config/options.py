"""Strategy options — alternative pricing / brand-mix presets to compare."""

from __future__ import annotations

from pydantic import BaseModel, Field

from frandy_simulator.config.distribution import BracketDistribution


class StrategyOption(BaseModel):
    """One what-if strategy.

    ``brand_distribution`` replaces the scenario's distribution when set;
    ``None`` keeps the scenario's own distribution.
    """

    name: str
    description: str = ""
    price_multiplier: float = Field(default=1.0, ge=0, description="Scale applied to every tier price")
    onboarding_multiplier: float = Field(default=1.0, ge=0, description="Scale applied to onboarding fees")
    brand_distribution: list[BracketDistribution] | None = None


def default_options() -> list[StrategyOption]:
    return [
        StrategyOption(
            name="Option 1: 2x price",
            description="Double subscription prices to improve profitability",
            price_multiplier=2.0,
        ),
        StrategyOption(
            name="Option 2: 2.2x price",
            description="Raise subscription prices 2.2x for a higher revenue margin",
            price_multiplier=2.2,
        ),
        StrategyOption(
            name="Option 3: large brand focus",
            description="Secure 25 brands with 200+ stores",
            price_multiplier=1.8,
            brand_distribution=[
                BracketDistribution(bracket="1-50", brand_count=0, avg_stores_per_brand=25),
                BracketDistribution(bracket="51-100", brand_count=5, avg_stores_per_brand=75),
                BracketDistribution(bracket="101-200", brand_count=15, avg_stores_per_brand=150),
                BracketDistribution(bracket="201-400", brand_count=15, avg_stores_per_brand=250),
                BracketDistribution(bracket="400+", brand_count=10, avg_stores_per_brand=400),
            ],
        ),
    ]
