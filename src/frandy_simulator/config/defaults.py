"""Default input tables — single source of truth for scenario defaults.

Values mirror the 2026 KPI planning sheet: 45 prospective brands, five
packages priced per bracket, and a product roadmap where QSC ships in
March and sales aggregation in July.
"""

from __future__ import annotations

from frandy_simulator.config.brackets import Bracket, TierId
from frandy_simulator.config.distribution import BracketDistribution
from frandy_simulator.config.tier import Tier


def default_brand_distribution() -> list[BracketDistribution]:
    return [
        BracketDistribution(bracket="1-50", brand_count=2, avg_stores_per_brand=25),
        BracketDistribution(bracket="51-100", brand_count=15, avg_stores_per_brand=75),
        BracketDistribution(bracket="101-200", brand_count=15, avg_stores_per_brand=150),
        BracketDistribution(bracket="201-400", brand_count=10, avg_stores_per_brand=250),
        BracketDistribution(bracket="400+", brand_count=3, avg_stores_per_brand=400),
    ]


def default_tiers() -> list[Tier]:
    # Launch months follow the roadmap: QSC in March, sales aggregation in July.
    return [
        Tier(
            id="basic",
            modules=["AI", "menu_cleanup", "dashboard"],
            price_by_bracket={
                "1-50": 200_000, "51-100": 550_000, "101-200": 850_000,
                "201-400": 1_400_000, "400+": 2_200_000,
            },
            launch_month=1,
        ),
        Tier(
            id="pro1",
            modules=["basic", "QSC"],
            price_by_bracket={
                "1-50": 300_000, "51-100": 550_000, "101-200": 1_000_000,
                "201-400": 1_800_000, "400+": 3_000_000,
            },
            launch_month=3,
        ),
        Tier(
            id="pro2",
            modules=["basic", "sales_aggregation"],
            price_by_bracket={
                "1-50": 300_000, "51-100": 550_000, "101-200": 1_000_000,
                "201-400": 1_800_000, "400+": 3_000_000,
            },
            launch_month=7,
        ),
        Tier(
            id="pro3",
            modules=["basic", "QSC", "sales_aggregation"],
            price_by_bracket={
                "1-50": 450_000, "51-100": 1_150_000, "101-200": 2_100_000,
                "201-400": 3_200_000, "400+": 4_500_000,
            },
            launch_month=7,
        ),
        Tier(
            id="premium",
            modules=["all"],
            price_by_bracket={
                "1-50": 600_000, "51-100": 1_100_000, "101-200": 2_000_000,
                "201-400": 3_500_000, "400+": 5_500_000,
            },
            launch_month=7,
        ),
    ]


def default_onboarding_costs() -> dict[Bracket, int]:
    return {
        "1-50": 2_000_000,
        "51-100": 3_000_000,
        "101-200": 4_000_000,
        "201-400": 5_000_000,
        "400+": 8_000_000,
    }


DEFAULT_TIER_RATIOS: dict[TierId, float] = {
    "basic": 0.0714,    # 3 of 42
    "pro1": 0.1429,     # 6 of 42
    "pro2": 0.0714,     # 3 of 42
    "pro3": 0.7143,     # 30 of 42
    "premium": 0.0,
}
"""Default share of each bracket's brands per tier, used by rebalancing."""

DEFAULT_MONTHLY_INFLUX: list[float] = [
    0.01, 0.01, 0.03,            # Q1: 5%  (QSC ships in March)
    0.05, 0.05, 0.05,            # Q2: 15%
    0.1333, 0.1333, 0.1334,      # Q3: 40% (sales aggregation ships in July)
    0.1333, 0.1333, 0.1334,      # Q4: 40%
]
"""Share of the year's brands signing in each month (sums to 1.0).

Only the quarterly proportional-influx time base reads this curve."""

DEFAULT_TARGET_REVENUE = 1_000_000_000
"""Annual revenue target (KRW 1 billion)."""
